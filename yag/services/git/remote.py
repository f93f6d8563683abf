"""Origin remote introspection: read the URL and parse host and owner/repo."""

import re
from pathlib import Path
from urllib.parse import urlsplit

from yag.errors import GitRunnerError, NoRemoteError, UnresolvableHostError
from yag.models import RemoteDescriptor
from yag.services.git._run import LOG, _run_git

# user@host:owner/repo.git (scp-like syntax, no scheme)
_SCP_LIKE_RE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")

# ports that need no mention in a host
DEFAULT_PORTS = {"http": 80, "https": 443}


def _strip_path(path: str) -> str:
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    return path


def parse_remote_url(url: str) -> RemoteDescriptor:
    """Parse a git remote URL into host and full_name.

    Supports https/http/ssh/git URLs and scp-like `git@host:owner/repo`.
    Local paths and file:// URLs have no host. A non-default port of an
    http(s) URL stays part of the host (`git.example.com:8443`); ssh ports
    do not, since they say nothing about the web API.

    Raises:
        UnresolvableHostError: If no host (or no repository path) can be found.
    """
    url = url.strip()
    if "://" in url:
        parts = urlsplit(url)
        host = parts.hostname
        try:
            port = parts.port
        except ValueError as e:
            raise UnresolvableHostError(url) from e
        if host and port and DEFAULT_PORTS.get(parts.scheme, port) != port:
            host = f"{host}:{port}"
        full_name = _strip_path(parts.path)
    else:
        m = _SCP_LIKE_RE.match(url)
        if not m:
            raise UnresolvableHostError(url)
        host = m.group("host")
        full_name = _strip_path(m.group("path"))
    if not host or not full_name:
        raise UnresolvableHostError(url)
    return RemoteDescriptor(host=host.lower(), full_name=full_name)


def get_remote_url(name: str = "origin", repo_dir: Path | None = None) -> str:
    """Return the configured URL of a remote.

    Raises:
        NoRemoteError: If the remote is missing or git fails.
    """
    try:
        url = _run_git(["remote", "get-url", name], cwd=repo_dir)
    except GitRunnerError as e:
        raise NoRemoteError() from e
    if not url:
        raise NoRemoteError()
    return url


def get_remote(repo_dir: Path | None = None) -> RemoteDescriptor:
    """Remote descriptor of the origin remote of the repository at repo_dir (or cwd)."""
    url = get_remote_url(repo_dir=repo_dir)
    remote = parse_remote_url(url)
    LOG.debug("remote: %s", remote)
    return remote
