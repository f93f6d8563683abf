"""Repository factory: pick the provider that owns the origin remote.

github.com is GitHub; gitlab.com is not supported; any other host is
taken to be a self-hosted GitLab instance with a token in the profile.
"""

import logging
from typing import Callable

from yag.adapters.github.client import GitHubClient
from yag.adapters.github.repository import GitHubRepository
from yag.adapters.gitlab.client import GitLabClient
from yag.adapters.gitlab.repository import GitLabRepository
from yag.config import AppConfig
from yag.errors import MissingCredentialError, UnsupportedHostError
from yag.models import RemoteDescriptor
from yag.profile import CredentialStore, resolve_credential
from yag.profile.store import GITHUB_HOST
from yag.services.git import get_remote as git_remote

GITLAB_SAAS_HOST = "gitlab.com"

RepositoryHandle = GitHubRepository | GitLabRepository

LOG = logging.getLogger("yag.adapters.factory")


def _github(config: AppConfig, remote: RemoteDescriptor, store: CredentialStore) -> GitHubRepository:
    credential = resolve_credential(store.load(), GITHUB_HOST)
    if credential is None:
        raise MissingCredentialError(GITHUB_HOST)
    client = GitHubClient.from_credential(credential, config.github.api_url, config.pr.timeout)
    return GitHubRepository(remote.full_name, client, page_size=config.pr.page_size)


def _gitlab_self_hosted(config: AppConfig, remote: RemoteDescriptor, store: CredentialStore) -> GitLabRepository:
    credential = resolve_credential(store.load(), remote.host)
    if credential is None:
        raise MissingCredentialError(remote.host)
    client = GitLabClient(
        remote.host,
        credential.token,
        scheme=config.gitlab.scheme,
        timeout=config.pr.timeout,
    )
    return GitLabRepository.init(client, remote.full_name, page_size=config.pr.page_size)


def resolve(
    config: AppConfig,
    remote: RemoteDescriptor | None = None,
    store: CredentialStore | None = None,
    get_remote: Callable[[], RemoteDescriptor] | None = None,
) -> RepositoryHandle:
    """Build the repository for the origin remote (or the given remote).

    Raises:
        NoRemoteError: No origin remote.
        UnresolvableHostError: Remote URL without a host.
        UnsupportedHostError: gitlab.com.
        MissingCredentialError: No credential for the host in the profile.
    """
    if remote is None:
        remote = (get_remote or git_remote)()
    store = store or CredentialStore(config.profile_path)

    LOG.debug("resolving repository for %s/%s", remote.host, remote.full_name)
    if remote.host == GITHUB_HOST:
        return _github(config, remote, store)
    if remote.host == GITLAB_SAAS_HOST:
        raise UnsupportedHostError(remote.host)
    return _gitlab_self_hosted(config, remote, store)
