"""Credential store: the profile file and per-host token lookup.

The file is YAML:

    github:
      access_token: gho_xxx
    gitlab_self_hosted:
      - host: gitlab.example.com
        token: glpat-xxx

Older versions wrote a single GitLab entry as a mapping instead of a
list; it is migrated on load and rewritten in the current shape on the
next save. The file is read and rewritten without locking.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import ValidationError

from yag.errors import ProfileCorruptError, ProfileWriteError
from yag.profile.schemas import Credential, Profile

GITHUB_HOST = "github.com"
PROFILE_MODE = 0o600

LOG = logging.getLogger("yag.profile.store")


def _wrap_single_gitlab_entry(raw: dict[str, Any]) -> dict[str, Any]:
    """v1 -> v2: `gitlab_self_hosted: {host, token}` becomes a one-element list."""
    entry = raw.get("gitlab_self_hosted")
    if isinstance(entry, dict):
        return {**raw, "gitlab_self_hosted": [entry]}
    return raw


# Applied in order; each step recognises one older shape and upgrades it.
MIGRATIONS: list[Callable[[dict[str, Any]], dict[str, Any]]] = [
    _wrap_single_gitlab_entry,
]


def migrate(raw: dict[str, Any]) -> dict[str, Any]:
    """Upgrade a raw profile document of any known version to the current shape."""
    for step in MIGRATIONS:
        raw = step(raw)
    return raw


def decode_profile(text: str) -> Profile:
    """Parse profile YAML (any known version) into a Profile.

    Raises:
        ProfileCorruptError: If the text is not YAML or matches no schema.
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ProfileCorruptError(f"profile is not valid YAML: {e}") from e
    if raw is None:
        return Profile()
    if not isinstance(raw, dict):
        raise ProfileCorruptError("profile must be a mapping")
    try:
        return Profile.model_validate(migrate(raw))
    except ValidationError as e:
        raise ProfileCorruptError(f"profile does not match any known schema: {e}") from e


def encode_profile(profile: Profile) -> str:
    payload = profile.model_dump(mode="json", exclude_none=True)
    return yaml.dump(
        payload,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )


def resolve_credential(profile: Profile, host: str) -> Credential | None:
    """Credential for host, or None.

    github.com uses the GitHub block (OAuth token first, then basic auth);
    every other host is matched exactly against the GitLab entries.
    """
    if host == GITHUB_HOST:
        gh = profile.github
        if gh is None:
            return None
        if gh.access_token:
            return Credential(token=gh.access_token)
        if gh.username and gh.token:
            return Credential(token=gh.token, username=gh.username)
        return None
    for entry in profile.gitlab_self_hosted:
        if entry.host == host:
            return Credential(token=entry.token)
    return None


def resolve_token(profile: Profile, host: str) -> str | None:
    """Token for host, or None when no entry matches exactly."""
    credential = resolve_credential(profile, host)
    return credential.token if credential else None


class CredentialStore:
    """Loads and saves the profile file at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Profile:
        """Read the profile; create and save an empty one if the file is missing."""
        if not self.path.is_file():
            profile = Profile()
            self.save(profile)
            return profile
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ProfileCorruptError(f"cannot read profile {self.path}: {e}") from e
        profile = decode_profile(text)
        LOG.debug(
            "Loaded profile %s (github: %s, gitlab hosts: %s)",
            self.path,
            profile.github is not None,
            [e.host for e in profile.gitlab_self_hosted],
        )
        return profile

    def save(self, profile: Profile) -> Path:
        """Write the profile, creating the parent directory if needed.

        The file is left readable by its owner only.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(encode_profile(profile), encoding="utf-8")
            os.chmod(self.path, PROFILE_MODE)
        except OSError as e:
            raise ProfileWriteError(f"cannot write profile {self.path}: {e}") from e
        LOG.debug("Saved profile to %s", self.path)
        return self.path
