"""Credential profile: schemas, on-disk store and per-host resolution."""

from yag.profile.schemas import Credential, GitHubCredentials, GitLabSelfHostedEntry, Profile
from yag.profile.store import (
    CredentialStore,
    decode_profile,
    encode_profile,
    migrate,
    resolve_credential,
    resolve_token,
)

__all__ = [
    "Credential",
    "CredentialStore",
    "GitHubCredentials",
    "GitLabSelfHostedEntry",
    "Profile",
    "decode_profile",
    "encode_profile",
    "migrate",
    "resolve_credential",
    "resolve_token",
]
