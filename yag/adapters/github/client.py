"""GitHub REST v3 client: session with auth and GitHub media-type headers."""

import logging
from typing import Dict, Tuple

from yag import __version__
from yag.adapters.http import DEFAULT_TIMEOUT, HttpClient
from yag.profile.schemas import Credential

GITHUB_API_URL = "https://api.github.com"
GITHUB_MEDIA_TYPE = "application/vnd.github.v3+json"

LOG = logging.getLogger("yag.adapters.github.client")


class GitHubClient(HttpClient):
    """Authenticated GitHub API client (OAuth token or basic auth)."""

    def __init__(
        self,
        api_url: str = GITHUB_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
        headers: Dict[str, str] | None = None,
        auth: Tuple[str, str] | None = None,
    ) -> None:
        base_headers = {"Accept": GITHUB_MEDIA_TYPE, "User-Agent": f"yag/{__version__}"}
        base_headers.update(headers or {})
        super().__init__(api_url, timeout=timeout, headers=base_headers, auth=auth)

    @classmethod
    def with_oauth_token(
        cls,
        token: str,
        api_url: str = GITHUB_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> "GitHubClient":
        client = cls(api_url, timeout=timeout, headers={"Authorization": f"token {token}"})
        LOG.debug("GitHub client with OAuth token for %s", client.base_url)
        return client

    @classmethod
    def with_basic_auth(
        cls,
        username: str,
        token: str,
        api_url: str = GITHUB_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> "GitHubClient":
        client = cls(api_url, timeout=timeout, auth=(username, token))
        LOG.debug("GitHub client with basic auth as %s for %s", username, client.base_url)
        return client

    @classmethod
    def from_credential(
        cls,
        credential: Credential,
        api_url: str = GITHUB_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> "GitHubClient":
        if credential.is_basic_auth:
            return cls.with_basic_auth(credential.username or "", credential.token, api_url, timeout)
        return cls.with_oauth_token(credential.token, api_url, timeout)
