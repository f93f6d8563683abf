"""Shared HTTP plumbing for provider clients (requests.Session + base URL)."""

import logging
from typing import Any, Dict, Mapping, Tuple

import requests

from yag.errors import NetworkError

LOG = logging.getLogger("yag.adapters.http")

DEFAULT_TIMEOUT = 30


class HttpClient:
    """requests.Session bound to one base URL.

    Never raises on HTTP status: bodies of failed calls are decoded by the
    response normalizer like any other.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = DEFAULT_TIMEOUT,
        headers: Dict[str, str] | None = None,
        auth: Tuple[str, str] | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        if headers:
            self._session.headers.update(headers)
        if auth is not None:
            self._session.auth = auth

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Mapping[str, str]:
        return self._session.headers

    @property
    def auth(self) -> Tuple[str, str] | None:
        return self._session.auth

    def url(self, path: str) -> str:
        return f"{self._base_url}{path}" if path.startswith("/") else f"{self._base_url}/{path}"

    def request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        """Send a request; JSON bodies get Content-Type: application/json."""
        url = self.url(path)
        LOG.debug("%s %s params=%s", method, url, params)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise NetworkError(f"{method} {url}: {e}") from e
        LOG.debug("%s %s -> %s", method, url, resp.status_code)
        return resp
