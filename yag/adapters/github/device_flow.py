"""GitHub OAuth device-code login.

1. POST {login_url}/device/code -> user code and verification URL.
2. The user enters the code in a browser.
3. POST {login_url}/oauth/access_token until GitHub answers with a token.
   `authorization_pending` retries, `slow_down` waits the interval GitHub
   sends, `expired_token` and anything else abort.
"""

import logging
import time
from typing import Callable

from pydantic import ValidationError

from yag.adapters.github.schemas import AccessToken, AccessTokenError, DeviceCode
from yag.adapters.http import DEFAULT_TIMEOUT, HttpClient
from yag.adapters.response import parse_json
from yag.errors import DecodeError, DeviceFlowError

GITHUB_LOGIN_URL = "https://github.com/login"
GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"
DEFAULT_INTERVAL = 5

PENDING = "authorization_pending"
SLOW_DOWN = "slow_down"
EXPIRED = "expired_token"

LOG = logging.getLogger("yag.adapters.github.device_flow")


class GitHubDeviceFlow:
    """Anonymous client for github.com device-flow endpoints."""

    def __init__(
        self,
        client_id: str,
        scope: str = "repo",
        login_url: str = GITHUB_LOGIN_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = HttpClient(login_url, timeout=timeout, headers={"Accept": "application/json"})
        self._client_id = client_id
        self._scope = scope

    def gen_device_code(self) -> DeviceCode:
        resp = self._client.request(
            "POST",
            "/device/code",
            json={"client_id": self._client_id, "scope": self._scope},
        )
        payload = parse_json(resp.text)
        try:
            return DeviceCode.model_validate(payload)
        except ValidationError as e:
            if isinstance(payload, dict) and payload.get("error"):
                error = payload.get("error_description") or payload["error"]
                raise DeviceFlowError(str(error)) from e
            raise DecodeError(f"unexpected device code response: {str(payload)[:200]}") from e

    def gen_access_token(self, device_code: str) -> AccessToken | AccessTokenError:
        """One poll of the token endpoint: a token, or the pending/failed state."""
        resp = self._client.request(
            "POST",
            "/oauth/access_token",
            json={
                "client_id": self._client_id,
                "device_code": device_code,
                "grant_type": GRANT_TYPE,
            },
        )
        payload = parse_json(resp.text)
        for model in (AccessToken, AccessTokenError):
            try:
                return model.model_validate(payload)
            except ValidationError:
                continue
        raise DecodeError("unexpected access token response")

    def login(
        self,
        notify: Callable[[str], None] = print,
        confirm: Callable[[str], str] = input,
        sleep: Callable[[float], None] = time.sleep,
    ) -> str:
        """Run the whole flow interactively and return the OAuth access token."""
        code = self.gen_device_code()
        notify(f"Please open {code.verification_uri} in your browser and enter the code {code.user_code}")
        confirm("Press enter to continue")

        while True:
            result = self.gen_access_token(code.device_code)
            if isinstance(result, AccessToken):
                LOG.info("GitHub login complete")
                return result.access_token

            if result.error == PENDING:
                notify(result.error_description or "authorization pending")
            elif result.error == SLOW_DOWN:
                interval = result.interval or DEFAULT_INTERVAL
                notify(result.error_description or "slow down")
                notify(f"Please wait {interval} seconds")
                sleep(interval)
            elif result.error == EXPIRED:
                raise DeviceFlowError("expired")
            else:
                raise DeviceFlowError(result.error_description or result.error or "unknown error")
            confirm("Press enter to retry")
