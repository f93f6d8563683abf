"""GitHub REST v3 and device-flow payloads (only the fields yag reads)."""

from pydantic import BaseModel


class User(BaseModel):
    login: str


class Ref(BaseModel):
    ref: str


class Pull(BaseModel):
    """Pull request from /pulls or an item of /search/issues.

    Search results are issues and have no base/head.
    """

    id: int
    number: int
    html_url: str
    title: str
    user: User
    base: Ref | None = None
    head: Ref | None = None
    updated_at: str


class SearchResult(BaseModel):
    total_count: int
    incomplete_results: bool = False
    items: list[Pull]


class DeviceCode(BaseModel):
    device_code: str
    user_code: str
    verification_uri: str
    expires_in: int
    interval: int = 5


class AccessToken(BaseModel):
    access_token: str
    token_type: str | None = None
    scope: str | None = None


class AccessTokenError(BaseModel):
    """Pending/failed device-flow poll: error code plus optional new interval."""

    error: str
    error_description: str = ""
    interval: int | None = None
