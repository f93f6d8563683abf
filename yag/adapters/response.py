"""Response normalization: one outcome type for every provider.

Neither GitHub nor GitLab tags their bodies as success or error, so a
body is validated against the success schema first and only then against
the provider's error schema. A body that happens to satisfy the success
schema is taken as success.
"""

import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from yag.errors import DecodeError, ProviderApiError

T = TypeVar("T")

UNKNOWN_ERROR = "unknown error"

LOG = logging.getLogger("yag.adapters.response")


class Outcome(Generic[T]):
    """Decoded response: either data or a human-readable error message."""

    def __init__(self, data: T | None = None, error: str | None = None) -> None:
        self.data = data
        self.error = error

    @classmethod
    def success(cls, data: T) -> "Outcome[T]":
        return cls(data=data)

    @classmethod
    def failure(cls, message: str) -> "Outcome[T]":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the data or raise ProviderApiError with the error message."""
        if self.error is not None:
            raise ProviderApiError(self.error)
        return self.data  # type: ignore[return-value]


class ProviderError(BaseModel):
    """Error body of some provider; subclasses know how to phrase it."""

    def describe(self) -> str:
        raise NotImplementedError


class GitHubError(ProviderError):
    """GitHub error body: always carries `message`."""

    message: str
    error: str | None = None

    def describe(self) -> str:
        return self.message


class GitLabError(ProviderError):
    """GitLab error body: `message` (string or list) and/or `error` (list)."""

    message: Any = None
    error: Any = None

    def describe(self) -> str:
        if isinstance(self.message, str):
            return self.message
        if isinstance(self.message, list):
            messages = [m for m in self.message if isinstance(m, str)]
            if messages:
                return "\n".join(messages)
        if isinstance(self.error, list):
            errors = [e for e in self.error if isinstance(e, str)]
            if errors:
                return "\n".join(errors)
        if isinstance(self.error, str):
            return self.error
        return UNKNOWN_ERROR


def parse_json(text: str) -> Any:
    """Parse a body as JSON; raise DecodeError if it is not JSON."""
    try:
        return json.loads(text)
    except ValueError as e:
        snippet = text[:200].strip()
        raise DecodeError(f"response is not JSON: {snippet!r}") from e


def _validate(adapter: TypeAdapter, payload: Any) -> tuple[bool, Any]:
    try:
        return True, adapter.validate_python(payload)
    except ValidationError:
        return False, None


def decode(payload: Any, success: Any, error_model: type[ProviderError]) -> Outcome:
    """Decode an already-parsed payload: success schema first, then error schema.

    Args:
        payload: JSON value from the response body.
        success: Type of the success payload (model or e.g. list[Model]).
        error_model: Provider error schema.

    Raises:
        DecodeError: If the payload matches neither shape.
    """
    ok, data = _validate(TypeAdapter(success), payload)
    if ok:
        return Outcome.success(data)
    ok, err = _validate(TypeAdapter(error_model), payload)
    if ok:
        LOG.debug("found an error: %r", payload)
        return Outcome.failure(err.describe())
    raise DecodeError(f"unexpected response shape: {str(payload)[:200]}")


def decode_text(text: str, success: Any, error_model: type[ProviderError]) -> Outcome:
    """Parse a body as JSON and decode it with decode()."""
    LOG.debug("response: %s", text)
    return decode(parse_json(text), success, error_model)


def decode_github(text: str, success: Any) -> Outcome:
    return decode_text(text, success, GitHubError)


def decode_gitlab(text: str, success: Any) -> Outcome:
    return decode_text(text, success, GitLabError)
