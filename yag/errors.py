"""Errors raised by yag.

Every error is a YagError; the command line prints its message and exits
with status 1.
"""


class YagError(Exception):
    """Base class for all yag errors."""

    pass


class NoRemoteError(YagError):
    """Raised when the current repository has no origin remote."""

    def __init__(self, message: str = "no remote is set for current repository") -> None:
        super().__init__(message)


class UnresolvableHostError(YagError):
    """Raised when the remote URL has no parseable host."""

    def __init__(self, url: str) -> None:
        super().__init__(f"cannot resolve host of remote url: {url}")
        self.url = url


class UnsupportedHostError(YagError):
    """Raised for hosts yag knows about but does not support (gitlab.com)."""

    def __init__(self, host: str) -> None:
        super().__init__(f"unsupported repository host: {host}")
        self.host = host


class ProfileCorruptError(YagError):
    """Raised when the profile file matches neither current nor legacy schema."""

    pass


class ProfileWriteError(YagError):
    """Raised when the profile file or its directory cannot be written."""

    pass


class MissingCredentialError(YagError):
    """Raised when the profile has no usable credential for a host."""

    def __init__(self, host: str) -> None:
        super().__init__(f"no credential for {host}: try `yag profile add` first")
        self.host = host


class NetworkError(YagError):
    """Raised on transport-level failures (connection, timeout)."""

    pass


class ProviderApiError(YagError):
    """Raised when the provider reports a failure; message is the normalized one."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingTotalError(YagError):
    """Raised when GitLab's x-total pagination header is absent or not a number."""

    def __init__(self, message: str = "fail to get total") -> None:
        super().__init__(message)


class DecodeError(YagError):
    """Raised when a payload matches neither the success nor the error shape."""

    pass


class DeviceFlowError(YagError):
    """Raised when GitHub device-code login cannot complete."""

    pass


class GitRunnerError(YagError):
    """Raised when a git command fails."""

    pass
