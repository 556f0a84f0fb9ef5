"""Malformed persisted allow list exception."""

from .base import AuthBrokerError


class MalformedPersistedAllowList(AuthBrokerError):
    """Raised when a stored allowed-extensions value cannot be parsed.

    Never reaches callers of read_allowed_extensions: the reader logs it and
    falls back to an empty list.
    """

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Stored allow list under '{key}' is malformed: {reason}",
            details={"key": key, "reason": reason},
        )
        self.key = key
        self.reason = reason
