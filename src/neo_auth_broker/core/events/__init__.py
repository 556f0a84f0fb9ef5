"""Broker domain events."""

from .sessions_changed import AuthenticationSessionsChangeEvent, SessionsChanged

__all__ = [
    "AuthenticationSessionsChangeEvent",
    "SessionsChanged",
]
