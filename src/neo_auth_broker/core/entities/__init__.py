"""Broker domain entities."""

from .authentication_session import AuthenticationSession, SessionAccount
from .allowed_extension import AllowedExtension

__all__ = [
    "AuthenticationSession",
    "SessionAccount",
    "AllowedExtension",
]
