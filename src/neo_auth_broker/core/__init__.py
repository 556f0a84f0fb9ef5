"""Broker core: domain objects and contracts only."""

from .entities import AllowedExtension, AuthenticationSession, SessionAccount
from .events import AuthenticationSessionsChangeEvent, SessionsChanged
from .exceptions import (
    AuthBrokerError,
    MalformedPersistedAllowList,
    ProviderNotFound,
    create_error_response,
)
from .protocols import AuthenticationProvider, StorageService

__all__ = [
    "AllowedExtension",
    "AuthenticationSession",
    "SessionAccount",
    "AuthenticationSessionsChangeEvent",
    "SessionsChanged",
    "AuthBrokerError",
    "MalformedPersistedAllowList",
    "ProviderNotFound",
    "create_error_response",
    "AuthenticationProvider",
    "StorageService",
]
