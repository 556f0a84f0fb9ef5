"""Neo-Auth-Broker - authentication provider registry and session broker.

Lets independent authentication providers register under a stable id and
routes login, logout, sign-out and session listing to them by id, fanning
provider and session changes out to observers.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import AuthBrokerSettings, get_settings

from .core import (
    # Entities
    AllowedExtension,
    AuthenticationSession,
    SessionAccount,

    # Events
    AuthenticationSessionsChangeEvent,
    SessionsChanged,

    # Exceptions
    AuthBrokerError,
    MalformedPersistedAllowList,
    ProviderNotFound,
    create_error_response,

    # Protocols
    AuthenticationProvider,
    StorageService,
)

from .application import (
    AuthenticationService,
    Emitter,
    Event,
    ProviderRegistry,
    Subscription,
    allowed_extensions_key,
    read_allowed_extensions,
    write_allowed_extensions,
)

from .infrastructure import MemoryStorageService, RedisStorageService
from .module import AuthBrokerModule

__all__ = [
    "__version__",
    "AuthBrokerSettings",
    "get_settings",
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
    "AuthenticationService",
    "Emitter",
    "Event",
    "ProviderRegistry",
    "Subscription",
    "allowed_extensions_key",
    "read_allowed_extensions",
    "write_allowed_extensions",
    "MemoryStorageService",
    "RedisStorageService",
    "AuthBrokerModule",
]
