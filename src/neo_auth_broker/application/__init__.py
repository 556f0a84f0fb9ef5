"""Broker application layer: services, queries and commands."""

from .services import AuthenticationService, Emitter, Event, ProviderRegistry, Subscription
from .queries import allowed_extensions_key, parse_allowed_extensions, read_allowed_extensions
from .commands import write_allowed_extensions

__all__ = [
    "AuthenticationService",
    "Emitter",
    "Event",
    "ProviderRegistry",
    "Subscription",
    "allowed_extensions_key",
    "parse_allowed_extensions",
    "read_allowed_extensions",
    "write_allowed_extensions",
]
