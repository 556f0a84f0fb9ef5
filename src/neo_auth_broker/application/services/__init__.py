"""Broker application services."""

from .event_emitter import Emitter, Event, Subscription
from .provider_registry import ProviderRegistry
from .authentication_service import AuthenticationService

__all__ = [
    "Emitter",
    "Event",
    "Subscription",
    "ProviderRegistry",
    "AuthenticationService",
]
