"""
Authentication provider registry.

ONLY handles the provider id to provider mapping and its change events.
"""

import logging
from typing import Dict, List, Optional

from ...config.settings import AuthBrokerSettings, get_settings
from ...core.protocols import AuthenticationProvider
from .event_emitter import Emitter

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Registry of authentication providers keyed by provider id.

    Holds references only: registering never takes ownership and removing
    never calls into the provider. Lookups report absence as None/False,
    none of the operations raise.
    """

    def __init__(self, settings: Optional[AuthBrokerSettings] = None):
        self._settings = settings or get_settings()
        self._providers: Dict[str, AuthenticationProvider] = {}
        self.on_did_register: Emitter[str] = Emitter("provider_registered")
        self.on_did_unregister: Emitter[str] = Emitter("provider_unregistered")

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def is_registered(self, provider_id: str) -> bool:
        """Check if a provider is registered under provider_id."""
        return provider_id in self._providers

    def provider_ids(self) -> List[str]:
        """Snapshot of registered ids in registration order."""
        return list(self._providers)

    def get(self, provider_id: str) -> Optional[AuthenticationProvider]:
        """Get the provider registered under provider_id, if any."""
        return self._providers.get(provider_id)

    def register(self, provider_id: str, provider: AuthenticationProvider) -> None:
        """
        Register or replace the provider for provider_id.

        Replacing keeps the original registration position and fires the
        registered event again; the replaced provider gets no notification.

        Args:
            provider_id: Stable provider identifier
            provider: Provider handle to route operations to
        """
        replacing = provider_id in self._providers and self._providers[provider_id] is not provider
        if replacing and self._settings.warn_on_provider_replace:
            logger.warning(f"Authentication provider '{provider_id}' already registered, replacing")

        self._providers[provider_id] = provider
        logger.info(f"Registered authentication provider '{provider_id}'")
        self.on_did_register.fire(provider_id)

    def unregister(self, provider_id: str) -> bool:
        """
        Unregister the provider for provider_id.

        Returns:
            True if a provider was found and removed
        """
        if provider_id not in self._providers:
            return False

        del self._providers[provider_id]

        logger.info(f"Unregistered authentication provider '{provider_id}'")
        self.on_did_unregister.fire(provider_id)
        return True

    def dispose(self) -> None:
        """Drop all event subscribers. Registrations are left untouched."""
        self.on_did_register.dispose()
        self.on_did_unregister.dispose()
