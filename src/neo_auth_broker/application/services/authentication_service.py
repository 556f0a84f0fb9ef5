"""Authentication session broker.

Routes session operations to the provider registered under an id and
republishes provider session changes to observers.
"""

import logging
from typing import List, Optional, Sequence

from ...config.settings import AuthBrokerSettings, get_settings
from ...core.entities import AuthenticationSession
from ...core.events import AuthenticationSessionsChangeEvent, SessionsChanged
from ...core.exceptions import ProviderNotFound
from ...core.protocols import AuthenticationProvider
from .event_emitter import Emitter, Event
from .provider_registry import ProviderRegistry

logger = logging.getLogger(__name__)


class AuthenticationService:
    """Stateless facade over a ProviderRegistry.

    Every delegating operation looks the provider up first and raises
    ProviderNotFound when nothing is registered under the id. Provider
    exceptions propagate unchanged; nothing is retried here.

    Concurrent calls are not serialized: two overlapping logins against the
    same provider run as two independent coroutines.
    """

    def __init__(
        self,
        registry: Optional[ProviderRegistry] = None,
        settings: Optional[AuthBrokerSettings] = None,
    ):
        self._settings = settings or get_settings()
        self.registry = registry if registry is not None else ProviderRegistry(self._settings)
        self._sessions_changed: Emitter[SessionsChanged] = Emitter("sessions_changed")

    # Event channels

    @property
    def on_did_register_authentication_provider(self) -> Event[str]:
        return self.registry.on_did_register.event

    @property
    def on_did_unregister_authentication_provider(self) -> Event[str]:
        return self.registry.on_did_unregister.event

    @property
    def on_did_change_sessions(self) -> Event[SessionsChanged]:
        return self._sessions_changed.event

    # Registry operations

    def is_authentication_provider_registered(self, provider_id: str) -> bool:
        return self.registry.is_registered(provider_id)

    def get_provider_ids(self) -> List[str]:
        return self.registry.provider_ids()

    def register_authentication_provider(self, provider_id: str, provider: AuthenticationProvider) -> None:
        self.registry.register(provider_id, provider)

    def unregister_authentication_provider(self, provider_id: str) -> None:
        self.registry.unregister(provider_id)

    # Session change propagation

    async def sessions_update(self, provider_id: str, event: AuthenticationSessionsChangeEvent) -> None:
        """Publish a provider session change, then let the provider apply it.

        Observers are notified even when provider_id is no longer registered,
        so late updates from a provider being torn down are not lost. The
        provider-local step is skipped silently in that case.

        Args:
            provider_id: Provider reporting the change
            event: Added, removed and changed session ids
        """
        if self._settings.log_session_updates:
            logger.debug(f"Sessions update from '{provider_id}': {event.to_dict()}")

        self._sessions_changed.fire(SessionsChanged(provider_id=provider_id, event=event))

        if provider_id in self.registry:
            await self.registry.get(provider_id).update_session_items(event)

    # Delegating operations

    def get_display_name(self, provider_id: str) -> str:
        return self._require_provider(provider_id).display_name

    def supports_multiple_accounts(self, provider_id: str) -> bool:
        return self._require_provider(provider_id).supports_multiple_accounts

    async def get_sessions(self, provider_id: str) -> Sequence[AuthenticationSession]:
        provider = self._require_provider(provider_id)
        return await provider.get_sessions()

    async def login(self, provider_id: str, scopes: Sequence[str]) -> AuthenticationSession:
        """Log in through the provider registered under provider_id.

        Args:
            provider_id: Target provider
            scopes: Capability identifiers to request

        Returns:
            Session created by the provider

        Raises:
            ProviderNotFound: If no provider is registered under provider_id
        """
        provider = self._require_provider(provider_id)
        return await provider.login(list(scopes))

    async def logout(self, provider_id: str, session_id: str) -> None:
        provider = self._require_provider(provider_id)
        await provider.logout(session_id)

    async def sign_out_of_account(self, provider_id: str, account_name: str) -> None:
        provider = self._require_provider(provider_id)
        await provider.sign_out(account_name)

    def dispose(self) -> None:
        """Drop every subscriber on all three channels."""
        self._sessions_changed.dispose()
        self.registry.dispose()

    def _require_provider(self, provider_id: str) -> AuthenticationProvider:
        if provider_id not in self.registry:
            raise ProviderNotFound(provider_id, registered_ids=self.registry.provider_ids())
        return self.registry.get(provider_id)
