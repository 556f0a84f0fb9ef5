"""Pytest configuration and fixtures for neo-auth-broker tests."""

from typing import Callable, List, Optional, Sequence

import pytest
from unittest.mock import AsyncMock, MagicMock

from neo_auth_broker.config.settings import AuthBrokerSettings
from neo_auth_broker.core.entities import AuthenticationSession, SessionAccount
from neo_auth_broker.core.events import AuthenticationSessionsChangeEvent
from neo_auth_broker.application.services import AuthenticationService, ProviderRegistry
from neo_auth_broker.infrastructure.repositories import MemoryStorageService


class FakeProvider:
    """In-memory provider implementing the AuthenticationProvider protocol."""

    def __init__(
        self,
        provider_id: str,
        display_name: Optional[str] = None,
        supports_multiple_accounts: bool = True,
    ):
        self.id = provider_id
        self.display_name = display_name or provider_id.title()
        self.supports_multiple_accounts = supports_multiple_accounts
        self.sessions: List[AuthenticationSession] = []
        self.updates: List[AuthenticationSessionsChangeEvent] = []
        self._counter = 0

    def has_sessions(self) -> bool:
        return bool(self.sessions)

    async def get_sessions(self) -> Sequence[AuthenticationSession]:
        return list(self.sessions)

    async def login(self, scopes: Sequence[str]) -> AuthenticationSession:
        self._counter += 1
        session = AuthenticationSession(
            id=f"{self.id}-session-{self._counter}",
            access_token=f"secret-{self._counter}",
            account=SessionAccount(display_name="alice", id="account-alice"),
            scopes=tuple(scopes),
        )
        self.sessions.append(session)
        return session

    async def logout(self, session_id: str) -> None:
        self.sessions = [s for s in self.sessions if s.id != session_id]

    async def sign_out(self, account_name: str) -> None:
        self.sessions = [s for s in self.sessions if s.account.display_name != account_name]

    async def update_session_items(self, event: AuthenticationSessionsChangeEvent) -> None:
        self.updates.append(event)


@pytest.fixture
def settings() -> AuthBrokerSettings:
    """Settings isolated from the process environment and .env files."""
    return AuthBrokerSettings(_env_file=None)


@pytest.fixture
def registry(settings) -> ProviderRegistry:
    return ProviderRegistry(settings)


@pytest.fixture
def service(registry, settings) -> AuthenticationService:
    return AuthenticationService(registry, settings)


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    """Factory for fake providers."""
    return FakeProvider


@pytest.fixture
def github_provider() -> FakeProvider:
    return FakeProvider("github", display_name="GitHub", supports_multiple_accounts=False)


@pytest.fixture
def mock_provider() -> MagicMock:
    """Provider double with every async capability mocked."""
    provider = MagicMock()
    provider.id = "mock"
    provider.display_name = "Mock Provider"
    provider.supports_multiple_accounts = True
    provider.has_sessions = MagicMock(return_value=False)
    provider.get_sessions = AsyncMock(return_value=[])
    provider.login = AsyncMock()
    provider.logout = AsyncMock(return_value=None)
    provider.sign_out = AsyncMock(return_value=None)
    provider.update_session_items = AsyncMock(return_value=None)
    return provider


@pytest.fixture
def sample_change_event() -> AuthenticationSessionsChangeEvent:
    return AuthenticationSessionsChangeEvent.of(added=["s-1"], removed=["s-0"], changed=[])


@pytest.fixture
def memory_storage() -> MemoryStorageService:
    return MemoryStorageService()
