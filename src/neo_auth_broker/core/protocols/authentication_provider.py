"""Authentication provider protocol contract."""

from typing import Protocol, Sequence, runtime_checkable

from ..entities import AuthenticationSession
from ..events import AuthenticationSessionsChangeEvent


@runtime_checkable
class AuthenticationProvider(Protocol):
    """Protocol for a pluggable authentication provider.

    Defines ONLY the capability set the broker delegates to. Implementations
    own their login flow and session storage; the registry keeps a reference
    and never creates or tears providers down.
    """

    id: str
    display_name: str
    supports_multiple_accounts: bool

    def has_sessions(self) -> bool:
        """Check whether the provider currently holds any session."""
        ...

    async def get_sessions(self) -> Sequence[AuthenticationSession]:
        """Return the sessions the provider currently holds."""
        ...

    async def login(self, scopes: Sequence[str]) -> AuthenticationSession:
        """Create a session granting (some of) the requested scopes.

        Args:
            scopes: Capability identifiers requested by the caller

        Returns:
            Newly created session
        """
        ...

    async def logout(self, session_id: str) -> None:
        """Destroy a session held by the provider."""
        ...

    async def sign_out(self, account_name: str) -> None:
        """Sign out every session of an account."""
        ...

    async def update_session_items(self, event: AuthenticationSessionsChangeEvent) -> None:
        """Apply provider-local bookkeeping for a session change."""
        ...
