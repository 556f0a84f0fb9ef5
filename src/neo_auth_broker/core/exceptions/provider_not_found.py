"""Authentication provider not found exception."""

from typing import List, Optional

from .base import AuthBrokerError


class ProviderNotFound(AuthBrokerError):
    """Raised when an operation targets a provider id with no registration.

    Handles ONLY the missing-provider representation. The broker raises it
    before any provider work starts, so nothing needs rolling back.
    """

    def __init__(
        self,
        provider_id: str,
        *,
        registered_ids: Optional[List[str]] = None,
    ) -> None:
        """Initialize provider not found exception.

        Args:
            provider_id: Provider identifier that was requested
            registered_ids: Provider ids registered at the time of the lookup
        """
        super().__init__(
            f"No authentication provider '{provider_id}' is currently registered.",
            details={
                "provider_id": provider_id,
                "registered_ids": list(registered_ids or []),
            },
        )
        self.provider_id = provider_id
        self.registered_ids = list(registered_ids or [])

    @property
    def has_suggestions(self) -> bool:
        """Check if any other providers were registered at lookup time."""
        return len(self.registered_ids) > 0

    def get_help_message(self) -> str:
        """Get helpful message for resolving the issue."""
        if self.has_suggestions:
            return f"Registered providers: {', '.join(self.registered_ids)}"
        return "No authentication providers are registered. Check provider initialization order."
