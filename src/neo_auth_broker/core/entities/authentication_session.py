"""Authentication session domain entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class SessionAccount:
    """Account a session was issued for."""

    display_name: str
    id: str


@dataclass(frozen=True)
class AuthenticationSession:
    """Result of a successful provider login.

    Handles ONLY session representation. Sessions are created and destroyed
    by their provider; the broker passes them through without inspecting the
    access token.
    """

    id: str
    access_token: str = field(repr=False)
    account: SessionAccount
    scopes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize scopes to an ordered, duplicate-free tuple."""
        object.__setattr__(self, "scopes", _ordered_unique(self.scopes))

    def has_scopes(self, scopes: Iterable[str]) -> bool:
        """Check whether every requested scope was granted."""
        return set(scopes).issubset(self.scopes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert session to dictionary, leaving the access token out."""
        return {
            "id": self.id,
            "account": {
                "display_name": self.account.display_name,
                "id": self.account.id,
            },
            "scopes": list(self.scopes),
        }


def _ordered_unique(values: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(values))
