"""Session change events."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class AuthenticationSessionsChangeEvent:
    """Session ids a provider added, removed or changed in one update.

    Each list keeps first-seen order with duplicates dropped. An id showing up
    in more than one list is passed through as the provider reported it.
    """

    added: Tuple[str, ...] = ()
    removed: Tuple[str, ...] = ()
    changed: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("added", "removed", "changed"):
            object.__setattr__(self, name, tuple(dict.fromkeys(getattr(self, name))))

    @classmethod
    def of(
        cls,
        added: Iterable[str] = (),
        removed: Iterable[str] = (),
        changed: Iterable[str] = (),
    ) -> "AuthenticationSessionsChangeEvent":
        """Build an event from any iterables of session ids."""
        return cls(added=tuple(added), removed=tuple(removed), changed=tuple(changed))

    @property
    def is_empty(self) -> bool:
        """Check if the event carries no session ids at all."""
        return not (self.added or self.removed or self.changed)

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "added": list(self.added),
            "removed": list(self.removed),
            "changed": list(self.changed),
        }


@dataclass(frozen=True)
class SessionsChanged:
    """Event fired when a provider reports a session change."""

    provider_id: str
    event: AuthenticationSessionsChangeEvent

    @property
    def event_type(self) -> str:
        """Get event type identifier."""
        return "sessions_changed"

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_type": self.event_type,
            "provider_id": self.provider_id,
            "event": self.event.to_dict(),
        }
