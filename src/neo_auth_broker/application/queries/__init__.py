"""Broker queries."""

from .read_allowed_extensions import (
    allowed_extensions_key,
    parse_allowed_extensions,
    read_allowed_extensions,
)

__all__ = [
    "allowed_extensions_key",
    "parse_allowed_extensions",
    "read_allowed_extensions",
]
