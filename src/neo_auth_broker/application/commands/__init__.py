"""Broker commands."""

from .write_allowed_extensions import write_allowed_extensions

__all__ = ["write_allowed_extensions"]
