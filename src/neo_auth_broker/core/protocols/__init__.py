"""Broker core protocols.

Each protocol defines exactly one collaborator capability.
"""

from .authentication_provider import AuthenticationProvider
from .storage_service import StorageService

__all__ = [
    "AuthenticationProvider",
    "StorageService",
]
