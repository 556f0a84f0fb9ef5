"""Broker exceptions.

ProviderNotFound is the only error the broker manufactures itself; provider
failures propagate untouched.
"""

from .base import AuthBrokerError, create_error_response
from .provider_not_found import ProviderNotFound
from .malformed_allow_list import MalformedPersistedAllowList

__all__ = [
    "AuthBrokerError",
    "create_error_response",
    "ProviderNotFound",
    "MalformedPersistedAllowList",
]
