"""Host framework integration."""

from .dependencies import get_authentication_service, install_authentication_service

__all__ = [
    "get_authentication_service",
    "install_authentication_service",
]
