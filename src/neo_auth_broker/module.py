"""Authentication broker module wiring.

Usage:
    from neo_auth_broker import AuthBrokerModule

    broker_module = AuthBrokerModule()
    broker_module.install(app)

    broker_module.service.register_authentication_provider("github", github_provider)
    session = await broker_module.service.login("github", ["repo"])
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from fastapi import FastAPI

from .__version__ import __version__
from .api.dependencies import install_authentication_service
from .application.commands import write_allowed_extensions
from .application.queries import read_allowed_extensions
from .application.services import AuthenticationService, ProviderRegistry
from .config.settings import AuthBrokerSettings, get_settings
from .core.entities import AllowedExtension
from .core.protocols import StorageService
from .infrastructure.repositories import MemoryStorageService

logger = logging.getLogger(__name__)


class AuthBrokerModule:
    """Builds and owns one registry, broker and allow-list storage.

    Each module instance is independent; hosts construct one and pass the
    broker to consumers rather than reaching for a process-wide global.
    """

    def __init__(
        self,
        settings: Optional[AuthBrokerSettings] = None,
        storage: Optional[StorageService] = None,
    ):
        self.name = "auth_broker"
        self.version = __version__
        self.settings = settings or get_settings()
        self.storage: StorageService = storage if storage is not None else MemoryStorageService()
        self.registry = ProviderRegistry(self.settings)
        self.service = AuthenticationService(self.registry, self.settings)
        self._installed_apps: List[FastAPI] = []

    def install(self, app: FastAPI) -> None:
        """Expose the broker to FastAPI dependencies of app."""
        install_authentication_service(app, self.service)
        self._installed_apps.append(app)
        logger.info(f"Installed {self.name} module v{self.version}")

    async def get_allowed_extensions(self, provider_id: str, account_name: str) -> List[AllowedExtension]:
        return await read_allowed_extensions(self.storage, provider_id, account_name, self.settings)

    async def set_allowed_extensions(
        self,
        provider_id: str,
        account_name: str,
        extensions: Iterable[AllowedExtension],
    ) -> None:
        await write_allowed_extensions(self.storage, provider_id, account_name, extensions, self.settings)

    def get_module_info(self) -> Dict[str, Any]:
        """Get module information."""
        return {
            "name": self.name,
            "version": self.version,
            "providers": self.registry.provider_ids(),
            "storage": type(self.storage).__name__,
        }

    def shutdown(self) -> None:
        """Drop all event subscribers and detach from installed apps.

        Provider registrations are left alone; providers unregister
        themselves at their own teardown.
        """
        self.service.dispose()
        for app in self._installed_apps:
            install_authentication_service(app, None)
        self._installed_apps.clear()
        logger.info(f"Shut down {self.name} module")
