"""Write allowed extensions command."""

import logging
from typing import Iterable, List, Optional

from pydantic import TypeAdapter

from ...config.settings import AuthBrokerSettings
from ...core.entities import AllowedExtension
from ...core.protocols import StorageService
from ..queries.read_allowed_extensions import allowed_extensions_key

logger = logging.getLogger(__name__)

_allow_list_adapter = TypeAdapter(List[AllowedExtension])


async def write_allowed_extensions(
    storage: StorageService,
    provider_id: str,
    account_name: str,
    extensions: Iterable[AllowedExtension],
    settings: Optional[AuthBrokerSettings] = None,
) -> None:
    """Persist an account's allow list as a JSON array of {id, name}.

    Duplicate extension ids keep their first entry. Storage errors propagate.
    """
    by_id = {}
    for extension in extensions:
        by_id.setdefault(extension.id, extension)
    unique = list(by_id.values())

    key = allowed_extensions_key(provider_id, account_name, settings)
    await storage.set_data(key, _allow_list_adapter.dump_json(unique).decode("utf-8"))
    logger.debug(f"Stored {len(unique)} allowed extension(s) under '{key}'")
