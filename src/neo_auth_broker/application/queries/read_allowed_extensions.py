"""Read allowed extensions query."""

import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ...config.settings import AuthBrokerSettings, get_settings
from ...core.entities import AllowedExtension
from ...core.exceptions import MalformedPersistedAllowList
from ...core.protocols import StorageService

logger = logging.getLogger(__name__)

_allow_list_adapter = TypeAdapter(List[AllowedExtension])


def allowed_extensions_key(
    provider_id: str,
    account_name: str,
    settings: Optional[AuthBrokerSettings] = None,
) -> str:
    """Build the storage key for an account's allow list."""
    separator = (settings or get_settings()).storage_key_separator
    return f"{provider_id}{separator}{account_name}"


def parse_allowed_extensions(key: str, raw: str) -> List[AllowedExtension]:
    """Parse a stored JSON array of {id, name} entries.

    Raises:
        MalformedPersistedAllowList: If raw is not a JSON array of entries
    """
    try:
        return _allow_list_adapter.validate_json(raw)
    except ValidationError as e:
        raise MalformedPersistedAllowList(key, f"{e.error_count()} validation error(s)") from e


async def read_allowed_extensions(
    storage: StorageService,
    provider_id: str,
    account_name: str,
    settings: Optional[AuthBrokerSettings] = None,
) -> List[AllowedExtension]:
    """Read the extensions allowed to use an account.

    Absent keys, storage failures and malformed values all yield an empty
    list; failures are logged.

    Args:
        storage: Key-value storage accessor
        provider_id: Provider the account belongs to
        account_name: Account name within the provider
        settings: Optional settings override

    Returns:
        Allowed extensions, possibly empty
    """
    settings = settings or get_settings()
    key = allowed_extensions_key(provider_id, account_name, settings)

    try:
        raw = await storage.get_data(key)
    except Exception as e:
        logger.error(f"Failed to read allowed extensions '{key}': {e}", exc_info=True)
        return []

    if not raw:
        return []

    try:
        extensions = parse_allowed_extensions(key, raw)
    except MalformedPersistedAllowList as e:
        logger.warning(e.message)
        return []

    if len(extensions) > settings.max_allowed_extensions:
        logger.warning(
            f"Allowed extensions '{key}' has {len(extensions)} entries, "
            f"keeping the first {settings.max_allowed_extensions}"
        )
        extensions = extensions[: settings.max_allowed_extensions]

    return extensions
