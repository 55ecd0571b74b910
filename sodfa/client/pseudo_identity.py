"""Client-local pseudo identity.

Browsers that never sign in still need a stable correlation key for
reactions and comments. The key is a random token kept in client-local
storage and sent to the API in the ``X-Client-Id`` header.
"""

import json
import secrets
from pathlib import Path
from typing import Protocol

from sodfa.domain.value.types import PSEUDO_TOKEN_ALPHABET, PSEUDO_TOKEN_LENGTH
from sodfa.util.logging import get_logger

STORAGE_KEY = "sodfa_client_id"

logger = get_logger(__name__)


class KeyValueStorage(Protocol):
    """Protocol for client-local string storage (like ``localStorage``)."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value under key."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key (no-op if absent)."""
        ...


class MemoryStorage:
    """Storage that lives as long as the process."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """Storage persisted as a flat JSON object in a file.

    Args:
        path: JSON file; created with its parent directory on first write
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable client storage {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


def generate_token() -> str:
    """Random 20-character alphanumeric token."""
    return "".join(
        secrets.choice(PSEUDO_TOKEN_ALPHABET) for _ in range(PSEUDO_TOKEN_LENGTH)
    )


class PseudoIdentityProvider:
    """Issues and persists the pseudo identity token.

    With no storage (e.g. server-side rendering) every operation degrades:
    ``get_or_create_id`` returns None, ``has_id`` returns False and
    ``clear_id`` does nothing.
    """

    def __init__(self, storage: KeyValueStorage | None) -> None:
        self.storage = storage

    def get_or_create_id(self) -> str | None:
        """Return the stored token, generating and storing one on first call."""
        if self.storage is None:
            return None

        token = self.storage.get_item(STORAGE_KEY)
        if token:
            return token

        token = generate_token()
        self.storage.set_item(STORAGE_KEY, token)
        logger.debug("Generated client pseudo identity")
        return token

    def has_id(self) -> bool:
        """Whether a token is already stored."""
        if self.storage is None:
            return False
        return bool(self.storage.get_item(STORAGE_KEY))

    def clear_id(self) -> None:
        """Forget the stored token (reset hook)."""
        if self.storage is None:
            return
        self.storage.remove_item(STORAGE_KEY)
