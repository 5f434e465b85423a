"""
Persistent key-value store backed by the Django cache framework.
"""
import json
import logging
from typing import Any, Callable, Dict, Optional

from django.conf import settings
from django.core.cache import caches

from shared.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class LocalStore:
    """
    JSON store over a named Django cache.

    Values are written as JSON strings with no expiry, so with a file based
    cache they survive restarts. Reads and writes never raise: ``get`` falls
    back to the caller's default and ``set`` returns False.

    The first backend failure switches writes to an in-memory dict for the
    rest of the session and calls ``on_degraded`` once. Keys not written
    since then are still read from the backend when it answers.
    """

    def __init__(
        self,
        alias: str = None,
        prefix: str = "",
        on_degraded: Optional[Callable[[StorageError], None]] = None,
    ):
        self.alias = alias or getattr(settings, 'STOREFRONT_STORE_ALIAS', 'default')
        self.prefix = prefix
        self.on_degraded = on_degraded
        self._memory: Dict[str, Optional[str]] = {}
        self._degraded = False

    @property
    def is_degraded(self) -> bool:
        """True once the store has fallen back to memory-only operation."""
        return self._degraded

    def _make_key(self, key: str) -> str:
        """Create a cache key with prefix."""
        if self.prefix:
            return f"{self.prefix}:{key}"
        return key

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from the store."""
        try:
            raw = self._read(key)
        except StorageError as e:
            self._degrade(e)
            raw = self._memory.get(key)

        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable value for '{key}': {e}")
            return default

    def set(self, key: str, value: Any) -> bool:
        """Set a value in the store. Returns False when it was not persisted."""
        try:
            raw = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Cannot serialize value for '{key}': {e}")
            return False

        if self._degraded:
            self._memory[key] = raw
            return False
        try:
            self._write(key, raw)
            return True
        except StorageError as e:
            self._degrade(e)
            self._memory[key] = raw
            return False

    def remove(self, key: str) -> bool:
        """Delete a value from the store."""
        if self._degraded:
            # None hides any copy still readable from the backend.
            self._memory[key] = None
            return False
        self._memory.pop(key, None)
        try:
            caches[self.alias].delete(self._make_key(key))
            return True
        except Exception as e:
            self._degrade(StorageError(key, str(e)))
            return False

    def _read(self, key: str) -> Optional[str]:
        if self._degraded:
            if key in self._memory:
                return self._memory[key]
            return self._read_saved(key)
        try:
            return caches[self.alias].get(self._make_key(key))
        except Exception as e:
            raise StorageError(key, str(e)) from e

    def _read_saved(self, key: str) -> Optional[str]:
        """Best-effort backend read for keys not rewritten since degrading."""
        try:
            return caches[self.alias].get(self._make_key(key))
        except Exception as e:
            logger.debug(f"Backend read of '{key}' failed while degraded: {e}")
            return None

    def _write(self, key: str, raw: str) -> None:
        try:
            caches[self.alias].set(self._make_key(key), raw, timeout=None)
        except Exception as e:
            raise StorageError(key, str(e)) from e

    def _degrade(self, error: StorageError) -> None:
        if self._degraded:
            return
        self._degraded = True
        logger.warning(f"Persistent store unavailable, continuing in memory: {error.message}")
        if self.on_degraded is not None:
            self.on_degraded(error)
