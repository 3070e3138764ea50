# pokeportal/cache.py

import json
import logging
import time
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional

import httpx

from .config import settings

logger = logging.getLogger(__name__)


class CacheEntry(NamedTuple):
    timestamp: float
    data: Any


def make_cache_key(endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Builds the canonical cache key for a request.

    Parameters are encoded the way httpx puts them on the wire and then sorted,
    so two mappings that produce the same query string share a key regardless
    of insertion order or value type (``20`` and ``"20"`` are the same request).
    A missing parameter mapping and an empty one are equivalent.
    """
    query = sorted(httpx.QueryParams(dict(params or {})).multi_items())
    return json.dumps({"url": endpoint, "params": query}, separators=(",", ":"))


class ResponseCache:
    """
    In-memory store of raw JSON payloads keyed by request identity.

    Entries are never evicted; an entry older than the TTL given at read time
    is reported as a miss and stays in place until the next ``set`` for its key
    overwrites it.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, CacheEntry] = {}
        self._clock = clock

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str, ttl: float = settings.cache_ttl_seconds) -> Optional[Any]:
        """Returns the cached payload for ``key`` if it is younger than ``ttl`` seconds."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug(f"Cache MISS for key: {key}")
            return None
        age = self._clock() - entry.timestamp
        if age < ttl:
            logger.debug(f"Cache HIT for key: {key}")
            return entry.data
        logger.debug(f"Cache STALE for key: {key} (age {age:.1f}s >= ttl {ttl}s)")
        return None

    def set(self, key: str, value: Any) -> None:
        """Stores ``value`` under ``key`` stamped with the current time."""
        self._entries[key] = CacheEntry(timestamp=self._clock(), data=value)
        logger.debug(f"Cache SET for key: {key}")

    def clear(self, key: str) -> bool:
        """Removes a specific key from the cache."""
        if self._entries.pop(key, None) is not None:
            logger.info(f"Cache CLEARED for key: {key}")
            return True
        logger.info(f"Cache key not found for deletion: {key}")
        return False
