"""Call-scoped cache of selector-prefix query results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bs4 import Tag


class CacheState(Enum):
    UNKNOWN = "unknown"  # never queried
    EMPTY = "empty"  # proven: nothing matches the prefix
    MATCHED = "matched"  # elements matching the prefix, used as the next scope


@dataclass(frozen=True)
class CacheEntry:
    state: CacheState
    elements: tuple[Tag, ...] = ()


_UNKNOWN = CacheEntry(state=CacheState.UNKNOWN)
_EMPTY = CacheEntry(state=CacheState.EMPTY)


class ReachabilityCache:
    """Maps space-joined segment prefixes to query results.

    Keys do not identify the document they were computed against, so a cache
    must only ever serve one document and one minimize call.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def lookup(self, key: str) -> CacheEntry:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            return _UNKNOWN
        self.hits += 1
        return entry

    def record_empty(self, key: str) -> None:
        self._entries[key] = _EMPTY

    def record_matched(self, key: str, elements: tuple[Tag, ...]) -> None:
        if not elements:
            raise ValueError(f"Matched cache entry for {key!r} needs elements")
        self._entries[key] = CacheEntry(state=CacheState.MATCHED, elements=elements)
