#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: scalelab/core/cache.py

import threading
from collections import OrderedDict
from typing import Dict, Hashable, Optional

from scalelab.shared.logger import log
from . import config as c


class GenerationCache:
    """
    Bounded memo for generated colors.

    When full, the oldest *inserted* entry is evicted; reads do not refresh
    an entry's position. All access goes through one lock so a thread pool
    can share the cache.
    """

    def __init__(self, max_size: int = c.GENERATION_CACHE_SIZE, enabled: bool = True):
        if max_size < 1:
            raise ValueError(f"cache size must be positive, got {max_size}")
        self.max_size = max_size
        self._enabled = enabled
        self._entries: "OrderedDict[Hashable, object]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        with self._lock:
            self._enabled = bool(value)
            if not self._enabled:
                self._entries.clear()

    def get(self, key: Hashable) -> Optional[object]:
        with self._lock:
            if not self._enabled:
                return None
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def set(self, key: Hashable, value: object) -> None:
        with self._lock:
            if not self._enabled:
                return
            if key not in self._entries and len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
                log("debug", "generation cache full, evicted oldest entry")
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        log("debug", "generation cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def stats(self) -> Dict[str, float]:
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / lookups if lookups else 0.0,
            }
