"""Memoization of encoded string atoms."""

import threading
from collections import OrderedDict
from typing import Optional


class StringCache:
    """Thread-safe mapping from a string to its encoded form.

    Encoding a string is a pure function of its content, so one cache can be
    shared between encode calls and threads. When ``maxsize`` is set the
    oldest entries are evicted first.
    """

    def __init__(self, maxsize: Optional[int] = None) -> None:
        self.maxsize = maxsize
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            encoded = self._entries.get(key)
            if encoded is None:
                self.misses += 1
            else:
                self.hits += 1
            return encoded

    def put(self, key: str, encoded: str) -> None:
        with self._lock:
            self._entries[key] = encoded
            if self.maxsize is not None:
                while len(self._entries) > self.maxsize:
                    self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
