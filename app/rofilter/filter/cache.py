"""Per-directory classification cache.

Files of one directory are almost always passed to the filter one after
another, so the expensive metadata check is done once per directory and
remembered here for the lifetime of the owning classifier.
"""

import threading

from rofilter.models.path import TablePath, directory_key
from rofilter.models.result import CacheLookup


class DirectoryClassificationCache:
    """Thread-safe pair of maps: managed directories and unmanaged directories.

    A directory key is never present in both maps at once. Nothing is ever
    evicted: entries live as long as the cache (one scan or process).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._managed: dict[str, frozenset[TablePath]] = {}
        self._unmanaged: set[str] = set()

    def lookup(self, directory: TablePath) -> CacheLookup:
        """Look up the classification of a directory."""
        key = directory_key(directory)
        with self._lock:
            if key in self._unmanaged:
                return CacheLookup.unmanaged()
            accepted = self._managed.get(key)
        if accepted is not None:
            return CacheLookup.managed(accepted)
        return CacheLookup.miss()

    def mark_unmanaged(self, directory: TablePath) -> None:
        """Record a directory as not belonging to any managed table."""
        key = directory_key(directory)
        with self._lock:
            self._managed.pop(key, None)
            self._unmanaged.add(key)

    def record_managed(self, directory: TablePath, accepted: frozenset[TablePath]) -> None:
        """Record the accepted files of a managed directory.

        Replaces any entry previously recorded for the directory.
        """
        key = directory_key(directory)
        with self._lock:
            self._unmanaged.discard(key)
            self._managed[key] = frozenset(accepted)

    def is_unmanaged(self, directory: TablePath) -> bool:
        with self._lock:
            return directory_key(directory) in self._unmanaged

    @property
    def managed_count(self) -> int:
        with self._lock:
            return len(self._managed)

    @property
    def unmanaged_count(self) -> int:
        with self._lock:
            return len(self._unmanaged)

    def __len__(self) -> int:
        with self._lock:
            return len(self._managed) + len(self._unmanaged)
