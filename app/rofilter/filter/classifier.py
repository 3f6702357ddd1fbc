"""Path classifier: the filter entry point.

Given a path that is part of
- a managed table: accepts ONLY the latest committed version of each file group;
- anything else: always accepts it.

The classifier is plugged into a directory-scanning host as a predicate,
called once per candidate file, so both managed and unmanaged datasets can
be read through the same scan.
"""

import logging
import threading
from dataclasses import dataclass

from rofilter.core.config import FilterConfig, get_default_config
from rofilter.core.errors import MalformedInputError, PathFilterError
from rofilter.filesystem.client import FilesystemClient, get_filesystem
from rofilter.filter.cache import DirectoryClassificationCache
from rofilter.filter.locator import TableRootLocator
from rofilter.filter.resolver import LatestVersionResolver
from rofilter.models.path import TablePath
from rofilter.models.result import CacheState
from rofilter.models.table import METAFOLDER_NAME
from rofilter.table.partition import PartitionMetadataProbe
from rofilter.table.reader import TableMetadataReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterStats:
    """Snapshot of classifier activity counters.

    Attributes:
        calls: Number of completed accept() calls.
        cache_hits: Calls answered from the directory cache.
        resolutions: Table metadata reads performed.
        accepted: Calls that returned True.
        rejected: Calls that returned False.
    """

    calls: int = 0
    cache_hits: int = 0
    resolutions: int = 0
    accepted: int = 0
    rejected: int = 0


class _StatsCounter:
    """Lock-guarded mutable counters behind FilterStats."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache_hits = 0
        self._resolutions = 0
        self._accepted = 0
        self._rejected = 0

    def cache_hit(self) -> None:
        with self._lock:
            self._cache_hits += 1

    def resolution(self) -> None:
        with self._lock:
            self._resolutions += 1

    def decision(self, accepted: bool) -> None:
        with self._lock:
            if accepted:
                self._accepted += 1
            else:
                self._rejected += 1

    def snapshot(self) -> FilterStats:
        with self._lock:
            return FilterStats(
                calls=self._accepted + self._rejected,
                cache_hits=self._cache_hits,
                resolutions=self._resolutions,
                accepted=self._accepted,
                rejected=self._rejected,
            )


@dataclass(frozen=True, slots=True)
class _Collaborators:
    """Filesystem-bound helpers, created together and assigned once."""

    fs: FilesystemClient
    locator: TableRootLocator
    resolver: LatestVersionResolver


class PathClassifier:
    """Decides whether a file is visible to a downstream query engine.

    Safe to share between scanning threads. The cache and the filesystem
    client belong to this instance; a new instance starts cold.

    Cached managed directories are never refreshed: a file committed after
    its directory was resolved stays rejected until a new classifier is
    created.

    Args:
        config: Filter configuration. Defaults to FilterConfig().
        filesystem: Filesystem client to use. If None, one is created from
            the first path classified.

    Example:
        >>> classifier = PathClassifier()
        >>> visible = [p for p in paths if classifier.accept(p)]
    """

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        filesystem: FilesystemClient | None = None,
    ) -> None:
        self._config = config or get_default_config()
        self._cache = DirectoryClassificationCache()
        self._stats = _StatsCounter()
        self._init_lock = threading.Lock()
        self._filesystem = filesystem
        self._collaborators: _Collaborators | None = None

    @property
    def cache(self) -> DirectoryClassificationCache:
        return self._cache

    @property
    def stats(self) -> FilterStats:
        return self._stats.snapshot()

    def accept(self, path: str | TablePath) -> bool:
        """Classify a file path.

        Args:
            path: Absolute file path (plain or ``scheme://authority/...``).

        Returns:
            True if the file is visible, False otherwise.

        Raises:
            PathFilterError: On malformed input, malformed metadata or any
                filesystem failure. The original error is chained.
        """
        logger.debug("Checking acceptance for path %s", path)
        folder: TablePath | None = None
        try:
            target = TablePath.parse(path)
            folder = target.parent
            if folder is None:
                msg = f"Cannot derive a parent directory for {target}"
                raise MalformedInputError(msg, path=str(target))
            accepted = self._classify(target, folder)
        except Exception as e:
            error = PathFilterError(str(path), str(folder) if folder is not None else None)
            logger.error("%s: %s", error, e)
            raise error from e

        self._stats.decision(accepted)
        return accepted

    def __call__(self, path: str | TablePath) -> bool:
        return self.accept(path)

    def _classify(self, target: TablePath, folder: TablePath) -> bool:
        """Run the classification state machine for one path."""
        # Table bookkeeping files are never data, whatever the cache says
        if target.contains_segment(METAFOLDER_NAME):
            logger.debug("Skipping table metadata file %s", target)
            return False

        lookup = self._cache.lookup(folder)
        if lookup.state == CacheState.UNMANAGED:
            self._stats.cache_hit()
            logger.debug("Accepting unmanaged path from cache: %s", target)
            return True
        if lookup.state == CacheState.MANAGED and lookup.accepted is not None:
            self._stats.cache_hit()
            accepted = target in lookup.accepted
            logger.debug("%s checked against cache, accept => %s", target, accepted)
            return accepted

        helpers = self._get_collaborators(target)

        root = helpers.locator.locate(folder)
        if root is None:
            logger.debug("Caching unmanaged directory %s (too shallow)", folder)
            self._cache.mark_unmanaged(folder)
            return True

        self._stats.resolution()
        resolution = helpers.resolver.resolve(root, folder)
        if not resolution.is_table:
            logger.debug(
                "Caching unmanaged directory %s (%s at %s)",
                folder,
                resolution.reason,
                root,
            )
            self._cache.mark_unmanaged(folder)
            return True

        self._cache.record_managed(folder, resolution.accepted)
        accepted = target in resolution.accepted
        logger.debug("%s checked after cache population, accept => %s", target, accepted)
        return accepted

    def _get_collaborators(self, target: TablePath) -> _Collaborators:
        """Return the filesystem-bound helpers, creating them on first use."""
        helpers = self._collaborators
        if helpers is not None:
            return helpers

        with self._init_lock:
            if self._collaborators is None:
                fs = self._filesystem or get_filesystem(target)
                self._collaborators = _Collaborators(
                    fs=fs,
                    locator=TableRootLocator(
                        PartitionMetadataProbe(fs),
                        fallback_depth=self._config.fallback_root_depth,
                    ),
                    resolver=LatestVersionResolver(TableMetadataReader(fs), fs),
                )
            return self._collaborators
