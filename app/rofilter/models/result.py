"""Tagged results for cache lookups and table resolution.

"Not a managed table" is a routine, high-frequency outcome of table
resolution, so it travels as a value here instead of as an exception.
"""

from dataclasses import dataclass
from enum import Enum

from rofilter.models.path import TablePath


class CacheState(str, Enum):
    """Classification state of a directory in the cache."""

    MISS = "miss"
    UNMANAGED = "unmanaged"
    MANAGED = "managed"


@dataclass(frozen=True, slots=True)
class CacheLookup:
    """Result of a cache lookup for one directory.

    Attributes:
        state: Cache state of the directory.
        accepted: Accepted file paths (only set when state is MANAGED).
    """

    state: CacheState
    accepted: frozenset[TablePath] | None = None

    @classmethod
    def miss(cls) -> "CacheLookup":
        return cls(CacheState.MISS)

    @classmethod
    def unmanaged(cls) -> "CacheLookup":
        return cls(CacheState.UNMANAGED)

    @classmethod
    def managed(cls, accepted: frozenset[TablePath]) -> "CacheLookup":
        return cls(CacheState.MANAGED, accepted)


@dataclass(frozen=True, slots=True)
class NotATable:
    """A candidate root that holds no table metadata.

    Attributes:
        root: The candidate root that was probed.
        reason: Human-readable explanation.
    """

    root: TablePath
    reason: str = "no metadata folder"


class ResolutionKind(str, Enum):
    """Outcome kind of resolving a directory against a candidate root."""

    RESOLVED = "resolved"
    NOT_A_TABLE = "not_a_table"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving the latest file versions of one directory.

    Attributes:
        kind: Outcome kind.
        root: Candidate root that was opened.
        accepted: Latest-version file paths (empty unless RESOLVED).
        reason: Explanation when kind is NOT_A_TABLE.
    """

    kind: ResolutionKind
    root: TablePath
    accepted: frozenset[TablePath] = frozenset()
    reason: str | None = None

    @property
    def is_table(self) -> bool:
        return self.kind == ResolutionKind.RESOLVED

    @classmethod
    def resolved(cls, root: TablePath, accepted: frozenset[TablePath]) -> "Resolution":
        return cls(ResolutionKind.RESOLVED, root, accepted)

    @classmethod
    def not_a_table(cls, result: NotATable) -> "Resolution":
        return cls(ResolutionKind.NOT_A_TABLE, result.root, reason=result.reason)
