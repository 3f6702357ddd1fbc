"""Commit timeline of a managed table.

The timeline is the append-only record of actions on a table, stored as one
file per instant state inside the metadata folder.
"""

from collections.abc import Iterable, Iterator

from rofilter.models.path import TablePath
from rofilter.models.table import COMMIT_ACTIONS, Instant


class Timeline:
    """Immutable, ordered view over a set of instants.

    Filtering methods return new Timeline objects; the original is never
    modified.
    """

    def __init__(self, instants: Iterable[Instant]) -> None:
        self._instants: tuple[Instant, ...] = tuple(sorted(set(instants)))
        self._timestamps: frozenset[str] = frozenset(i.timestamp for i in self._instants)

    @classmethod
    def from_listing(cls, listing: Iterable[TablePath]) -> "Timeline":
        """Build a timeline from the entries of a metadata folder.

        Entries that are not timeline files are ignored.
        """
        instants = (Instant.from_file_name(path.name) for path in listing)
        return cls(i for i in instants if i is not None)

    @property
    def instants(self) -> tuple[Instant, ...]:
        return self._instants

    def commits_timeline(self) -> "Timeline":
        """Only actions that write data files (commit, deltacommit, replacecommit)."""
        return Timeline(i for i in self._instants if i.action in COMMIT_ACTIONS)

    def filter_completed(self) -> "Timeline":
        """Only successfully completed instants."""
        return Timeline(i for i in self._instants if i.is_completed)

    def contains(self, timestamp: str) -> bool:
        """Check whether an instant with this timestamp is on the timeline."""
        return timestamp in self._timestamps

    def last_instant(self) -> Instant | None:
        return self._instants[-1] if self._instants else None

    def __iter__(self) -> Iterator[Instant]:
        return iter(self._instants)

    def __len__(self) -> int:
        return len(self._instants)

    def __repr__(self) -> str:
        return f"Timeline({len(self._instants)} instants)"
