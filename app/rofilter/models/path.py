"""Normalized absolute path value type.

TablePath is the identity used for every cache key and every accepted-file
set, so two spellings of the same location (trailing slash, duplicate
slashes, ``.`` segments) must collapse to one string form.
"""

import posixpath
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from rofilter.core.errors import MalformedInputError


@dataclass(frozen=True, slots=True)
class TablePath:
    """Absolute, hierarchical filesystem location.

    Optionally carries a ``scheme://authority`` prefix so that paths of a
    distributed filesystem (``hdfs://nn:8020/warehouse/t``) keep their
    identity. Equality and hashing are by normalized string form.

    Attributes:
        scheme: URL scheme, empty for plain local paths.
        authority: URL authority (host[:port]), empty if absent.
        path: Normalized absolute POSIX path (always starts with "/").
    """

    scheme: str = ""
    authority: str = ""
    path: str = "/"
    _key: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            msg = f"Path must be absolute: {self.path!r}"
            raise MalformedInputError(msg, path=self.path)
        normalized = posixpath.normpath(self.path)
        # normpath keeps a leading "//" (POSIX allows it to be special)
        if normalized.startswith("//"):
            normalized = "/" + normalized.lstrip("/")
        object.__setattr__(self, "path", normalized)
        prefix = f"{self.scheme}://{self.authority}" if self.scheme else ""
        object.__setattr__(self, "_key", prefix + normalized)

    @classmethod
    def parse(cls, value: "str | TablePath") -> "TablePath":
        """Build a TablePath from a string such as "/a/b" or "hdfs://nn/a/b".

        Raises:
            MalformedInputError: If the value is empty or relative.
        """
        if isinstance(value, TablePath):
            return value
        if not value:
            raise MalformedInputError("Path cannot be empty", path=value)
        if "://" in value:
            parts = urlsplit(value)
            return cls(scheme=parts.scheme, authority=parts.netloc, path=parts.path or "/")
        return cls(path=value)

    def __str__(self) -> str:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TablePath):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __lt__(self, other: "TablePath") -> bool:
        return self._key < other._key

    @property
    def segments(self) -> tuple[str, ...]:
        """Ordered path segments, empty for the filesystem root."""
        return tuple(part for part in self.path.split("/") if part)

    @property
    def name(self) -> str:
        """Final segment, empty for the filesystem root."""
        segments = self.segments
        return segments[-1] if segments else ""

    @property
    def is_root(self) -> bool:
        return self.path == "/"

    @property
    def parent(self) -> "TablePath | None":
        """Parent directory, or None at the filesystem root."""
        if self.is_root:
            return None
        return TablePath(self.scheme, self.authority, posixpath.dirname(self.path))

    def ancestor(self, n: int) -> "TablePath | None":
        """Return the n-th ancestor (0 is self), or None if it does not exist."""
        if n < 0:
            msg = f"Ancestor depth must be >= 0, got {n}"
            raise ValueError(msg)
        segments = self.segments
        if n > len(segments):
            return None
        kept = segments[: len(segments) - n]
        return TablePath(self.scheme, self.authority, "/" + "/".join(kept))

    def child(self, name: str) -> "TablePath":
        """Return the path of a direct child named ``name``."""
        return TablePath(self.scheme, self.authority, posixpath.join(self.path, name))

    def contains_segment(self, name: str) -> bool:
        """Check whether any segment of this path equals ``name``."""
        return name in self.segments


def directory_key(path: TablePath) -> str:
    """Cache key for a directory (its normalized string form)."""
    return str(path)
