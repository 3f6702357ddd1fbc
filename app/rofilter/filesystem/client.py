"""Filesystem client abstraction.

The classifier only needs to list directories, test entry types and read
small text files. Remote clients bring their own retry and consistency
semantics; rofilter never retries on their behalf.
"""

import errno
import logging
import stat
from pathlib import Path
from typing import Protocol, runtime_checkable

from rofilter.core.errors import FilesystemError
from rofilter.models.path import TablePath

logger = logging.getLogger(__name__)

_LOCAL_SCHEMES: frozenset[str] = frozenset({"", "file"})

# stat errors meaning "no such entry" rather than "entry not accessible"
_ABSENT_ERRNOS: frozenset[int] = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ELOOP})


@runtime_checkable
class FilesystemClient(Protocol):
    """Operations the classifier requires from a filesystem."""

    def list_directory(self, path: TablePath) -> list[TablePath]:
        """List the immediate children of a directory, sorted by path."""
        ...

    def is_directory(self, path: TablePath) -> bool:
        """Check whether a path exists and is a directory."""
        ...

    def is_file(self, path: TablePath) -> bool:
        """Check whether a path exists and is a regular file."""
        ...

    def is_symlink(self, path: TablePath) -> bool:
        """Check whether a path is a symbolic link, without following it."""
        ...

    def read_text(self, path: TablePath) -> str:
        """Read a whole file as UTF-8 text."""
        ...


def _wrap_os_error(e: OSError, path: TablePath, action: str) -> FilesystemError:
    """Convert an OSError into a FilesystemError carrying the path."""
    if isinstance(e, FileNotFoundError):
        kind = "not_found"
    elif isinstance(e, PermissionError):
        kind = "permission_denied"
    else:
        kind = "io"
    return FilesystemError(f"Cannot {action} {path}: {e}", path=str(path), kind=kind)


class LocalFilesystemClient:
    """FilesystemClient backed by the local filesystem via pathlib."""

    def _local(self, path: TablePath) -> Path:
        if path.scheme not in _LOCAL_SCHEMES:
            msg = f"Local filesystem cannot access {path}"
            raise FilesystemError(msg, path=str(path), kind="unsupported")
        return Path(path.path)

    def list_directory(self, path: TablePath) -> list[TablePath]:
        try:
            names = sorted(entry.name for entry in self._local(path).iterdir())
        except OSError as e:
            raise _wrap_os_error(e, path, "list directory") from e
        return [path.child(name) for name in names]

    def _mode(self, path: TablePath, *, follow_symlinks: bool = True) -> int | None:
        """File mode of a path, or None when no such entry exists.

        Other stat failures, such as EACCES, raise instead of reading as
        a missing entry.
        """
        local = self._local(path)
        try:
            return local.stat(follow_symlinks=follow_symlinks).st_mode
        except OSError as e:
            if e.errno in _ABSENT_ERRNOS:
                return None
            raise _wrap_os_error(e, path, "stat") from e

    def is_directory(self, path: TablePath) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISDIR(mode)

    def is_file(self, path: TablePath) -> bool:
        mode = self._mode(path)
        return mode is not None and stat.S_ISREG(mode)

    def is_symlink(self, path: TablePath) -> bool:
        mode = self._mode(path, follow_symlinks=False)
        return mode is not None and stat.S_ISLNK(mode)

    def read_text(self, path: TablePath) -> str:
        try:
            return self._local(path).read_text(encoding="utf-8")
        except OSError as e:
            raise _wrap_os_error(e, path, "read") from e
        except UnicodeDecodeError as e:
            msg = f"Cannot decode {path} as UTF-8: {e}"
            raise FilesystemError(msg, path=str(path), kind="io") from e


def get_filesystem(path: TablePath) -> FilesystemClient:
    """Create a filesystem client able to serve ``path``.

    Args:
        path: Any path on the target filesystem.

    Returns:
        A FilesystemClient for the path's scheme.

    Raises:
        FilesystemError: If no client is available for the scheme.
    """
    if path.scheme in _LOCAL_SCHEMES:
        logger.debug("Creating local filesystem client for %s", path)
        return LocalFilesystemClient()
    msg = f"No filesystem client for scheme '{path.scheme}'"
    raise FilesystemError(msg, path=str(path), kind="unsupported")
