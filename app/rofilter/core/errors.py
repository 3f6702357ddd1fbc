"""Error taxonomy for rofilter.

"Not a managed table" is deliberately absent from this module: it is a
routine outcome and is reported as a tagged result (see
:mod:`rofilter.models.result`), never raised.
"""


class RofilterError(Exception):
    """Base exception for all rofilter errors."""


class FilesystemError(RofilterError):
    """Raised when the filesystem collaborator fails.

    Attributes:
        path: Path the failing operation was applied to.
        kind: One of "not_found", "permission_denied", "unsupported" or "io".
    """

    def __init__(self, message: str, *, path: str, kind: str = "io") -> None:
        super().__init__(message)
        self.path = path
        self.kind = kind


class MalformedMetadataError(RofilterError):
    """Raised when partition markers or table metadata are inconsistent."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class MalformedInputError(RofilterError):
    """Raised for paths that cannot be classified (relative, no parent)."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class PathFilterError(RofilterError):
    """Fatal error surfaced by ``PathClassifier.accept``.

    Always chained to the underlying cause.

    Attributes:
        path: The path under test.
        folder: The directory under evaluation, or None if it could not be derived.
    """

    def __init__(self, path: str, folder: str | None) -> None:
        super().__init__(f"Error checking path: {path}, under folder: {folder}")
        self.path = path
        self.folder = folder


class ConfigError(RofilterError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""
