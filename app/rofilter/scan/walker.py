"""Directory-scanning host for the path classifier.

Walks a directory tree the way query-engine input listings do: each
directory is listed and its files filtered on a worker thread, with every
worker sharing one classifier.
"""

import logging
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field

from rofilter.core.errors import PathFilterError
from rofilter.filesystem.client import FilesystemClient, get_filesystem
from rofilter.filter.classifier import PathClassifier
from rofilter.models.path import TablePath

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanError:
    """A file skipped because its classification failed.

    Attributes:
        path: The file that could not be classified.
        message: Error description, including the underlying cause.
    """

    path: str
    message: str


@dataclass(slots=True)
class ScanReport:
    """Outcome of scanning a directory tree.

    Attributes:
        root: Directory the scan started from.
        accepted: Visible files, sorted.
        rejected: Filtered-out files, sorted.
        errors: Files skipped due to classification errors.
        directories: Number of directories listed.
    """

    root: str
    accepted: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)
    directories: int = 0

    @property
    def total(self) -> int:
        return len(self.accepted) + len(self.rejected) + len(self.errors)


@dataclass(slots=True)
class _DirectoryResult:
    """Work produced by one directory task."""

    accepted: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)
    subdirectories: list[TablePath] = field(default_factory=list)


class DirectoryScanner:
    """Lists a directory tree in parallel and filters every file.

    Symbolic links to directories are neither descended nor classified.

    Args:
        classifier: Predicate applied to each file.
        workers: Number of worker threads.
        fail_fast: If True, the first classification error aborts the scan.
            Otherwise errors are collected in the report and the file is skipped.
        filesystem: Filesystem client used for listing. If None, one is
            created from the scan root.
    """

    def __init__(
        self,
        classifier: PathClassifier,
        *,
        workers: int = 8,
        fail_fast: bool = True,
        filesystem: FilesystemClient | None = None,
    ) -> None:
        if workers < 1:
            msg = f"workers must be >= 1, got {workers}"
            raise ValueError(msg)
        self._classifier = classifier
        self._workers = workers
        self._fail_fast = fail_fast
        self._filesystem = filesystem

    def scan(self, root: str | TablePath) -> ScanReport:
        """Scan every file below ``root``.

        Raises:
            PathFilterError: If fail_fast is set and a file cannot be classified.
            FilesystemError: If a directory cannot be listed.
        """
        root_path = TablePath.parse(root)
        fs = self._filesystem or get_filesystem(root_path)
        report = ScanReport(root=str(root_path))

        with ThreadPoolExecutor(
            max_workers=self._workers, thread_name_prefix="ScanWorker"
        ) as executor:
            pending: set[Future[_DirectoryResult]] = {
                executor.submit(self._scan_directory, fs, root_path)
            }
            try:
                while pending:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        result = future.result()
                        report.directories += 1
                        report.accepted.extend(result.accepted)
                        report.rejected.extend(result.rejected)
                        report.errors.extend(result.errors)
                        for sub in result.subdirectories:
                            pending.add(executor.submit(self._scan_directory, fs, sub))
            except BaseException:
                for future in pending:
                    future.cancel()
                raise

        report.accepted.sort()
        report.rejected.sort()
        report.errors.sort(key=lambda e: e.path)
        logger.info(
            "Scanned %d directories under %s: %d accepted, %d rejected, %d errors",
            report.directories,
            report.root,
            len(report.accepted),
            len(report.rejected),
            len(report.errors),
        )
        return report

    def _scan_directory(self, fs: FilesystemClient, directory: TablePath) -> _DirectoryResult:
        """List one directory and classify its files."""
        result = _DirectoryResult()
        for entry in fs.list_directory(directory):
            if fs.is_directory(entry):
                if fs.is_symlink(entry):
                    logger.debug("Skipping symlinked directory %s", entry)
                else:
                    result.subdirectories.append(entry)
                continue
            try:
                accepted = self._classifier.accept(entry)
            except PathFilterError as e:
                if self._fail_fast:
                    raise
                cause = e.__cause__ if e.__cause__ is not None else e
                result.errors.append(ScanError(path=str(entry), message=f"{e}: {cause}"))
                continue
            if accepted:
                result.accepted.append(str(entry))
            else:
                result.rejected.append(str(entry))
        return result
