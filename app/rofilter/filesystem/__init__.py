"""Filesystem access module.

This module provides the filesystem client protocol used by the classifier
and its local implementation.
"""

from rofilter.filesystem.client import FilesystemClient, LocalFilesystemClient, get_filesystem

__all__ = [
    "FilesystemClient",
    "LocalFilesystemClient",
    "get_filesystem",
]
