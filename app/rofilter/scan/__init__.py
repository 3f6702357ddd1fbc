"""Directory scanning module.

This module provides the threaded directory-scanning host that applies
the path classifier to every file of a tree.
"""

from rofilter.scan.walker import DirectoryScanner, ScanError, ScanReport

__all__ = ["DirectoryScanner", "ScanError", "ScanReport"]
