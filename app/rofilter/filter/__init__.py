"""Path filtering module.

This module provides the path classifier and the components it composes:
the directory cache, table root discovery and latest-version resolution.
"""

from rofilter.filter.cache import DirectoryClassificationCache
from rofilter.filter.classifier import FilterStats, PathClassifier
from rofilter.filter.locator import DEFAULT_FALLBACK_DEPTH, TableRootLocator
from rofilter.filter.resolver import LatestVersionResolver

__all__ = [
    "DEFAULT_FALLBACK_DEPTH",
    "DirectoryClassificationCache",
    "FilterStats",
    "LatestVersionResolver",
    "PathClassifier",
    "TableRootLocator",
]
