"""rofilter - read-optimized path filter for versioned table layouts."""

__version__ = "0.3.0"
