"""Word frequency counting, with timing of the count across worker-thread counts."""

__version__ = "0.1.0"