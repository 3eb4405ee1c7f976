"""Parallelogram error types."""


class ParallelogramError(Exception):
    """Base error for all parallelogram failures."""


class EmptyTextError(ParallelogramError, ValueError):
    """One of the two texts holds no sentences."""


class ParallelogramVersionError(ParallelogramError):
    """Stored alignment format version mismatch."""


class ParallelogramChecksumError(ParallelogramError):
    """Stored alignment checksum verification failed."""
