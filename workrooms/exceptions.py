"""
Exceptions raised by the worker directory.

Raised in the worker service and caught by callers (CLI commands, a
request layer) for clean error reporting.
"""


class WorkerDirectoryError(Exception):
    """Base exception for all worker directory errors."""


class NotFoundError(WorkerDirectoryError, LookupError):
    """Raised when a referenced worker, office or room does not exist."""


class InvalidArgumentError(WorkerDirectoryError, ValueError):
    """Raised when hiring and firing dates are out of order."""


class CapacityExceededError(InvalidArgumentError):
    """Raised when a room has no free place left for another worker."""
