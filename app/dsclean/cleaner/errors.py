"""Exceptions raised by the cleaner core."""


class CleanerError(Exception):
    """Base class for cleaner errors."""


class ConfigurationError(CleanerError):
    """Raised when the scan configuration cannot be used.

    A configuration error is fatal: it aborts the run before any
    traversal begins.
    """
