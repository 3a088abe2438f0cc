"""Exceptions raised by catalog queries and mutations."""

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Base class for all ordinary catalog errors."""

    pass


class InvalidArgumentError(CatalogError, ValueError):
    """Malformed input (relative path, multi-component filename, bad root)."""

    pass


class NotFoundError(CatalogError, LookupError):
    """A folder or file record could not be resolved in the catalog."""

    pass


class CollisionError(CatalogError):
    """The destination already holds a file or folder with the target name."""

    pass


class FileIOError(CatalogError):
    """
    A filesystem primitive failed.

    The low-level OSError is chained as ``__cause__``; the catalog records
    are left untouched.
    """

    def __init__(
        self,
        message: str,
        source: Optional[Path] = None,
        destination: Optional[Path] = None
    ) -> None:
        super().__init__(message)
        self.source = source
        self.destination = destination


class InvariantViolation(RuntimeError):
    """
    An internal consistency check failed.

    Signals a bug rather than a user error, so it is intentionally not a
    CatalogError subclass.
    """

    pass
