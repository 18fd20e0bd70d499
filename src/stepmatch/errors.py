"""Stepmatch errors."""


class StepmatchError(Exception):
    """Base exception for stepmatch errors."""


class TraversalError(StepmatchError):
    """Raised when the step catalog cannot be walked.

    Search operations re-raise catalog failures as a new TraversalError
    carrying the searched line, chained to the original cause.
    """

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class CatalogError(StepmatchError):
    """Raised when a catalog file cannot be loaded."""
