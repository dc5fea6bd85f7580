"""Exception classes for cssopt."""

from typing import Any


class CSSOptError(Exception):
    """Base exception for cssopt errors."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class CSSOptConfigError(CSSOptError):
    """Raised when optimizer configuration (e.g. a browser target) is invalid."""
