#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the diffview library.

Exception Hierarchy
-------------------
- DiffViewError (base exception)

  - ValidationError (parameter/option validation)
    - ViewportError (invalid viewport geometry)

  - NormalizationError (structured document could not be normalized)

  - FormatMismatchError (sides declared with different formats)

Normalization errors never escape the public normalization helpers; they are
raised internally and converted into a logged fallback to the original text.

"""

from typing import Any


class DiffViewError(Exception):
    """Base exception class for all diffview-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DiffViewError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ViewportError(ValidationError):
    """Exception raised when viewport geometry violates the caller contract.

    Degenerate but recoverable geometry (zero container height, negative
    scroll offset) is clamped instead; only a non-positive row height raises.
    """


class NormalizationError(DiffViewError):
    """Exception raised when a structured document cannot be normalized.

    Parameters
    ----------
    message : str
        Description of the failure
    format_name : str
        Format that was being normalized ("json" or "xml")
    original_error : Exception, optional
        The parser error that triggered the failure

    """

    def __init__(self, message: str, format_name: str, original_error: Exception | None = None):
        """Initialize the normalization error with the offending format."""
        super().__init__(message, original_error=original_error)
        self.format_name = format_name


class FormatMismatchError(DiffViewError):
    """Exception raised when the two sides of a comparison declare different formats.

    Parameters
    ----------
    left_format : str
        Format declared for the left side
    right_format : str
        Format declared for the right side

    """

    def __init__(self, left_format: str, right_format: str):
        """Initialize the mismatch error with both declared formats."""
        super().__init__(f"Cannot compare different formats: {left_format!r} vs {right_format!r}")
        self.left_format = left_format
        self.right_format = right_format
