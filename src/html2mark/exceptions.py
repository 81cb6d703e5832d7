#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2mark library.

Malformed markup never raises: stray and unclosed tags, unknown elements and
invalid heading levels are all recovered from silently by the converter. The
exceptions below are reserved for problems with the call itself.

Exception Hierarchy
-------------------
- Html2MarkError (base exception)

  - ValidationError (parameter/option validation)

  - ParsingError (input that cannot be turned into text)

"""

from typing import Any


class Html2MarkError(Exception):
    """Base exception class for all html2mark-specific errors.

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


class ValidationError(Html2MarkError):
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


class ParsingError(Html2MarkError):
    """Exception raised when the input document cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of processing where the failure happened (e.g. "decoding")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


__all__ = [
    "Html2MarkError",
    "ValidationError",
    "ParsingError",
]
