#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docsink library.

This module defines specialized exception classes for the error conditions
that can occur while parsing source text into sink events and while writing
markup to an output destination.

Exception Hierarchy
-------------------
- DocSinkError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a sink)

  - FileError (input file cannot be read)

  - ParsingError (a block parser cannot make progress on its input)

  - RenderingError (output generation failures)
    - OutputWriteError (destination write/flush/close failures)
    - EventOrderError (strict sinks only: producer broke the event contract)

Notes
-----
The core XHTML sink never raises for malformed event sequences; it trusts the
event producer. EventOrderError is only raised by ValidatingSink.

"""

from typing import Any


class DocSinkError(Exception):
    """Base exception class for all docsink-specific errors.

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


class ValidationError(DocSinkError):
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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a sink.

    Parameters
    ----------
    sink_name : str
        Name of the sink that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        sink_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{sink_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the sink."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.sink_name = sink_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(DocSinkError):
    """Exception raised when an input file cannot be opened or read.

    Parameters
    ----------
    file_path : str
        Path to the problematic file
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str
        Path to the file that caused the error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        if message is None:
            message = f"Cannot read file: {file_path}"
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(DocSinkError):
    """Exception raised when source text cannot be turned into sink events.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred
    line_number : int, optional
        1-based line number of the offending input line
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parsing_stage: str | None = None,
        line_number: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
        self.line_number = line_number


class RenderingError(DocSinkError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing to the output destination fails.

    Parameters
    ----------
    file_path : str, optional
        Path of the destination, when it is a file
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self, file_path: str | None = None, message: str | None = None, original_error: Exception | None = None
    ):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output: {file_path}" if file_path else "Failed to write output"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


class EventOrderError(RenderingError):
    """Exception raised by strict sinks when an event breaks the calling contract.

    Parameters
    ----------
    event : str
        Name of the offending sink event
    expected : str, optional
        Description of what the sink expected instead
    message : str, optional
        Custom error message

    """

    def __init__(self, event: str, expected: str | None = None, message: str | None = None):
        """Initialize the event order error."""
        if message is None:
            message = f"Unexpected sink event '{event}'"
            if expected:
                message += f"; expected {expected}"
        super().__init__(message, rendering_stage="event-order")
        self.event = event
        self.expected = expected


__all__ = [
    "DocSinkError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "EventOrderError",
]
