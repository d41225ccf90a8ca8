#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the snippetfmt library.

The snippet formatters and the interchange serializer/parser are total
functions and never raise. The exceptions below are raised by the layers
around them: option validation, registry lookups, file I/O and the CLI.

Exception Hierarchy
-------------------
- SnippetFmtError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - FileError (file access and I/O)
    - InterchangeFileError (interchange file cannot be read)
    - OutputWriteError (output file cannot be written)

  - FormatError (unknown editor or output format)

  - ConfigError (configuration file cannot be loaded)

"""

from typing import Any


class SnippetFmtError(Exception):
    """Base exception class for all snippetfmt-specific errors.

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


class ValidationError(SnippetFmtError):
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
    """Exception raised when a renderer receives the wrong options class.

    For example, passing ``VSCodeRendererOptions`` to the Sublime Text renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
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
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(SnippetFmtError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InterchangeFileError(FileError):
    """Exception raised when an interchange file cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the interchange file error."""
        if message is None:
            message = f"Failed to import snippets from {file_path}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(FileError):
    """Exception raised when rendered output cannot be written."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output to {file_path}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FormatError(SnippetFmtError):
    """Exception raised when an unknown editor or output format is requested.

    Parameters
    ----------
    message : str, optional
        Custom error message
    format_name : str, optional
        The requested format name
    supported_formats : list[str], optional
        List of supported formats for reference
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str | None = None,
        format_name: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the format error."""
        if message is None:
            if format_name:
                message = f"Unsupported format: '{format_name}'"
                if supported_formats:
                    message += f". Supported formats: {', '.join(supported_formats)}"
            else:
                message = "Output format is not supported"

        super().__init__(message, original_error=original_error)
        self.format_name = format_name
        self.supported_formats = supported_formats


class ConfigError(SnippetFmtError):
    """Exception raised when a configuration file cannot be loaded."""

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


__all__ = [
    "SnippetFmtError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "InterchangeFileError",
    "OutputWriteError",
    "FormatError",
    "ConfigError",
]
