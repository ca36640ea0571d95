#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doxy2md/exceptions.py
"""Custom exceptions for the doxy2md library.

This module defines the exception classes raised while reading Doxygen XML,
building the document tree and rendering it. Two severities are kept apart
on purpose: grammar violations are raised as exceptions and abort the run,
while unknown optional constructs are only logged by the builders and
renderers.

Exception Hierarchy
-------------------
- Doxy2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - MalformedFileError (XML syntax errors)

  - ParsingError (tree building failures)
    - GrammarError (Doxygen grammar contract violated)
      - XmlAccessError (accessor precondition violated)

  - RenderingError (output generation failures)

  - ConfigError (configuration file problems)

"""

from typing import Any


class Doxy2MdError(Exception):
    """Base exception class for all doxy2md-specific errors.

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


class ValidationError(Doxy2MdError):
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
    """Exception raised when an options object of the wrong class is supplied.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Doxy2MdError):
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
        """Initialize the file error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when a required XML file does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the error with a default message naming the file."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileError):
    """Exception raised when an XML file cannot be parsed at all."""


class ParsingError(Doxy2MdError):
    """Exception raised when building the document tree fails.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class GrammarError(ParsingError):
    """Exception raised when the Doxygen XML grammar contract is broken.

    Raised for missing mandatory children or attributes, repeated singleton
    children and empty values where a non-empty one is required. It is never
    caught by the builders; it aborts the whole conversion run.

    Parameters
    ----------
    message : str
        Description of the violated constraint
    element_name : str, optional
        Name of the XML element being built
    builder_name : str, optional
        Name of the builder that detected the violation

    """

    def __init__(
        self,
        message: str,
        element_name: str | None = None,
        builder_name: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the grammar error and prefix the offending element."""
        if element_name:
            where = f"<{element_name}>" if builder_name is None else f"<{element_name}> in {builder_name}"
            message = f"{where}: {message}"
        super().__init__(message, parsing_stage="tree_building", original_error=original_error)
        self.element_name = element_name
        self.builder_name = builder_name


class XmlAccessError(GrammarError):
    """Exception raised when an XML accessor precondition is violated."""


class RenderingError(Doxy2MdError):
    """Exception raised when rendering a node fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    node_kind : str, optional
        Kind of the node being rendered
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_kind: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with the node kind."""
        super().__init__(message, original_error=original_error)
        self.node_kind = node_kind


class ConfigError(Doxy2MdError):
    """Exception raised for unreadable or invalid configuration files."""

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error with the file path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


__all__ = [
    "Doxy2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "MalformedFileError",
    "ParsingError",
    "GrammarError",
    "XmlAccessError",
    "RenderingError",
    "ConfigError",
]
