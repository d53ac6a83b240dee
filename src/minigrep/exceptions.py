#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the minigrep package.

This module defines the exception classes raised while building a search
configuration and while running a search. Each class carries a human-readable
message and, where applicable, the original exception that caused it.

Exception Hierarchy
-------------------
- MinigrepError (base exception)

  - ConfigError (argument validation, raised before any I/O)
    - MissingQueryError (no query token)
    - MissingFilenameError (no file path token)

  - RunError (failures while running a search)
    - FileReadError (the searched file could not be read or decoded)

  - SettingsError (unreadable or malformed settings file)

"""

from typing import Any


class MinigrepError(Exception):
    """Base exception class for all minigrep-specific errors.

    Catching this will catch every error raised by the package.

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


class ConfigError(MinigrepError):
    """Exception raised when command-line arguments cannot form a valid config.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the missing or invalid argument
    parameter_value : any, optional
        The invalid value that was provided

    """

    def __init__(self, message: str, parameter_name: str | None = None, parameter_value: Any = None):
        """Initialize the config error with parameter details."""
        super().__init__(message)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class MissingQueryError(ConfigError):
    """Exception raised when no query string was supplied."""

    def __init__(self, message: str = "Didn't get a query string"):
        """Initialize the missing query error."""
        super().__init__(message, parameter_name="query")


class MissingFilenameError(ConfigError):
    """Exception raised when no file name was supplied after the query."""

    def __init__(self, message: str = "Didn't get a file name"):
        """Initialize the missing filename error."""
        super().__init__(message, parameter_name="file_path")


class RunError(MinigrepError):
    """Base exception for failures that happen while running a search."""


class FileReadError(RunError):
    """Exception raised when the file to search cannot be read.

    Missing files, permission problems, directories and undecodable content
    all surface as this single error; the cause is kept in ``original_error``.

    Parameters
    ----------
    file_path : str
        Path to the file that could not be read
    message : str, optional
        Custom error message. If not provided, one is built from the cause
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str
        Path to the file that could not be read

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file read error."""
        if message is None:
            if original_error is not None:
                message = f"Could not read file '{file_path}': {original_error}"
            else:
                message = f"Could not read file '{file_path}'"
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class SettingsError(MinigrepError):
    """Exception raised when a settings file cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the problem
    settings_path : str, optional
        Path to the offending settings file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, settings_path: str | None = None, original_error: Exception | None = None):
        """Initialize the settings error."""
        super().__init__(message, original_error=original_error)
        self.settings_path = settings_path


__all__ = [
    "MinigrepError",
    "ConfigError",
    "MissingQueryError",
    "MissingFilenameError",
    "RunError",
    "FileReadError",
    "SettingsError",
]
