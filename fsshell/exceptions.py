"""
Custom exceptions for the application.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed shell operation."""

    NOT_FOUND = "not_found"
    OPERATION_FAILED = "operation_failed"
    INVALID_ARGUMENT = "invalid_argument"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ShellError(BaseAppError):
    """Base class for errors reported by a shell command."""

    kind: ErrorKind = ErrorKind.OPERATION_FAILED


class NotFoundError(ShellError):
    """Exception raised when the target path does not exist."""

    kind = ErrorKind.NOT_FOUND


class OperationFailedError(ShellError):
    """Exception raised when the underlying filesystem call fails."""

    kind = ErrorKind.OPERATION_FAILED


class InvalidArgumentError(ShellError):
    """Exception raised for missing or malformed command arguments."""

    kind = ErrorKind.INVALID_ARGUMENT


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
