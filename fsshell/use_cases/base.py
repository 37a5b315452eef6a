"""
Shared plumbing for use cases backed by the file system port.
"""

import logging
from collections.abc import Callable
from typing import Optional, TypeVar

from fsshell.entities.result import Result
from fsshell.exceptions import OperationFailedError, ShellError
from fsshell.ports.files.file_system_port import FileSystemPort

T = TypeVar("T")


class FileSystemUseCase:
    """Base class turning port exceptions into a Result."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(self.__class__.__module__)

    def _run(self, description: str, operation: Callable[[], T]) -> Result[T]:
        """
        Run operation and wrap its outcome.

        ShellError is returned as is; anything else is logged and wrapped in
        an OperationFailedError.
        """
        try:
            return Result.success(operation())
        except ShellError as e:
            self._logger.info(f"Failed {description}: {e}")
            return Result.failure(e)
        except Exception as e:
            self._logger.error(f"Error {description}: {e}")
            return Result.failure(OperationFailedError(f"Failed {description}: {str(e)}"))
