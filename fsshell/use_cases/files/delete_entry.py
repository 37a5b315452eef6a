"""
Use case for deleting a file or a directory tree.
"""

from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class DeleteEntryUseCase(FileSystemUseCase):
    """Use case behind ``rm``."""

    def execute(self, path: str) -> Result[None]:
        """
        Delete path.

        Directories are removed with all their contents, without confirmation.

        Args:
            path: Absolute path of the entry to delete

        Returns:
            Empty Result, or a not-found / operation-failed error
        """
        self._logger.info(f"Deleting: {path}")
        return self._run(f"deleting {path}", lambda: self._file_system.remove(path))
