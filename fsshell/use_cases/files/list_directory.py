"""
Use case for listing the entries of a directory.
"""

from fsshell.entities.entry import DirectoryEntry
from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class ListDirectoryUseCase(FileSystemUseCase):
    """Use case for listing the immediate children of a directory."""

    def execute(self, directory: str) -> Result[list[DirectoryEntry]]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            Result carrying DirectoryEntry views sorted by name, or the
            enumeration error (no partial rows)
        """
        self._logger.info(f"Listing entries in directory: {directory}")
        result = self._run(
            f"listing entries in {directory}",
            lambda: self._file_system.list_entries(directory),
        )
        if result.ok:
            self._logger.info(f"Found {len(result.value or [])} entries")
        return result
