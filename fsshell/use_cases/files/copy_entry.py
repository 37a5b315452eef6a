"""
Use case for copying a file or a directory tree.
"""

from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class CopyEntryUseCase(FileSystemUseCase):
    """Use case behind ``cp``."""

    def execute(self, source: str, destination: str) -> Result[None]:
        """
        Copy source to destination.

        Args:
            source: Absolute path of the file or directory to copy
            destination: Absolute target path. An existing directory is merged
                into; existing files are overwritten.
        """
        self._logger.info(f"Copying {source} to {destination}")
        return self._run(
            f"copying {source} to {destination}",
            lambda: self._file_system.copy(source, destination),
        )
