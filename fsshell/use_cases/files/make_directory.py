"""
Use case for creating a single directory level.
"""

from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class MakeDirectoryUseCase(FileSystemUseCase):
    """Use case behind ``mkdir``."""

    def execute(self, path: str) -> Result[None]:
        self._logger.info(f"Creating directory: {path}")
        return self._run(
            f"creating directory {path}",
            lambda: self._file_system.make_directory(path),
        )
