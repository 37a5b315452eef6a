"""
Use case for moving or renaming an entry.
"""

from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class MoveEntryUseCase(FileSystemUseCase):
    """Use case behind ``mv``."""

    def execute(self, source: str, destination: str) -> Result[None]:
        self._logger.info(f"Moving {source} to {destination}")
        return self._run(
            f"moving {source} to {destination}",
            lambda: self._file_system.move(source, destination),
        )
