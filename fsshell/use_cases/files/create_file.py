"""
Use case for creating (or truncating) a file.
"""

from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class CreateFileUseCase(FileSystemUseCase):
    """Use case behind ``touch``."""

    def execute(self, path: str) -> Result[None]:
        """
        Create an empty file at path.

        An existing file is truncated to zero length, not left untouched.
        """
        self._logger.info(f"Creating file: {path}")
        return self._run(
            f"creating file {path}", lambda: self._file_system.create_file(path)
        )
