"""
Use case for changing the working directory.
"""

from fsshell.entities.result import Result
from fsshell.exceptions import NotFoundError
from fsshell.use_cases.base import FileSystemUseCase
from fsshell.utils.paths import parent_of, resolve_against


class ChangeDirectoryUseCase(FileSystemUseCase):
    """
    Resolve a ``cd`` target against the current directory.

    The use case does not mutate any session; it returns the canonical path the
    caller should switch to. On failure the caller keeps its directory.
    """

    def _target(self, current: str, target: str) -> str:
        if target == "..":
            return parent_of(current)
        return resolve_against(current, target)

    def _change(self, current: str, target: str) -> str:
        candidate = self._target(current, target)
        if not self._file_system.is_directory(candidate):
            raise NotFoundError(f"Directory not found: {candidate}")
        return self._file_system.canonicalize(candidate)

    def execute(self, current: str, target: str) -> Result[str]:
        """
        Args:
            current: Current working directory
            target: ``..``, an absolute path, or a path relative to current

        Returns:
            Result carrying the new canonical working directory
        """
        self._logger.info(f"Changing directory from {current} to {target}")
        return self._run(
            f"changing directory to {target}", lambda: self._change(current, target)
        )
