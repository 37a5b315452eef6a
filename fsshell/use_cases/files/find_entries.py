"""
Use case for searching a directory tree by name.
"""

import os

from fsshell.entities.result import Result
from fsshell.exceptions import OperationFailedError, ShellError
from fsshell.use_cases.base import FileSystemUseCase


class FindEntriesUseCase(FileSystemUseCase):
    """Use case behind ``find``."""

    def execute(self, root: str, query: str) -> Result[list[str]]:
        """
        Find every descendant of root whose name contains query.

        Matching is a case-sensitive substring test on the last path
        component; there is no glob or regex support.

        Args:
            root: Directory whose subtree is searched
            query: Substring to look for

        Returns:
            Result carrying the matching paths in walk order. If enumeration
            fails part way, the Result is a failure that still carries the
            matches found before the error.
        """
        self._logger.info(f"Searching for '{query}' under {root}")
        matches: list[str] = []
        try:
            for path in self._file_system.walk(root):
                if query in os.path.basename(path):
                    matches.append(path)
        except ShellError as e:
            self._logger.info(f"Search aborted after {len(matches)} matches: {e}")
            return Result.failure(e, value=matches)
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            return Result.failure(
                OperationFailedError(f"Search error: {str(e)}"), value=matches
            )
        self._logger.info(f"Found {len(matches)} entries matching '{query}'")
        return Result.success(matches)
