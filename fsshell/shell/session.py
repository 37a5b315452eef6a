"""
Shell session state: the current working directory.
"""

from typing import Optional

from fsshell.utils.paths import initial_directory, resolve_against


class ShellSession:
    """
    Holds the working directory of one interactive session.

    The value is replaced wholesale by ``change_directory`` and never
    re-validated between commands.
    """

    def __init__(self, cwd: Optional[str] = None):
        self._cwd = cwd or initial_directory()

    @property
    def cwd(self) -> str:
        return self._cwd

    def resolve(self, name: str) -> str:
        """Resolve a command argument against the working directory."""
        return resolve_against(self._cwd, name)

    def change_directory(self, path: str) -> None:
        self._cwd = path

    def prompt(self) -> str:
        return f"[{self._cwd}] $ "

    def __repr__(self) -> str:
        return f"ShellSession(cwd='{self._cwd}')"
