"""
Read-eval-print loop for the interactive shell.
"""

import logging
from collections.abc import Callable
from typing import Optional

from rich.console import Console

from fsshell.shell.dispatcher import CommandDispatcher
from fsshell.shell.rendering import FAREWELL, print_error, print_plain


class ShellRepl:
    """Prompt, read a line, dispatch, repeat until end-of-input or ``exit``."""

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        console: Console,
        err_console: Console,
        read_line: Optional[Callable[[], str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._dispatcher = dispatcher
        self._console = console
        self._err_console = err_console
        self._read_line = read_line or input
        self._logger = logger or logging.getLogger(__name__)

    def run(self) -> int:
        """
        Run the loop.

        Returns:
            Process exit status (always 0)
        """
        while True:
            try:
                self._console.print(self._dispatcher.session.prompt(), end="", markup=False)
                line = self._read_line()
            except EOFError:
                self._console.print()
                break
            except KeyboardInterrupt:
                self._console.print()
                break

            if not line.strip():
                continue

            try:
                if not self._dispatcher.dispatch(line):
                    break
            except Exception as e:
                # Any failure ends the command, never the session
                self._logger.debug(f"Unexpected error handling {line!r}", exc_info=True)
                print_error(self._err_console, f"Error: {e}")

        print_plain(self._console, FAREWELL)
        return 0
