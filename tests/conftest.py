"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest

from fsshell.container import DependencyContainer
from fsshell.shell.dispatcher import CommandDispatcher
from fsshell.shell.rendering import make_console
from fsshell.shell.session import ShellSession


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


class ShellHarness:
    """A dispatcher bound to in-memory output streams."""

    def __init__(self, dispatcher: CommandDispatcher, out: io.StringIO, err: io.StringIO):
        self.dispatcher = dispatcher
        self._out = out
        self._err = err

    @property
    def session(self) -> ShellSession:
        return self.dispatcher.session

    @property
    def output(self) -> str:
        return self._out.getvalue()

    @property
    def errors(self) -> str:
        return self._err.getvalue()

    def run(self, line: str) -> bool:
        return self.dispatcher.dispatch(line)

    def clear(self) -> None:
        for stream in (self._out, self._err):
            stream.seek(0)
            stream.truncate(0)


@pytest.fixture
def shell(temp_directory, dependency_container):
    """
    A dispatcher whose session starts in the temporary directory.

    Returns:
        ShellHarness capturing standard and error output
    """
    out, err = io.StringIO(), io.StringIO()
    dispatcher = dependency_container.create_dispatcher(
        ShellSession(temp_directory),
        make_console(out, color=False),
        make_console(err, color=False),
    )
    return ShellHarness(dispatcher, out, err)
