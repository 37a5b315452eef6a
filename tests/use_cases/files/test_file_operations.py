"""
Tests for the touch, mkdir, rm, cp and mv use cases.
"""

import os
from unittest.mock import MagicMock

import pytest

from fsshell.exceptions import ErrorKind, NotFoundError, OperationFailedError
from fsshell.ports.files.file_system_port import FileSystemPort
from fsshell.use_cases.files.copy_entry import CopyEntryUseCase
from fsshell.use_cases.files.create_file import CreateFileUseCase
from fsshell.use_cases.files.delete_entry import DeleteEntryUseCase
from fsshell.use_cases.files.make_directory import MakeDirectoryUseCase
from fsshell.use_cases.files.move_entry import MoveEntryUseCase


@pytest.fixture
def mock_file_system():
    file_system = MagicMock(spec=FileSystemPort)
    file_system.create_file.return_value = None
    return file_system


class TestCreateFileUseCase:
    def test_execute_success(self, mock_file_system, mock_logger):
        result = CreateFileUseCase(mock_file_system, mock_logger).execute("/w/a.txt")

        assert result.ok
        assert result.value is None
        mock_file_system.create_file.assert_called_once_with("/w/a.txt")
        mock_logger.info.assert_any_call("Creating file: /w/a.txt")

    def test_execute_failure(self, mock_file_system, mock_logger):
        mock_file_system.create_file.side_effect = OperationFailedError(
            "Failed to create file: [Errno 2] No such file or directory"
        )

        result = CreateFileUseCase(mock_file_system, mock_logger).execute("/w/x/a.txt")

        assert result.kind is ErrorKind.OPERATION_FAILED
        assert result.message.startswith("Failed to create file")
        mock_logger.info.assert_any_call(
            "Failed creating file /w/x/a.txt: "
            "Failed to create file: [Errno 2] No such file or directory"
        )


class TestMakeDirectoryUseCase:
    def test_execute_success(self, mock_file_system, mock_logger):
        result = MakeDirectoryUseCase(mock_file_system, mock_logger).execute("/w/docs")

        assert result.ok
        mock_file_system.make_directory.assert_called_once_with("/w/docs")

    def test_execute_existing(self, temp_directory, dependency_container):
        use_case = dependency_container.get_make_directory_use_case()

        result = use_case.execute(os.path.join(temp_directory, "subdir"))

        assert result.kind is ErrorKind.OPERATION_FAILED
        assert result.message.startswith("Error creating directory")


class TestDeleteEntryUseCase:
    def test_execute_success(self, mock_file_system, mock_logger):
        result = DeleteEntryUseCase(mock_file_system, mock_logger).execute("/w/docs")

        assert result.ok
        mock_file_system.remove.assert_called_once_with("/w/docs")
        mock_logger.info.assert_any_call("Deleting: /w/docs")

    def test_execute_missing(self, mock_file_system, mock_logger):
        mock_file_system.remove.side_effect = NotFoundError("Path not found: /w/ghost")

        result = DeleteEntryUseCase(mock_file_system, mock_logger).execute("/w/ghost")

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.message == "Path not found: /w/ghost"

    def test_execute_removes_tree(self, temp_directory, dependency_container):
        use_case = dependency_container.get_delete_entry_use_case()

        result = use_case.execute(os.path.join(temp_directory, "subdir"))

        assert result.ok
        assert not os.path.exists(os.path.join(temp_directory, "subdir"))


class TestCopyEntryUseCase:
    def test_execute_success(self, mock_file_system, mock_logger):
        result = CopyEntryUseCase(mock_file_system, mock_logger).execute("/w/a", "/w/b")

        assert result.ok
        mock_file_system.copy.assert_called_once_with("/w/a", "/w/b")
        mock_logger.info.assert_any_call("Copying /w/a to /w/b")

    def test_execute_missing_source(self, mock_file_system, mock_logger):
        mock_file_system.copy.side_effect = NotFoundError("Source not found: /w/a")

        result = CopyEntryUseCase(mock_file_system, mock_logger).execute("/w/a", "/w/b")

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.message == "Source not found: /w/a"

    def test_execute_unexpected_error(self, mock_file_system, mock_logger):
        mock_file_system.copy.side_effect = ValueError("bad path")

        result = CopyEntryUseCase(mock_file_system, mock_logger).execute("/w/a", "/w/b")

        assert result.kind is ErrorKind.OPERATION_FAILED
        assert result.message == "Failed copying /w/a to /w/b: bad path"
        mock_logger.error.assert_called_once()


class TestMoveEntryUseCase:
    def test_execute_success(self, mock_file_system, mock_logger):
        result = MoveEntryUseCase(mock_file_system, mock_logger).execute("/w/a", "/w/b")

        assert result.ok
        mock_file_system.move.assert_called_once_with("/w/a", "/w/b")

    def test_execute_renames(self, temp_directory, dependency_container):
        use_case = dependency_container.get_move_entry_use_case()
        src = os.path.join(temp_directory, "test2.py")
        dest = os.path.join(temp_directory, "script.py")

        result = use_case.execute(src, dest)

        assert result.ok
        assert os.path.isfile(dest)
        assert not os.path.exists(src)
