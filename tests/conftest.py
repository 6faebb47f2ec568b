"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from minishell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from minishell.container import DependencyContainer
from minishell.entities.session import Session


def write_file(path: str, content: str) -> str:
    with open(path, "w") as f:
        f.write(content)
    return path


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory tree for testing file operations.

    Layout:
        test1.txt
        test2.py
        subdir/test3.md

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        write_file(os.path.join(temp_dir, "test1.txt"), "This is a test file.")
        write_file(os.path.join(temp_dir, "test2.py"), "print('Hello, world!')")

        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        write_file(os.path.join(subdir, "test3.md"), "# Test Markdown\n\nThis is a test.")

        yield os.path.abspath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def file_system(mock_logger):
    """Real local filesystem adapter with a mocked logger."""
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def session(temp_directory):
    """Session positioned at the temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def make_file(temp_directory):
    """
    Factory writing a text file below the temporary directory.

    Returns:
        Callable(relative_path, content) -> absolute path
    """

    def _make(relative_path: str, content: str = "") -> str:
        path = os.path.join(temp_directory, relative_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        return write_file(path, content)

    return _make


@pytest.fixture
def read_text():
    """Return a helper reading a whole text file."""

    def _read(path: str) -> str:
        with open(path) as f:
            return f.read()

    return _read
