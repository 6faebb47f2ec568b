"""
Tests for the LsCommandUseCase.
"""

import os
import re
from unittest.mock import MagicMock

import pytest

from minishell.entities.file_entry import FileEntry
from minishell.entities.session import Session
from minishell.exceptions import FileSystemError
from minishell.ports.files.file_system_port import FileSystemPort
from minishell.use_cases.commands.ls import (
    HELP_LINES,
    LsCommandUseCase,
    LsOptions,
    format_entry,
    parse_ls_args,
)


@pytest.fixture
def ls(file_system, mock_logger):
    return LsCommandUseCase(file_system, mock_logger)


class TestParseLsArgs:
    def test_order_independent(self):
        assert parse_ls_args(["-l", "junk", "-r"]) == LsOptions(reverse=True, long_format=True)

    def test_recursive_and_help(self):
        options = parse_ls_args(["-R", "--help"])

        assert options.recursive is True
        assert options.show_help is True


class TestFormatEntry:
    def test_short_format(self):
        entry = MagicMock(spec=FileEntry)

        assert format_entry(entry, "a.txt", long_format=False) == "a.txt"

    def test_long_format_directory(self):
        entry = MagicMock(spec=FileEntry)
        entry.is_dir = True

        assert format_entry(entry, "docs", long_format=True) == "docs is a directory."

    def test_long_format_file(self):
        entry = MagicMock(spec=FileEntry)
        entry.is_dir = False
        entry.size = 42
        entry.permission_string.return_value = "rw-r--r--"
        entry.modified_display.return_value = "Sun Sep  9 01:46:40 2001"

        assert (
            format_entry(entry, "a.txt", long_format=True)
            == "rw-r--r-- Sun Sep  9 01:46:40 2001         42 a.txt"
        )


class TestLsCommandUseCase:
    """Test cases for the ls verb."""

    def test_help_short_circuits(self, ls, session):
        result = ls.execute(session, ["ls", "-l", "--help"])

        assert result.lines == HELP_LINES

    def test_plain_listing_is_sorted(self, ls, session):
        result = ls.execute(session, ["ls"])

        assert result.lines == ["subdir", "test1.txt", "test2.py"]

    def test_reverse(self, ls, session):
        assert ls.execute(session, ["ls", "-r"]).lines == [
            "test2.py",
            "test1.txt",
            "subdir",
        ]

    def test_recursive_lists_everything(self, ls, session, make_file):
        make_file("subdir/inner/deep.txt", "d")

        result = ls.execute(session, ["ls", "-R"])

        assert result.lines == [
            "subdir",
            os.path.join("subdir", "inner"),
            os.path.join("subdir", "inner", "deep.txt"),
            os.path.join("subdir", "test3.md"),
            "test1.txt",
            "test2.py",
        ]

    @pytest.mark.parametrize("flags", [[], ["-R"], ["-l"], ["-R", "-l"]])
    def test_reverse_is_exact_reverse(self, ls, session, flags):
        forward = ls.execute(session, ["ls"] + flags).lines
        backward = ls.execute(session, ["ls", "-r"] + flags).lines

        assert backward == list(reversed(forward))

    def test_lists_session_directory(self, ls, temp_directory):
        result = ls.execute(Session(os.path.join(temp_directory, "subdir")), ["ls"])

        assert result.lines == ["test3.md"]

    def test_long_format(self, ls, session):
        result = ls.execute(session, ["ls", "-l"])

        assert result.lines[0] == "subdir is a directory."
        pattern = re.compile(r"^[r-][w-][x-][r-][w-][x-][r-][w-][x-] .+ +(\d+) test1\.txt$")
        match = pattern.match(result.lines[1])
        assert match is not None
        assert int(match.group(1)) == len("This is a test file.")
        assert result.lines[1].endswith(f"{len('This is a test file.'):>10} test1.txt")

    def test_empty_directory(self, ls, temp_directory):
        empty = os.path.join(temp_directory, "empty")
        os.mkdir(empty)

        assert ls.execute(Session(empty), ["ls", "-R", "-l"]).lines == []

    def test_listing_error_reported(self, session, mock_logger):
        file_system = MagicMock(spec=FileSystemPort)
        file_system.list_dir.side_effect = FileSystemError("Permission denied")

        result = LsCommandUseCase(file_system, mock_logger).execute(session, ["ls"])

        assert result.lines == ["Error listing directory: Permission denied"]
        mock_logger.error.assert_called_once()

    def test_stat_error_skips_entry(self, session, temp_directory, mock_logger):
        file_system = MagicMock(spec=FileSystemPort)
        file_system.list_dir.return_value = [
            os.path.join(temp_directory, "broken"),
            os.path.join(temp_directory, "test1.txt"),
        ]
        good = MagicMock(spec=FileEntry)
        good.is_dir = True
        file_system.stat.side_effect = [FileSystemError("Cannot stat broken"), good]

        result = LsCommandUseCase(file_system, mock_logger).execute(session, ["ls", "-l"])

        assert result.lines == [
            "Error listing directory: Cannot stat broken",
            "test1.txt is a directory.",
        ]

    def test_recursive_long_format_uses_relative_paths(self, ls, session):
        lines = ls.execute(session, ["ls", "-R", "-l"]).lines

        assert lines[0] == "subdir is a directory."
        assert lines[1].endswith(" " + os.path.join("subdir", "test3.md"))
        assert any("relative to the current directory" in line for line in HELP_LINES)
