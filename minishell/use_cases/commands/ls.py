"""
Use case for the `ls` verb.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from typing_extensions import override

from minishell.entities.command_result import CommandResult
from minishell.entities.file_entry import FileEntry
from minishell.entities.session import Session
from minishell.exceptions import FileSystemError
from minishell.ports.commands.command_handler_port import CommandHandlerPort
from minishell.ports.files.file_system_port import FileSystemPort

HELP_LINES = [
    "-----------------",
    "-r: Reverse the order of listing",
    "-l: Use a long listing format",
    "-R: List subdirectories recursively, showing paths relative to the current directory",
    "--help: Show help message",
]

SIZE_WIDTH = 10


@dataclass(frozen=True)
class LsOptions:
    reverse: bool = False
    long_format: bool = False
    recursive: bool = False
    show_help: bool = False


def parse_ls_args(args: list[str]) -> LsOptions:
    """Scan every token for flags; anything unrecognized is ignored."""
    return LsOptions(
        reverse="-r" in args,
        long_format="-l" in args,
        recursive="-R" in args,
        show_help="--help" in args,
    )


def format_entry(entry: FileEntry, display_name: str, long_format: bool) -> str:
    """
    Render one listing line.

    Args:
        entry: The entry to describe
        display_name: Path relative to the current directory; the bare
            name unless the listing is recursive
        long_format: Include permissions, mtime and size for files

    Returns:
        The formatted line
    """
    if not long_format:
        return display_name
    if entry.is_dir:
        return f"{display_name} is a directory."
    return (
        f"{entry.permission_string()} {entry.modified_display()} "
        f"{entry.size:>{SIZE_WIDTH}} {display_name}"
    )


class LsCommandUseCase(CommandHandlerPort):
    """List the contents of the current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def collect(self, session: Session, options: LsOptions) -> list[str]:
        """
        Enumerate the current directory in listing order.

        Siblings are sorted by name, recursive listings are depth-first with each
        directory before its contents, and `-r` reverses the whole sequence.
        Callers display each path relative to the session directory, so `-R`
        shows `subdir/name` where a flat listing shows `name`.

        Returns:
            Absolute paths
        """
        if options.recursive:
            paths = self._file_system.walk(session.cwd)
        else:
            paths = self._file_system.list_dir(session.cwd)
        if options.reverse:
            paths.reverse()
        return paths

    @override
    def execute(self, session: Session, tokens: list[str]) -> CommandResult:
        options = parse_ls_args(tokens[1:])
        if options.show_help:
            return CommandResult(session, list(HELP_LINES))

        self._logger.info(f"Listing {session.cwd} ({options})")
        try:
            paths = self.collect(session, options)
        except FileSystemError as e:
            self._logger.error(f"Error listing {session.cwd}: {e}")
            return CommandResult(session, [f"Error listing directory: {e}"])

        lines: list[str] = []
        for path in paths:
            name = session.relative(path)
            if not options.long_format:
                lines.append(name)
                continue
            try:
                entry = self._file_system.stat(path)
            except FileSystemError as e:
                # e.g. a dangling symlink; keep listing the rest
                self._logger.warning(f"Could not stat {path}: {e}")
                lines.append(f"Error listing directory: {e}")
                continue
            lines.append(format_entry(entry, name, long_format=True))

        return CommandResult(session, lines)
