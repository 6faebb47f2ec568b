"""
Use case for the `cp` verb.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from typing_extensions import override

from minishell.entities.command_result import CommandResult
from minishell.entities.session import Session
from minishell.exceptions import FileSystemError
from minishell.ports.commands.command_handler_port import CommandHandlerPort
from minishell.ports.files.file_system_port import FileSystemPort

VERSION_LINE = "cp (Version 1.0)"

HELP_LINES = [
    "Options:",
    "-r: Copy directories and their contents recursively",
    "-b: Create backups of existing files",
    "--help: Show help message",
    "--version: Show version information",
]

BACKUP_SUFFIX = "~"


@dataclass(frozen=True)
class CpOptions:
    recursive: bool = False
    show_help: bool = False
    show_version: bool = False
    backup: bool = False
    source: str = ""
    destination: str = ""


def parse_cp_args(args: list[str]) -> CpOptions:
    """
    Scan all tokens for flags; the first two other tokens are source and destination.

    Further positional tokens are ignored.
    """
    flags = {
        "recursive": False,
        "show_help": False,
        "show_version": False,
        "backup": False,
    }
    positionals: list[str] = []
    for option in args:
        if option == "-r":
            flags["recursive"] = True
        elif option == "--help":
            flags["show_help"] = True
        elif option == "--version":
            flags["show_version"] = True
        elif option == "-b":
            flags["backup"] = True
        elif len(positionals) < 2:
            positionals.append(option)

    positionals += [""] * (2 - len(positionals))
    return CpOptions(source=positionals[0], destination=positionals[1], **flags)


class CpCommandUseCase(CommandHandlerPort):
    """Copy files and directory trees."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, tokens: list[str]) -> CommandResult:
        options = parse_cp_args(tokens[1:])

        if options.show_version:
            return CommandResult(session, [VERSION_LINE])
        if options.show_help or not options.source or not options.destination:
            return CommandResult(session, list(HELP_LINES))

        source = session.resolve(options.source)
        destination = session.resolve(options.destination)

        if not self._file_system.exists(source):
            return CommandResult(session, ["Source file does not exist."])

        try:
            if self._file_system.is_dir(source):
                if not options.recursive:
                    return CommandResult(
                        session, ["Use -r option to copy directories recursively."]
                    )
                self._copy_directory(source, destination)
                return CommandResult(
                    session,
                    [
                        f"Successfully copied directory '{options.source}' "
                        f"to '{options.destination}'."
                    ],
                )

            lines: list[str] = []
            if options.backup and self._file_system.exists(destination):
                backup = options.destination + BACKUP_SUFFIX
                self._file_system.copy_file(
                    destination, destination + BACKUP_SUFFIX, overwrite=True
                )
                self._logger.info(f"Backed up {destination}")
                lines.append(f"Created backup file: {backup}")

            self._file_system.copy_file(source, destination, overwrite=True)
            self._logger.info(f"Copied {source} -> {destination}")
            lines.append(
                f"Successfully copied file '{options.source}' to '{options.destination}'."
            )
            return CommandResult(session, lines)
        except FileSystemError as e:
            self._logger.error(f"Error copying {source}: {e}")
            return CommandResult(session, [f"Error copying file/directory: {e}"])

    def _copy_directory(self, source: str, destination: str) -> None:
        """Mirror every entry of the source tree at the same relative path under destination."""
        if not self._file_system.exists(destination):
            self._file_system.mkdir(destination)

        for path in self._file_system.walk(source):
            target = os.path.join(destination, os.path.relpath(path, source))
            if self._file_system.is_dir(path):
                self._file_system.mkdir(target, exist_ok=True)
            else:
                self._file_system.copy_file(path, target, overwrite=True)
        self._logger.info(f"Copied tree {source} -> {destination}")
