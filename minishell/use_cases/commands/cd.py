"""
Use case for the `cd` verb.
"""

import logging
from typing import Optional

from typing_extensions import override

from minishell.entities.command_result import CommandResult
from minishell.entities.session import Session
from minishell.ports.commands.command_handler_port import CommandHandlerPort
from minishell.ports.files.file_system_port import FileSystemPort

USAGE = "Usage: cd <directory>"

HELP_LINES = [
    "----------------------",
    "       cd / - Change current directory to the root directory.",
    "       cd .. - Move up one directory from the current location.",
    '       cd "dir" - Change current directory to the specified directory named "dir".',
    "       cd --help - Shows help message.",
]


class CdCommandUseCase(CommandHandlerPort):
    """Change the session's current directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, tokens: list[str]) -> CommandResult:
        if len(tokens) != 2:
            return CommandResult(session, [USAGE])

        target = tokens[1]

        if target == "--help":
            return CommandResult(session, list(HELP_LINES))
        if target == "/":
            return self._move(session, self._file_system.root_of(session.cwd))
        if target == "..":
            return self._move(session, self._file_system.parent_of(session.cwd))

        path = session.resolve(target)
        if self._file_system.exists(path) and self._file_system.is_dir(path):
            return self._move(session, path)

        self._logger.info(f"cd target not found: {path}")
        return CommandResult(session, ["Directory doesn't exist or is not accessible."])

    def _move(self, session: Session, directory: str) -> CommandResult:
        self._logger.info(f"Changing directory: {session.cwd} -> {directory}")
        return CommandResult(session.with_cwd(directory))
