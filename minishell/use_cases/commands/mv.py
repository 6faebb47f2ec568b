"""
Use case for the `mv` verb.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from typing_extensions import override

from minishell.entities.command_result import CommandResult
from minishell.entities.session import Session
from minishell.exceptions import FileSystemError, UsageError
from minishell.ports.commands.command_handler_port import CommandHandlerPort
from minishell.ports.files.file_system_port import FileSystemPort

HELP_LINES = [
    "Usage: mv [OPTION] <source> <destination>",
    "Options:",
    "  -i    Interactive: Prompt before overwrite",
    "  -f    Force: Overwrite without prompt",
    "  -R    Recursive: Move directories recursively",
    "  --help    Display this help and exit",
]


@dataclass(frozen=True)
class MvOptions:
    interactive: bool = False
    force: bool = False
    recursive: bool = False
    show_help: bool = False
    source: str = ""
    destination: str = ""


def parse_mv_args(args: list[str]) -> MvOptions:
    """
    Parse leading flags, then exactly two positional arguments.

    Args:
        args: Tokens after the verb

    Returns:
        Parsed options; when show_help is set nothing else is meaningful

    Raises:
        UsageError: On an unknown flag or a wrong number of positionals
    """
    flags = {"interactive": False, "force": False, "recursive": False}
    index = 0
    while index < len(args) and args[index].startswith("-"):
        option = args[index]
        if option == "-i":
            flags["interactive"] = True
        elif option == "-f":
            flags["force"] = True
        elif option == "-R":
            flags["recursive"] = True
        elif option == "--help":
            return MvOptions(show_help=True)
        else:
            raise UsageError(f"Unknown option: {option}")
        index += 1

    positionals = args[index:]
    if len(positionals) != 2:
        raise UsageError("Usage: mv <source> <destination>")

    return MvOptions(source=positionals[0], destination=positionals[1], **flags)


class MvCommandUseCase(CommandHandlerPort):
    """Move or rename a file or directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, tokens: list[str]) -> CommandResult:
        try:
            options = parse_mv_args(tokens[1:])
        except UsageError as e:
            return CommandResult(session, [str(e)])

        if options.show_help:
            return CommandResult(session, list(HELP_LINES))

        source = session.resolve(options.source)
        destination = session.resolve(options.destination)

        if not self._file_system.exists(source):
            return CommandResult(session, ["Source file/directory does not exist."])

        try:
            if self._file_system.is_dir(source) and options.recursive:
                self._logger.info(f"Moving directory tree {source} -> {destination}")
                self._file_system.copy_tree(source, destination)
                self._file_system.remove_tree(source)
                return CommandResult(
                    session,
                    [
                        f"Successfully moved directory {options.source} to {options.destination}"
                    ],
                )

            # -i is accepted but never prompts: it lets the rename proceed like -f
            if (
                options.force
                or not self._file_system.exists(destination)
                or options.interactive
            ):
                self._logger.info(f"Renaming {source} -> {destination}")
                self._file_system.rename(source, destination)
                return CommandResult(
                    session,
                    [f"Successfully moved {options.source} to {options.destination}"],
                )

            return CommandResult(
                session,
                ["Destination file exists. Use -f to force or -i for interactive move."],
            )
        except FileSystemError as e:
            self._logger.error(f"Error moving {source}: {e}")
            return CommandResult(
                session, [f"Error moving/renaming file/directory: {e}"]
            )
