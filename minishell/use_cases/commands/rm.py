"""
Use case for the `rm` verb.

Arguments are applied left to right. `-R` only affects the paths that follow it,
while `-d` and `*ext` sweep the current directory at the point they appear.
"""

import fnmatch
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

USAGE = "Usage: rm <file1> [file2 ...]"

HELP_LINES = [
    USAGE,
    "Options:",
    "-R: Remove directories and their contents recursively",
    "-d: Remove only empty directories",
    "--help: Show help message",
    "*extension: Remove files with the specified extension",
]

REMOVE_PATH = "path"
SWEEP_EMPTY_DIRS = "empty_dirs"
SWEEP_EXTENSION = "extension"


@dataclass(frozen=True)
class RmStep:
    action: str
    target: str = ""
    recursive: bool = False


@dataclass(frozen=True)
class RmPlan:
    steps: tuple[RmStep, ...]
    show_help: bool = False


def extension_of(token: str) -> Optional[str]:
    """Return the extension named by a `*txt` or `*.txt` token, else None."""
    if len(token) < 2 or not token.startswith("*"):
        return None
    extension = token[1:].lstrip(".")
    return extension or None


def parse_rm_args(args: list[str]) -> RmPlan:
    steps: list[RmStep] = []
    recursive = False
    show_help = False

    for option in args:
        if option == "-R":
            recursive = True
        elif option == "-d":
            steps.append(RmStep(SWEEP_EMPTY_DIRS))
        elif option == "--help":
            show_help = True
        elif extension_of(option) is not None:
            steps.append(RmStep(SWEEP_EXTENSION, extension_of(option) or ""))
        else:
            steps.append(RmStep(REMOVE_PATH, option, recursive))

    return RmPlan(tuple(steps), show_help)


class RmCommandUseCase(CommandHandlerPort):
    """Remove files and directories."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, session: Session, tokens: list[str]) -> CommandResult:
        if len(tokens) < 2:
            return CommandResult(session, [USAGE])

        plan = parse_rm_args(tokens[1:])
        lines: list[str] = []

        for step in plan.steps:
            if step.action == SWEEP_EMPTY_DIRS:
                lines.extend(self._remove_empty_directories(session.cwd))
            elif step.action == SWEEP_EXTENSION:
                lines.extend(self._remove_files_with_extension(session.cwd, step.target))
            else:
                lines.extend(self._remove_path(session, step))

        if plan.show_help:
            lines.extend(HELP_LINES)

        return CommandResult(session, lines)

    def _remove_path(self, session: Session, step: RmStep) -> list[str]:
        name = step.target
        path = session.resolve(name)

        if not self._file_system.exists(path):
            return [f"File/directory '{name}' does not exist."]

        try:
            if self._file_system.is_dir(path):
                if not step.recursive:
                    return [
                        f"Cannot remove directory '{name}'. Use -R to remove directories."
                    ]
                self._file_system.remove_tree(path)
                self._logger.info(f"Removed directory tree {path}")
                return [f"Directory '{name}' and its contents removed."]

            self._file_system.remove(path)
            self._logger.info(f"Removed file {path}")
            return [f"File '{name}' removed."]
        except FileSystemError as e:
            self._logger.error(f"Error removing {path}: {e}")
            return [f"Error removing file/directory '{name}': {e}"]

    def _remove_empty_directories(self, directory: str) -> list[str]:
        lines: list[str] = []
        try:
            children = self._file_system.list_dir(directory)
        except FileSystemError as e:
            self._logger.error(f"Error scanning {directory}: {e}")
            return [f"Error removing file/directory '{directory}': {e}"]

        for child in children:
            try:
                if not self._file_system.is_empty_dir(child):
                    continue
                self._file_system.remove_dir(child)
                lines.append(f"Directory '{child}' removed.")
            except FileSystemError as e:
                self._logger.error(f"Error removing {child}: {e}")
                lines.append(f"Error removing file/directory '{child}': {e}")
        return lines

    def _remove_files_with_extension(self, directory: str, extension: str) -> list[str]:
        lines: list[str] = []
        pattern = "*." + extension
        self._logger.info(f"Removing '{pattern}' files in {directory}")
        try:
            children = self._file_system.list_dir(directory)
        except FileSystemError as e:
            self._logger.error(f"Error scanning {directory}: {e}")
            return [f"Error removing file/directory '{directory}': {e}"]

        for child in children:
            if not fnmatch.fnmatchcase(os.path.basename(child), pattern):
                continue
            if not self._file_system.is_file(child):
                continue
            try:
                self._file_system.remove(child)
                lines.append(f"File '{child}' removed.")
            except FileSystemError as e:
                self._logger.error(f"Error removing {child}: {e}")
                lines.append(f"Error removing file/directory '{child}': {e}")
        return lines
