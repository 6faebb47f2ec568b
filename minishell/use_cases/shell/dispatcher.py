"""
Dispatcher routing a command line to the handler for its verb.
"""

import logging
from typing import Optional

from minishell.entities.command_line import CommandLine
from minishell.entities.command_result import CommandResult
from minishell.entities.session import Session
from minishell.ports.commands.command_handler_port import CommandHandlerPort

VERBS = ("cd", "mv", "rm", "ls", "cp")


class ShellDispatcher:
    """Route a command line to exactly one of the five verb handlers."""

    def __init__(
        self,
        cd: CommandHandlerPort,
        mv: CommandHandlerPort,
        rm: CommandHandlerPort,
        ls: CommandHandlerPort,
        cp: CommandHandlerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher with one handler per verb.

        Args:
            cd, mv, rm, ls, cp: Handlers for each verb
            logger: Logger instance to use for logging
        """
        self._handlers: dict[str, CommandHandlerPort] = {
            "cd": cd,
            "mv": mv,
            "rm": rm,
            "ls": ls,
            "cp": cp,
        }
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, raw: str) -> CommandResult:
        """
        Tokenize and run one line.

        Args:
            session: Current shell session
            raw: Line as typed by the user

        Returns:
            The handler's result, or a message for empty or unknown input
        """
        command = CommandLine.parse(raw)
        if command.is_empty:
            return CommandResult(session, ["No command entered."])

        handler = self._handlers.get(command.verb)
        if handler is None:
            self._logger.info(f"Unrecognized verb: {command.verb}")
            return CommandResult(session, ["Command not recognized."])

        self._logger.debug(f"Dispatching '{command.verb}' with {command.args}")
        return handler.execute(session, list(command.tokens))
