"""
Port interface for the per-verb command handlers.
"""

from abc import ABC, abstractmethod

from minishell.entities.command_result import CommandResult
from minishell.entities.session import Session


class CommandHandlerPort(ABC):
    """
    Port interface for one shell verb.

    A handler owns its own flag parsing and filesystem calls and reports every
    outcome, failures included, as output lines.
    """

    @abstractmethod
    def execute(self, session: Session, tokens: list[str]) -> CommandResult:
        """
        Run the verb.

        Args:
            session: Current shell session
            tokens: Full command line tokens, verb first

        Returns:
            Output lines and the session to use for the next command
        """
        pass
