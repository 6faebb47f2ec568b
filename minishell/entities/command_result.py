"""
Result of running one command.
"""

from dataclasses import dataclass, field

from minishell.entities.session import Session


@dataclass(frozen=True)
class CommandResult:
    session: Session
    lines: list[str] = field(default_factory=list)
