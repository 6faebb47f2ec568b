"""
Command line entity and tokenizer.
"""

from dataclasses import dataclass


def tokenize(raw: str) -> list[str]:
    """
    Split a raw input line into whitespace-separated tokens.

    No quoting, escaping or substitution is supported; empty tokens are dropped.

    Args:
        raw: The line as typed by the user

    Returns:
        Tokens in their original order
    """
    return raw.split()


@dataclass(frozen=True)
class CommandLine:
    """A tokenized command line: the verb plus its arguments."""

    tokens: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "CommandLine":
        return cls(tuple(tokenize(raw)))

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def verb(self) -> str:
        """First token, case-folded. Empty for an empty line."""
        return self.tokens[0].lower() if self.tokens else ""

    @property
    def args(self) -> list[str]:
        return list(self.tokens[1:])
