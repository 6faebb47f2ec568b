"""
Session entity holding the shell's current directory.
"""

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Session:
    """
    State threaded from one command to the next.

    The current directory lives here instead of in the process, so handlers
    never call os.chdir.
    """

    cwd: str

    def __post_init__(self):
        object.__setattr__(self, "cwd", os.path.normpath(os.path.abspath(self.cwd)))

    @classmethod
    def from_process(cls) -> "Session":
        return cls(os.getcwd())

    def resolve(self, path: str) -> str:
        """
        Resolve a user-supplied path against the current directory.

        Args:
            path: Absolute or relative path, taken literally (no "~" expansion)

        Returns:
            Normalized absolute path
        """
        if not os.path.isabs(path):
            path = os.path.join(self.cwd, path)
        return os.path.normpath(path)

    def relative(self, path: str) -> str:
        """Express an absolute path relative to the current directory."""
        return os.path.relpath(path, self.cwd)

    def with_cwd(self, cwd: str) -> "Session":
        return replace(self, cwd=cwd)
