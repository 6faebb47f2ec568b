"""minishell package: a tiny interactive shell over the host filesystem.

Subpackages follow a ports/adapters layout; import submodules directly.
"""

__version__ = "1.0.0"

__all__: list[str] = []
