"""
Interactive entry point: the read-eval-print loop around the dispatcher.
"""

import argparse
import logging
import os
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from minishell.config.settings import Settings, parse_log_level
from minishell.container import container
from minishell.entities.session import Session
from minishell.exceptions import ConfigurationError
from minishell.use_cases.shell.dispatcher import ShellDispatcher

BANNER = "Simple Shell - Enter a command (cd, mv, rm, ls, cp):"
EXIT_WORD = "exit"

logger = logging.getLogger(__name__)


class ShellRepl:
    """Read a line, run it, print the result and a separator, until `exit`."""

    def __init__(
        self,
        dispatcher: ShellDispatcher,
        session: Session,
        console: Optional[Console] = None,
        prompt: str = "> ",
        separator: str = "-----------------",
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self._dispatcher = dispatcher
        self._session = session
        self._console = console or Console(soft_wrap=True, highlight=False)
        self._prompt = prompt
        self._separator = separator
        self._read_line = read_line or (
            lambda prompt: self._console.input(Text(prompt))
        )

    @property
    def session(self) -> Session:
        return self._session

    def _emit(self, line: str) -> None:
        # File names may contain [brackets] or :colons:; print them verbatim
        self._console.print(line, markup=False, highlight=False, emoji=False)

    def run_line(self, raw: str) -> list[str]:
        result = self._dispatcher.execute(self._session, raw)
        self._session = result.session
        for line in result.lines:
            self._emit(line)
        return result.lines

    def run(self) -> Session:
        """
        Run the loop until the exit word or end of input.

        Returns:
            The session as left by the last command
        """
        self._emit(BANNER)
        while True:
            try:
                raw = self._read_line(self._prompt)
            except EOFError:
                logger.debug("End of input, leaving shell")
                break

            if raw.rstrip("\r\n") == EXIT_WORD:
                break

            self.run_line(raw)
            self._emit(self._separator)
        return self._session


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minishell",
        description="Tiny interactive shell with cd, mv, rm, ls and cp.",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Directory to start in (default: MINISHELL_START_DIR or the current directory)",
    )
    parser.add_argument(
        "-c",
        "--command",
        default=None,
        help="Run a single command line and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MINISHELL_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings()
        level = (
            parse_log_level(args.log_level, "--log-level")
            if args.log_level
            else settings.log_level
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    # Configure logging
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    start_dir = os.path.abspath(args.cwd or settings.start_dir or os.getcwd())
    if not os.path.isdir(start_dir):
        print(f"Start directory does not exist: {start_dir}", file=sys.stderr)
        return 2

    repl = ShellRepl(
        container.get_dispatcher(),
        Session(start_dir),
        prompt=settings.prompt,
        separator=settings.separator,
    )

    if args.command is not None:
        repl.run_line(args.command)
        return 0

    logger.info(f"Starting shell in {start_dir}")
    repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
