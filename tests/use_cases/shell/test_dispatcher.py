"""
Tests for the ShellDispatcher.
"""

from unittest.mock import MagicMock

import pytest

from minishell.entities.command_result import CommandResult
from minishell.ports.commands.command_handler_port import CommandHandlerPort
from minishell.use_cases.shell.dispatcher import VERBS, ShellDispatcher


@pytest.fixture
def handlers(session):
    mocks = {}
    for verb in VERBS:
        handler = MagicMock(spec=CommandHandlerPort)
        handler.execute.return_value = CommandResult(session, [f"{verb} ran"])
        mocks[verb] = handler
    return mocks


@pytest.fixture
def dispatcher(handlers, mock_logger):
    return ShellDispatcher(logger=mock_logger, **handlers)


class TestShellDispatcher:
    """Test cases for verb routing."""

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_no_command(self, dispatcher, handlers, session, raw):
        result = dispatcher.execute(session, raw)

        assert result.lines == ["No command entered."]
        assert result.session == session
        for handler in handlers.values():
            handler.execute.assert_not_called()

    @pytest.mark.parametrize("raw", ["pwd", "mkdir x", "exit now", "l s"])
    def test_unrecognized(self, dispatcher, handlers, session, raw):
        result = dispatcher.execute(session, raw)

        assert result.lines == ["Command not recognized."]
        for handler in handlers.values():
            handler.execute.assert_not_called()

    @pytest.mark.parametrize("verb", VERBS)
    def test_routes_each_verb(self, dispatcher, handlers, session, verb):
        result = dispatcher.execute(session, f"{verb} a b")

        assert result.lines == [f"{verb} ran"]
        handlers[verb].execute.assert_called_once_with(session, [verb, "a", "b"])

    def test_verb_is_case_insensitive(self, dispatcher, handlers, session):
        dispatcher.execute(session, "Ls -R")

        handlers["ls"].execute.assert_called_once_with(session, ["Ls", "-R"])

    def test_returns_handler_session(self, dispatcher, handlers, session, temp_directory):
        moved = session.with_cwd(temp_directory + "/subdir")
        handlers["cd"].execute.return_value = CommandResult(moved)

        assert dispatcher.execute(session, "cd subdir").session == moved
