"""
Unit tests for command dispatcher

Tests the CommandDispatcher class for:
- Echo line and history recording
- Unknown commands
- Handler result normalization
- Error handling
"""

import pytest

from dosshell.core.command_dispatcher import CommandDispatcher, CommandResult, Session
from dosshell.core.command_registry import CommandRegistry
from dosshell.core.filesystem import FilesystemTree
from dosshell.core.history import CommandHistory


def cmd_result(args, session):
    return CommandResult.ok('one', 'two')


def cmd_string_return(args, session):
    return 'String output'


def cmd_none_return(args, session):
    return None


def cmd_exception(args, session):
    raise RuntimeError("Something went wrong")


def cmd_args(args, session):
    return CommandResult.ok(repr(args))


def cmd_fail(args, session):
    return CommandResult.fail("Command failed intentionally")


class TestCommandResult:
    """Test CommandResult helpers"""

    @pytest.mark.unit
    def test_ok(self):
        result = CommandResult.ok('a', 'b')
        assert result.success
        assert result.output_lines == ['a', 'b']

    @pytest.mark.unit
    def test_fail_puts_error_last(self):
        result = CommandResult.fail('bad')
        result.lines = ['first']
        assert not result.success
        assert result.exit_code == 1
        assert result.output_lines == ['first', 'bad']


class TestCommandDispatcher:
    """Test CommandDispatcher class"""

    @pytest.fixture
    def history(self):
        return CommandHistory()

    @pytest.fixture
    def dispatcher(self, history):
        registry = CommandRegistry()
        registry.register_commands([
            ('result', cmd_result, ''),
            ('string', cmd_string_return, ''),
            ('none', cmd_none_return, ''),
            ('exception', cmd_exception, ''),
            ('args', cmd_args, ''),
            ('fail', cmd_fail, ''),
        ])
        return CommandDispatcher(registry, history=history)

    @pytest.fixture
    def session(self):
        return Session(tree=FilesystemTree(), cwd='/GAMES', username='ALICE')

    @pytest.mark.unit
    def test_prompt(self, session):
        assert CommandDispatcher.prompt(session) == 'ALICE@DOS:/GAMES> '

    @pytest.mark.unit
    @pytest.mark.parametrize('line', ['', '   ', '\t '])
    def test_blank_input_does_nothing(self, dispatcher, session, history, line):
        result = dispatcher.execute(line, session)
        assert result.output_lines == []
        assert result.success
        assert len(history) == 0

    @pytest.mark.unit
    def test_echo_line_comes_first(self, dispatcher, session):
        result = dispatcher.execute('result', session)
        assert result.output_lines == ['ALICE@DOS:/GAMES> result', 'one', 'two']

    @pytest.mark.unit
    def test_echo_uses_raw_line(self, dispatcher, session):
        result = dispatcher.execute('  RESULT  x ', session)
        assert result.output_lines[0] == 'ALICE@DOS:/GAMES>   RESULT  x '

    @pytest.mark.unit
    def test_history_records_raw_line(self, dispatcher, session, history):
        history.previous()
        dispatcher.execute('result', session)
        dispatcher.execute('nonexistent', session)
        assert history.entries == ['result', 'nonexistent']
        assert history.cursor is None

    @pytest.mark.unit
    def test_command_name_case_insensitive(self, dispatcher, session):
        assert dispatcher.execute('ReSuLt', session).output_lines[1:] == ['one', 'two']

    @pytest.mark.unit
    def test_args_passed_through_tokenizer(self, dispatcher, session):
        result = dispatcher.execute('args "a b" C', session)
        assert result.output_lines[1] == repr(['a b', 'C'])

    @pytest.mark.unit
    def test_unknown_command(self, dispatcher, session):
        result = dispatcher.execute('FooBar baz', session)
        assert not result.success
        assert result.exit_code == 127
        assert result.output_lines[1] == "'foobar' is not recognized as an internal or external command"

    @pytest.mark.unit
    def test_string_return_becomes_line(self, dispatcher, session):
        assert dispatcher.execute('string', session).output_lines[1:] == ['String output']

    @pytest.mark.unit
    def test_none_return_has_no_lines(self, dispatcher, session):
        assert dispatcher.execute('none', session).output_lines[1:] == []

    @pytest.mark.unit
    def test_handler_exception_is_caught(self, dispatcher, session):
        result = dispatcher.execute('exception', session)
        assert not result.success
        assert result.output_lines[1:] == ['Error executing command: Something went wrong']

    @pytest.mark.unit
    def test_failed_result_keeps_message(self, dispatcher, session):
        result = dispatcher.execute('fail', session)
        assert not result.success
        assert result.output_lines[1:] == ['Command failed intentionally']

    @pytest.mark.unit
    def test_clear_screen_drops_echo(self, session):
        registry = CommandRegistry()
        registry.register('wipe', lambda args, s: CommandResult(clear_screen=True, lines=['after']))
        result = CommandDispatcher(registry).execute('wipe', session)
        assert result.clear_screen
        assert result.output_lines == ['after']

    @pytest.mark.unit
    def test_dispatcher_without_history(self, session):
        registry = CommandRegistry()
        registry.register('x', cmd_result)
        assert CommandDispatcher(registry).execute('x', session).success
