"""
Pytest configuration and shared fixtures
"""

import tempfile
from pathlib import Path

import pytest

from dosshell.core.command_dispatcher import CommandDispatcher, Session
from dosshell.core.command_registry import CommandRegistry
from dosshell.core.commands import register_builtin_commands
from dosshell.core.filesystem import FilesystemTree
from dosshell.core.history import CommandHistory
from dosshell.core.shell_session import ShellSession


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning several components")


@pytest.fixture
def temp_dir():
    """Create a temporary directory"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tree():
    """Seed filesystem tree"""
    return FilesystemTree()


@pytest.fixture
def session(tree):
    """Session at the root of the seed tree"""
    return Session(tree=tree, cwd='/', username='USER')


@pytest.fixture
def registry():
    """Registry with all built-in commands"""
    return register_builtin_commands(CommandRegistry())


@pytest.fixture
def dispatcher(registry):
    """Dispatcher with built-ins and a history log"""
    return CommandDispatcher(registry, history=CommandHistory())


@pytest.fixture
def shell():
    """Non-persistent shell session"""
    with ShellSession() as s:
        yield s


@pytest.fixture
def run(dispatcher, session):
    """Execute a line against the session and return its output without the echoed prompt"""
    def _run(line):
        return dispatcher.execute(line, session).output_lines[1:]
    return _run
