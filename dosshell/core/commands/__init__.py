"""
Shell command handlers

This package contains the built-in command handlers, organized by category:
- navigation.py: cd, dir, ls, pwd
- unix.py: type, cat, echo
- file_ops.py: mkdir, touch, rm, clearfs
- system.py: help, cls, clear
"""

from typing import Callable, List, Tuple

from dosshell.core.command_registry import CommandRegistry
from dosshell.core.commands.file_ops import create_file_commands
from dosshell.core.commands.navigation import create_navigation_commands
from dosshell.core.commands.system import create_system_commands
from dosshell.core.commands.unix import create_unix_commands


def get_builtin_commands(registry: CommandRegistry) -> List[Tuple[str, Callable, str]]:
    """
    Get all built-in command handlers

    Args:
        registry: Registry the help command reports on

    Returns:
        List of (name, handler, description) tuples
    """
    commands = []
    commands.extend(create_system_commands(registry))
    commands.extend(create_navigation_commands())
    commands.extend(create_unix_commands())
    commands.extend(create_file_commands())
    return commands


def register_builtin_commands(registry: CommandRegistry) -> CommandRegistry:
    """Install the built-ins into registry and return it"""
    registry.register_commands(get_builtin_commands(registry))
    return registry
