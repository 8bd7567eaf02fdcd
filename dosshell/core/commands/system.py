"""
System command handlers

Implements: help, cls (clear)
"""

from typing import Callable, List, Tuple

from dosshell.core.command_dispatcher import CommandResult, Session
from dosshell.core.command_registry import CommandRegistry


class SystemCommands:
    """Handler for commands about the shell itself"""

    def __init__(self, registry: CommandRegistry):
        """
        Args:
            registry: Registry listed by help
        """
        self.registry = registry

    def cmd_help(self, args: List[str], session: Session) -> CommandResult:
        """List every registered command with its description"""
        return CommandResult.ok(*[
            f"{entry.name:<12} - {entry.description}"
            for entry in self.registry.entries()
        ])

    def cmd_cls(self, args: List[str], session: Session) -> CommandResult:
        """Clear the output buffer"""
        return CommandResult(success=True, clear_screen=True)


def create_system_commands(registry: CommandRegistry) -> List[Tuple[str, Callable, str]]:
    """
    Create system command handlers

    Returns:
        List of (name, handler, description) tuples
    """
    system = SystemCommands(registry)

    return [
        ('help', system.cmd_help, 'Shows help'),
        ('cls', system.cmd_cls, 'Clear screen (alias CLEAR)'),
        ('clear', system.cmd_cls, 'Clear screen'),
    ]
