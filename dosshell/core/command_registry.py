"""
Command registry

Maps lowercase command names to handlers and their help text. Built-ins are
installed through the same register() call that front ends use to add
their own commands.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class CommandEntry:
    """A registered command"""
    name: str
    handler: Callable
    description: str = ''


class CommandRegistry:
    """Case-insensitive name -> CommandEntry mapping"""

    def __init__(self):
        self._entries: Dict[str, CommandEntry] = {}

    def register(self, name: str, handler: Callable, description: str = ''):
        """
        Register a command handler, replacing any existing entry

        Args:
            name: Command name (stored lowercased)
            handler: Callable with signature handler(args, session) -> CommandResult
            description: One-line help text
        """
        key = name.lower()
        if key in self._entries:
            logger.debug(f"Overwriting command registration: {key}")
        self._entries[key] = CommandEntry(name=key, handler=handler, description=description)

    def register_commands(self, commands: Iterable[Tuple[str, Callable, str]]):
        """
        Register several commands at once

        Args:
            commands: Iterable of (name, handler, description) tuples
        """
        for name, handler, description in commands:
            self.register(name, handler, description)

    def lookup(self, name: str) -> Optional[CommandEntry]:
        """Find a command ignoring case, or None"""
        return self._entries.get(name.lower())

    def has_command(self, name: str) -> bool:
        return name.lower() in self._entries

    def names(self) -> List[str]:
        """Registered names, sorted alphabetically"""
        return sorted(self._entries)

    def entries(self) -> List[CommandEntry]:
        """Registered entries, sorted by name"""
        return [self._entries[name] for name in self.names()]

    def __contains__(self, name: str) -> bool:
        return self.has_command(name)

    def __len__(self) -> int:
        return len(self._entries)
