"""
Command dispatcher

Routes a raw input line to its registered handler and turns whatever the
handler produces into a CommandResult. Handler faults never escape: they
are rendered as a single "Error executing command" line.
"""

import logging
import traceback
from dataclasses import dataclass, field
from typing import Any, List, Optional

from dosshell.core.command_registry import CommandRegistry
from dosshell.core.filesystem import FilesystemTree
from dosshell.core.shell_parser import ShellParser

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result from command execution"""
    success: bool = True
    lines: List[str] = field(default_factory=list)
    error: Optional[str] = None
    exit_code: int = 0
    clear_screen: bool = False

    @classmethod
    def ok(cls, *lines: str) -> 'CommandResult':
        return cls(success=True, lines=list(lines))

    @classmethod
    def fail(cls, message: str, exit_code: int = 1) -> 'CommandResult':
        return cls(success=False, error=message, exit_code=exit_code)

    @property
    def output_lines(self) -> List[str]:
        """Every line to display, the error (if any) last"""
        if self.error:
            return self.lines + [self.error]
        return list(self.lines)


@dataclass
class Session:
    """State a handler operates against"""
    tree: FilesystemTree
    cwd: str = '/'
    username: str = 'USER'
    strict_rm: bool = False


class CommandDispatcher:
    """Dispatch and execute shell commands"""

    def __init__(self, registry: Optional[CommandRegistry] = None,
                 parser: Optional[ShellParser] = None, history=None):
        """
        Args:
            registry: Command registry (a new empty one if omitted)
            parser: Line parser
            history: Optional CommandHistory every executed line is added to
        """
        self.registry = registry if registry is not None else CommandRegistry()
        self.parser = parser or ShellParser()
        self.history = history

    @staticmethod
    def prompt(session: Session) -> str:
        """Prompt string shown before input, e.g. ``USER@DOS:/GAMES> ``"""
        return f"{session.username}@DOS:{session.cwd}> "

    def execute(self, raw: str, session: Session) -> CommandResult:
        """
        Execute one raw input line

        Blank input produces an empty result and no history entry. Otherwise
        the result starts with the echoed prompt line, followed by the
        handler's lines and error message.

        Args:
            raw: Line exactly as typed
            session: Session the handler mutates

        Returns:
            CommandResult with all output lines
        """
        if not raw.strip():
            return CommandResult()

        echo = f"{self.prompt(session)}{raw}"

        if self.history is not None:
            self.history.add(raw)

        command = self.parser.parse_command(raw)
        entry = self.registry.lookup(command.command)

        if entry is None:
            return CommandResult(
                success=False,
                lines=[echo],
                error=f"'{command.command}' is not recognized as an internal or external command",
                exit_code=127
            )

        try:
            with session.tree.lock:
                result = self._normalize(entry.handler(command.args, session))
        except Exception as e:
            logger.error(f"Command {command.command} raised {type(e).__name__}: {e}")
            logger.debug(traceback.format_exc())
            return CommandResult(
                success=False,
                lines=[echo],
                error=f"Error executing command: {e}",
                exit_code=1
            )

        if result.clear_screen:
            # The echo line is wiped along with everything before it
            return result

        result.lines = [echo] + result.lines
        return result

    @staticmethod
    def _normalize(result: Any) -> CommandResult:
        """Accept handlers that return a string or nothing at all"""
        if isinstance(result, CommandResult):
            return result
        if result is None:
            return CommandResult()
        if isinstance(result, str):
            return CommandResult.ok(result)
        return CommandResult.ok(str(result))
