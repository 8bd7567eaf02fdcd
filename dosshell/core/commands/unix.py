"""
Text command handlers

Implements: type (cat), echo
"""

from typing import Callable, List, Tuple

from dosshell.core.command_dispatcher import CommandResult, Session


class UnixCommands:
    """Handler for commands that print text"""

    def cmd_type(self, args: List[str], session: Session) -> CommandResult:
        """
        Display file content

        Usage:
            type <path>     - Print the file verbatim
        """
        if not args:
            return CommandResult.fail("Specify a file")

        _, node = session.tree.lookup(args[0], session.cwd)
        if node is None:
            return CommandResult.fail("File not found")
        if node.is_directory:
            return CommandResult.fail("Not a file")

        return CommandResult.ok(session.tree.read_file(node))

    def cmd_echo(self, args: List[str], session: Session) -> CommandResult:
        """Print arguments joined by single spaces"""
        return CommandResult.ok(' '.join(args))


def create_unix_commands() -> List[Tuple[str, Callable, str]]:
    """
    Create text command handlers

    Returns:
        List of (name, handler, description) tuples
    """
    unix = UnixCommands()

    return [
        ('type', unix.cmd_type, 'Show file contents (alias CAT)'),
        ('cat', unix.cmd_type, 'Show file contents'),
        ('echo', unix.cmd_echo, 'Echo text'),
    ]
