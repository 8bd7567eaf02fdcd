"""
Navigation command handlers

Implements: cd, dir (ls), pwd
"""

from typing import Callable, List, Tuple

from dosshell.core.command_dispatcher import CommandResult, Session
from dosshell.core.models import NodeType


class NavigationCommands:
    """Handler for VFS navigation commands"""

    # Marks directories in listings
    DIRECTORY_SUFFIX = '\\'

    def cmd_cd(self, args: List[str], session: Session) -> CommandResult:
        """
        Change directory

        Usage:
            cd              - Go to root
            cd <path>       - Change to path (absolute or relative)
            cd ..           - Go up one level (stops at root)
        """
        target = args[0] if args else '/'
        path, node = session.tree.lookup(target, session.cwd)

        if node is None:
            return CommandResult.fail(f"The system cannot find the path specified: {target}")
        if not node.is_directory:
            return CommandResult.fail(f"Not a directory: {target}")

        session.cwd = path
        return CommandResult.ok()

    def cmd_dir(self, args: List[str], session: Session) -> CommandResult:
        """
        List directory contents

        Usage:
            dir             - List current directory
            dir <path>      - List a directory, or show a file's name

        Directories are listed with a trailing backslash.
        """
        target = args[0] if args else '.'
        _, node = session.tree.lookup(target, session.cwd)

        if node is None:
            return CommandResult.fail(f"File not found: {target}")
        if not node.is_directory:
            return CommandResult.ok(node.name)

        entries = session.tree.list(node)
        if not entries:
            return CommandResult.ok('Directory is empty')

        output_lines = []
        for name, node_type in entries:
            if node_type == NodeType.DIRECTORY:
                name += self.DIRECTORY_SUFFIX
            output_lines.append(name)
        return CommandResult.ok(*output_lines)

    def cmd_pwd(self, args: List[str], session: Session) -> CommandResult:
        """Print working directory"""
        return CommandResult.ok(session.cwd)


def create_navigation_commands() -> List[Tuple[str, Callable, str]]:
    """
    Create navigation command handlers

    Returns:
        List of (name, handler, description) tuples
    """
    nav = NavigationCommands()

    return [
        ('cd', nav.cmd_cd, 'Change directory'),
        ('dir', nav.cmd_dir, 'List directory contents'),
        ('ls', nav.cmd_dir, 'List directory contents (alias for DIR)'),
        ('pwd', nav.cmd_pwd, 'Print working directory'),
    ]
