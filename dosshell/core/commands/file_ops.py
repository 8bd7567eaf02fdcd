"""
File operation command handlers

Implements: mkdir, touch, rm, clearfs
"""

from typing import Callable, List, Optional, Tuple

from dosshell.core.command_dispatcher import CommandResult, Session
from dosshell.core.filesystem import AlreadyExists, NotEmpty, NotFound
from dosshell.core.models import DirectoryNode
from dosshell.core.vfs import VFSPathParser


def resolve_parent(session: Session, target: str) -> Tuple[Optional[DirectoryNode], Optional[str]]:
    """
    Find the directory that holds (or would hold) target.

    Returns:
        (parent directory or None, final path segment or None for '/')
    """
    path = VFSPathParser.normalize_path(target, session.cwd)
    parent_path, name = VFSPathParser.parent_and_name(path)
    parent = VFSPathParser.resolve(session.tree.root, parent_path)
    if not isinstance(parent, DirectoryNode):
        return None, name
    return parent, name


class FileCommands:
    """Handler for commands that change the tree"""

    RECURSIVE_FLAGS = {'-r', '-R', '-rf'}

    def cmd_mkdir(self, args: List[str], session: Session) -> CommandResult:
        """
        Make a directory

        Usage:
            mkdir <path>    - Create an empty directory at path
        """
        if not args:
            return CommandResult.fail("Specify directory name")

        parent, name = resolve_parent(session, args[0])
        if name is None:
            return CommandResult.fail("Already exists")
        if parent is None:
            return CommandResult.fail("Parent not found")

        try:
            session.tree.create_directory(parent, name)
        except AlreadyExists:
            return CommandResult.fail("Already exists")
        return CommandResult.ok()

    def cmd_touch(self, args: List[str], session: Session) -> CommandResult:
        """
        Create an empty file

        Usage:
            touch <path>    - Create the file; an existing file is left as is
        """
        if not args:
            return CommandResult.fail("Specify filename")

        parent, name = resolve_parent(session, args[0])
        if name is None:
            return CommandResult.fail("Already exists")
        if parent is None:
            return CommandResult.fail("Parent not found")

        revision = session.tree.revision
        try:
            session.tree.create_file(parent, name)
        except AlreadyExists:
            return CommandResult.fail("Already exists")

        if session.tree.revision == revision:
            return CommandResult.ok("File exists")
        return CommandResult.ok()

    def cmd_rm(self, args: List[str], session: Session) -> CommandResult:
        """
        Remove a file or directory

        Usage:
            rm <path>       - Remove the entry (with its contents)
            rm -r <path>    - Required for non-empty directories in strict mode
        """
        recursive = not session.strict_rm
        paths = []
        for arg in args:
            if arg in self.RECURSIVE_FLAGS:
                recursive = True
            else:
                paths.append(arg)

        if not paths:
            return CommandResult.fail("Specify path to remove")

        parent, name = resolve_parent(session, paths[0])
        if parent is None or name is None:
            return CommandResult.fail("Not found")

        try:
            session.tree.remove(parent, name, recursive=recursive)
        except NotFound:
            return CommandResult.fail("Not found")
        except NotEmpty as e:
            return CommandResult.fail(f"Directory is not empty: {e.name} (use rm -r)")
        return CommandResult.ok()

    def cmd_clearfs(self, args: List[str], session: Session) -> CommandResult:
        """Reset the filesystem to its starting content"""
        session.tree.reset()
        return CommandResult.ok("Filesystem reset")


def create_file_commands() -> List[Tuple[str, Callable, str]]:
    """
    Create file operation handlers

    Returns:
        List of (name, handler, description) tuples
    """
    ops = FileCommands()

    return [
        ('mkdir', ops.cmd_mkdir, 'Make directory'),
        ('touch', ops.cmd_touch, 'Create empty file'),
        ('rm', ops.cmd_rm, 'Remove file/directory'),
        ('clearfs', ops.cmd_clearfs, 'Reset virtual filesystem'),
    ]
