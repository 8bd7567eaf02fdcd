"""
dosshell - An MS-DOS style command interpreter over an in-memory filesystem
"""

__version__ = "1.0.0"
__author__ = "dosshell Contributors"

from .core.command_dispatcher import CommandDispatcher, CommandResult, Session
from .core.command_registry import CommandEntry, CommandRegistry
from .core.filesystem import (
    AlreadyExists,
    FilesystemError,
    FilesystemTree,
    NotADirectory,
    NotAFile,
    NotEmpty,
    NotFound,
)
from .core.models import DirectoryNode, FileNode, NodeType
from .core.shell_session import ShellSession
from .core.vfs import VFSPathParser

__all__ = [
    # Tree
    'FilesystemTree',
    'DirectoryNode',
    'FileNode',
    'NodeType',
    'VFSPathParser',
    # Errors
    'FilesystemError',
    'NotFound',
    'NotADirectory',
    'NotAFile',
    'AlreadyExists',
    'NotEmpty',
    # Commands
    'CommandRegistry',
    'CommandEntry',
    'CommandDispatcher',
    'CommandResult',
    'Session',
    'ShellSession',
]
