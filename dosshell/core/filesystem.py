"""
In-memory filesystem tree.

Every operation follows the same pattern: the caller resolves a node via
VFSPathParser, then hands it here to be listed, read or mutated. Expected
failures are raised as FilesystemError subclasses so command handlers can
turn them into a single output line.
"""

import logging
import threading
from typing import List, Optional, Tuple

from .models import DirectoryNode, FileNode, Node, NodeType, node_from_dict
from .vfs import VFSPathParser

logger = logging.getLogger(__name__)


# ==================== Exceptions ====================

class FilesystemError(Exception):
    """Base exception for expected filesystem conditions"""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class NotFound(FilesystemError):
    """No node with that name or path"""
    pass


class NotADirectory(FilesystemError):
    """Operation needs a directory but got a file"""
    pass


class NotAFile(FilesystemError):
    """Operation needs a file but got a directory"""
    pass


class AlreadyExists(FilesystemError):
    """Name collides case-insensitively with an existing entry"""
    pass


class NotEmpty(FilesystemError):
    """Non-recursive removal of a directory that still has children"""
    pass


# ==================== Seed content ====================

def seed_tree() -> DirectoryNode:
    """Build the canonical starting tree"""
    return DirectoryNode(name='/', children=[
        FileNode(name='AUTOEXEC.BAT', content='rem MS-DOS-like environment\n'),
        FileNode(
            name='README.TXT',
            content='This is a simulated MS-DOS environment.\nUse DIR, CD, TYPE etc.',
        ),
        DirectoryNode(name='GAMES', children=[
            FileNode(name='README.TXT', content='This is the GAMES folder.'),
        ]),
    ])


# ==================== Tree ====================

class FilesystemTree:
    """
    Rooted tree of directories and files.

    ``revision`` increases on every mutation so callers can tell whether a
    command changed the tree. ``lock`` serializes commands when one tree is
    shared between several sessions.
    """

    def __init__(self, root: Optional[DirectoryNode] = None):
        self.root = root if root is not None else seed_tree()
        self.root.name = '/'
        self.revision = 0
        self.lock = threading.RLock()

    def _touch_revision(self):
        self.revision += 1

    def lookup(self, target: str, current_dir: str = '/') -> Tuple[str, Optional[Node]]:
        """Normalize target against current_dir and return (path, node or None)"""
        return VFSPathParser.lookup(self.root, target, current_dir)

    def get(self, path: str) -> Node:
        """
        Resolve a normalized path or raise.

        Raises:
            NotFound: If nothing lives at path
        """
        node = VFSPathParser.resolve(self.root, path)
        if node is None:
            raise NotFound(f"Not found: {path}", name=path)
        return node

    def list(self, directory: Node) -> List[Tuple[str, NodeType]]:
        """
        List a directory's children in stored order.

        Raises:
            NotADirectory: If directory is a file
        """
        if not isinstance(directory, DirectoryNode):
            raise NotADirectory(f"Not a directory: {directory.name}", name=directory.name)
        return [(child.name, child.node_type) for child in directory.children]

    def read_file(self, node: Node) -> str:
        """
        Return a file's content.

        Raises:
            NotAFile: If node is a directory
        """
        if not isinstance(node, FileNode):
            raise NotAFile(f"Not a file: {node.name}", name=node.name)
        return node.content

    def create_directory(self, parent: Node, name: str) -> DirectoryNode:
        """
        Append a new empty directory to parent.

        Raises:
            NotADirectory: If parent is a file
            AlreadyExists: If any child already uses name (ignoring case)
        """
        if not isinstance(parent, DirectoryNode):
            raise NotADirectory(f"Not a directory: {parent.name}", name=parent.name)

        with self.lock:
            if parent.find_child(name) is not None:
                raise AlreadyExists(f"Already exists: {name}", name=name)
            directory = DirectoryNode(name=name)
            parent.children.append(directory)
            self._touch_revision()

        logger.debug(f"Created directory {name} in {parent.name}")
        return directory

    def create_file(self, parent: Node, name: str) -> FileNode:
        """
        Create an empty file, or return the existing file of that name.

        Touching an existing file leaves its content and the tree untouched.

        Raises:
            NotADirectory: If parent is a file
            AlreadyExists: If a directory already uses name (ignoring case)
        """
        if not isinstance(parent, DirectoryNode):
            raise NotADirectory(f"Not a directory: {parent.name}", name=parent.name)

        with self.lock:
            existing = parent.find_child(name)
            if isinstance(existing, FileNode):
                return existing
            if existing is not None:
                raise AlreadyExists(f"Already exists: {name}", name=name)

            new_file = FileNode(name=name)
            parent.children.append(new_file)
            self._touch_revision()

        logger.debug(f"Created file {name} in {parent.name}")
        return new_file

    def remove(self, parent: Node, name: str, recursive: bool = True) -> Node:
        """
        Remove a single child of parent, subtree included.

        Args:
            parent: Directory holding the entry
            name: Entry name (matched ignoring case)
            recursive: When False, refuse to drop a non-empty directory

        Returns:
            The detached node

        Raises:
            NotFound: If parent has no such child (or is a file)
            NotEmpty: If recursive is False and the entry has children
        """
        if not isinstance(parent, DirectoryNode):
            raise NotFound(f"Not found: {name}", name=name)

        with self.lock:
            index = parent.index_of(name)
            if index is None:
                raise NotFound(f"Not found: {name}", name=name)

            target = parent.children[index]
            if not recursive and isinstance(target, DirectoryNode) and target.children:
                raise NotEmpty(f"Directory is not empty: {target.name}", name=target.name)

            del parent.children[index]
            self._touch_revision()

        logger.debug(f"Removed {target.name} from {parent.name}")
        return target

    def reset(self) -> 'FilesystemTree':
        """Replace the whole tree with the seed content"""
        with self.lock:
            self.root = seed_tree()
            self._touch_revision()
        logger.info("Filesystem reset to seed content")
        return self

    def snapshot(self) -> dict:
        """Serialize the tree to its nested record form"""
        with self.lock:
            return self.root.to_dict()

    @classmethod
    def from_snapshot(cls, data: dict) -> 'FilesystemTree':
        """
        Rebuild a tree from a snapshot record.

        Raises:
            ValueError: If the record is malformed or its root is a file
        """
        root = node_from_dict(data)
        if not isinstance(root, DirectoryNode):
            raise ValueError("Snapshot root must be a directory")
        return cls(root)
