"""
Path resolution for the virtual filesystem.

Paths are POSIX-like strings. Normalization does all of the ``..``
arithmetic on the path string itself, and resolution always walks from
the root, so nothing here depends on parent links in the tree.
"""

from typing import List, Optional, Tuple

from .models import DirectoryNode, Node


ROOT_PATH = "/"


class VFSPathParser:
    """Stateless helpers turning (cwd, target) pairs into paths and nodes"""

    @staticmethod
    def normalize_path(path: str, current_dir: str = ROOT_PATH) -> str:
        """
        Normalize a path (resolve . and .., make absolute).

        Popping above the root is silently ignored, so this never fails.

        Args:
            path: Path to normalize (absolute or relative)
            current_dir: Current working directory (for relative paths)

        Returns:
            Normalized absolute path

        Examples:
            >>> VFSPathParser.normalize_path('../../../x', '/a/b')
            '/x'
            >>> VFSPathParser.normalize_path('./GAMES/', '/')
            '/GAMES'
        """
        if path.startswith('/'):
            raw_parts = path.split('/')
        else:
            raw_parts = current_dir.split('/') + path.split('/')

        parts: List[str] = []
        for part in raw_parts:
            if part == '..':
                if parts:
                    parts.pop()
            elif part in ('', '.'):
                continue
            else:
                parts.append(part)

        return '/' + '/'.join(parts)

    @staticmethod
    def split_path(path: str) -> List[str]:
        """Split a normalized path into its segments ('/' gives [])"""
        return [s for s in path.split('/') if s]

    @staticmethod
    def join_path(segments: List[str]) -> str:
        """Inverse of split_path"""
        return '/' + '/'.join(segments)

    @staticmethod
    def parent_and_name(path: str) -> Tuple[str, Optional[str]]:
        """
        Split a normalized path into (parent path, final segment).

        The root has no final segment, so it returns ('/', None).
        """
        segments = VFSPathParser.split_path(path)
        if not segments:
            return ROOT_PATH, None
        return VFSPathParser.join_path(segments[:-1]), segments[-1]

    @staticmethod
    def resolve(root: DirectoryNode, path: str) -> Optional[Node]:
        """
        Walk from root to the node at a normalized path.

        Each segment is matched case-insensitively against the children of
        the current directory. Returns None as soon as a segment is missing
        or a file sits in the middle of the path.
        """
        node: Node = root
        for segment in VFSPathParser.split_path(path):
            if not isinstance(node, DirectoryNode):
                return None
            child = node.find_child(segment)
            if child is None:
                return None
            node = child
        return node

    @staticmethod
    def lookup(root: DirectoryNode, target: str, current_dir: str = ROOT_PATH) -> Tuple[str, Optional[Node]]:
        """Normalize target against current_dir and resolve it in one step"""
        path = VFSPathParser.normalize_path(target, current_dir)
        return path, VFSPathParser.resolve(root, path)
