"""
Data models for the virtual filesystem tree.

A node is either a directory or a file. Directories own their children
exclusively; there are no parent references, so every lookup walks down
from the root using a normalized absolute path.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class NodeType(Enum):
    """Kind of filesystem node"""
    DIRECTORY = "dir"
    FILE = "file"


@dataclass
class FileNode:
    """A file with string content"""
    name: str
    content: str = ""

    @property
    def node_type(self) -> NodeType:
        return NodeType.FILE

    @property
    def is_directory(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'type': NodeType.FILE.value,
            'content': self.content,
        }


@dataclass
class DirectoryNode:
    """A directory holding an ordered list of children"""
    name: str
    children: List['Node'] = field(default_factory=list)

    @property
    def node_type(self) -> NodeType:
        return NodeType.DIRECTORY

    @property
    def is_directory(self) -> bool:
        return True

    def find_child(self, name: str) -> Optional['Node']:
        """Find a child by name, ignoring case"""
        index = self.index_of(name)
        return self.children[index] if index is not None else None

    def index_of(self, name: str) -> Optional[int]:
        """Position of the child matching name case-insensitively, or None"""
        wanted = name.upper()
        for i, child in enumerate(self.children):
            if child.name.upper() == wanted:
                return i
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot record of this directory and its whole subtree"""
        record = _directory_record(self)
        pending = [(self, record)]
        while pending:
            directory, out = pending.pop()
            for child in directory.children:
                if isinstance(child, DirectoryNode):
                    child_record = _directory_record(child)
                    pending.append((child, child_record))
                else:
                    child_record = child.to_dict()
                out['children'].append(child_record)
        return record


Node = Union[FileNode, DirectoryNode]


def _directory_record(directory: DirectoryNode) -> Dict[str, Any]:
    return {
        'name': directory.name,
        'type': NodeType.DIRECTORY.value,
        'children': [],
    }


def _node_without_children(data: Any) -> Tuple[Node, List[Any]]:
    """Validate one record and build its node; returns (node, raw children)"""
    if not isinstance(data, dict):
        raise ValueError(f"Node record must be an object, got {type(data).__name__}")

    name = data.get('name')
    if not isinstance(name, str) or not name:
        raise ValueError(f"Node record has invalid name: {name!r}")

    try:
        node_type = NodeType(data.get('type'))
    except ValueError:
        raise ValueError(f"Node record {name!r} has unknown type: {data.get('type')!r}")

    if node_type == NodeType.FILE:
        content = data.get('content', '')
        if content is None:
            content = ''
        if not isinstance(content, str):
            raise ValueError(f"File {name!r} content must be a string")
        return FileNode(name=name, content=content), []

    raw_children = data.get('children', [])
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise ValueError(f"Directory {name!r} children must be a list")

    return DirectoryNode(name=name), raw_children


def node_from_dict(data: Dict[str, Any]) -> Node:
    """
    Rebuild a node (and its subtree) from its snapshot record.

    Records look like ``{name, type: "dir"|"file", children?, content?}``.
    Children whose names collide case-insensitively with an earlier sibling
    are dropped (with their subtrees) so the uniqueness invariant holds for
    edited snapshots. The walk uses an explicit stack, so nesting depth is
    not limited by the interpreter's recursion limit.

    Raises:
        ValueError: If any record in the subtree is not a valid node
    """
    root, raw_children = _node_without_children(data)
    pending = [(root, raw_children)]

    while pending:
        directory, records = pending.pop()
        for record in records:
            child, grandchildren = _node_without_children(record)
            if directory.find_child(child.name) is not None:
                continue
            directory.children.append(child)
            if isinstance(child, DirectoryNode):
                pending.append((child, grandchildren))

    return root
