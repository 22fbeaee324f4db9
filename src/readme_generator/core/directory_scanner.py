"""
Directory Scanner for the README Generator.

Builds a bounded tree of files and folders for a project directory.

Rules:
- Entries whose name contains any ignore pattern are skipped with their subtree
- Subdirectories at depth >= max_depth are left out of their parent
- Symlinks are followed; max_depth is the only guard against link cycles
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config import DEFAULT_IGNORE_PATTERNS, DEFAULT_MAX_DEPTH
from .errors import ScanError

logger = logging.getLogger(__name__)


@dataclass
class FileNode:
    """A file (or any non-directory entry) in the scanned tree."""
    name: str
    path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "file", "name": self.name, "path": self.path}


@dataclass
class DirectoryNode:
    """A directory in the scanned tree. Children keep listing order."""
    name: str
    children: List["TreeNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "directory",
            "name": self.name,
            "children": [child.to_dict() for child in self.children],
        }


TreeNode = Union[FileNode, DirectoryNode]


def node_name(path: str) -> str:
    """Base name of a path, or the path itself for roots like '/'."""
    return os.path.basename(os.path.normpath(path)) or path


def is_ignored(name: str, ignore_patterns: Iterable[str]) -> bool:
    """True if the entry name contains any of the ignore substrings."""
    return any(pattern in name for pattern in ignore_patterns)


def _list_entries(path: str) -> List[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise ScanError(path, e) from e


def _scan(
    path: str,
    max_depth: int,
    current_depth: int,
    ignore_patterns: Iterable[str],
) -> Optional[DirectoryNode]:
    if current_depth >= max_depth:
        return None

    node = DirectoryNode(name=node_name(path))

    for entry in _list_entries(path):
        if is_ignored(entry.name, ignore_patterns):
            continue

        full_path = os.path.join(path, entry.name)
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False

        if is_dir:
            child = _scan(full_path, max_depth, current_depth + 1, ignore_patterns)
            if child is not None:
                node.children.append(child)
        else:
            node.children.append(FileNode(name=entry.name, path=full_path))

    return node


def scan_directory(
    path: str,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ignore_patterns: Iterable[str] = DEFAULT_IGNORE_PATTERNS,
) -> DirectoryNode:
    """
    Scan a directory tree.

    Args:
        path: Directory to scan
        max_depth: Number of directory levels to list. 0 lists nothing
            but still checks that the directory exists.
        ignore_patterns: Substrings that exclude an entry and its subtree

    Returns:
        DirectoryNode for the root

    Raises:
        ScanError: If the root or any visited subdirectory cannot be listed
    """
    path = str(path)
    ignore_patterns = tuple(ignore_patterns)
    logger.debug("Scanning %s (max_depth=%d)", path, max_depth)

    if max_depth <= 0:
        if not os.path.isdir(path):
            raise ScanError(path, NotADirectoryError(f"Not a directory: '{path}'"))
        return DirectoryNode(name=node_name(path))

    return _scan(path, max_depth, 0, ignore_patterns)


def format_directory_structure(node: TreeNode, depth: int = 0) -> str:
    """
    Render a tree as indented text, two spaces per level.

    Example:
        my-app/
          src/
            index.js
          package.json
    """
    indent = "  " * depth

    if isinstance(node, DirectoryNode):
        lines = [f"{indent}{node.name}/\n"]
        for child in node.children:
            lines.append(format_directory_structure(child, depth + 1))
        return "".join(lines)

    return f"{indent}{node.name}\n"
