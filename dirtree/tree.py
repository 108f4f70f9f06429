"""A directory tree whose entries are files and directories with sizes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

DIRECTORY = "directory"
FILE = "file"


@dataclass(eq=False)
class Entry:
    """A node of the tree: a file or a directory with ordered children."""

    kind: str
    name: str
    size: int = 0
    children: list[Entry] = field(default_factory=list)

    def is_directory(self) -> bool:
        """Return True when this entry is a directory."""
        return self.kind == DIRECTORY

    def add_child(self, entry: Entry) -> Entry:
        """Append ``entry`` as the last child and return it."""
        self.children.append(entry)
        return entry

    def remove_child(self, name: str) -> Entry:
        """Remove and return the first child called ``name``.

        Raises KeyError when no child has that name.
        """
        for position, child in enumerate(self.children):
            if child.name == name:
                del self.children[position]
                return child
        raise KeyError(name)

    def walk_level_order(self) -> Iterator[Entry]:
        """Yield this entry and its descendants breadth first."""
        pending: deque[Entry] = deque([self])
        while pending:
            node = pending.popleft()
            yield node
            pending.extend(node.children)

    def find(self, name: str) -> Entry | None:
        """Return the shallowest entry called ``name``, or None."""
        return next((node for node in self.walk_level_order() if node.name == name), None)

    def find_parent_of(self, name: str) -> Entry | None:
        """Return the first directory, breadth first, with a child called ``name``."""
        for node in self.walk_level_order():
            if node.is_directory() and any(child.name == name for child in node.children):
                return node
        return None

    def depth_of(self, name: str) -> int | None:
        """Return the level of the shallowest entry called ``name``.

        This entry is level 0. Returns None when no entry has that name.
        """
        level: list[Entry] = [self]
        depth = 0
        while level:
            if any(node.name == name for node in level):
                return depth
            level = [child for node in level for child in node.children]
            depth += 1
        return None

    def total_size(self) -> int:
        """Return the combined size of all files below this entry."""
        total = 0
        for child in self.children:
            if child.kind == FILE:
                total += child.size
            elif child.is_directory():
                total += child.total_size()
        return total

    def update_sizes(self) -> None:
        """Set every directory's size to the total size of the files it holds."""
        for node in self.walk_level_order():
            if node.is_directory():
                node.size = node.total_size()