"""Tree data model produced by the scanner."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True, weakref_slot=True)
class TreeNode:
    """One filesystem entry and its ordered, owned children.

    Attributes:
        path: Full filesystem path, unique within one scan.
        name: Base name of the entry.
        is_dir: Whether the entry is a directory.
        children: Child nodes in traversal order. Append-only.
    """

    path: str
    name: str
    is_dir: bool = False
    children: list[TreeNode] = field(default_factory=list)
    _parent: weakref.ref[TreeNode] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def parent(self) -> TreeNode | None:
        """Owning node, or ``None`` for the root.

        The back reference is weak; it never keeps a subtree alive.
        """
        if self._parent is None:
            return None
        return self._parent()

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def add_child(self, path: str, name: str, is_dir: bool) -> TreeNode:
        """Create a child node, link it back to ``self`` and append it."""
        child = TreeNode(path=path, name=name, is_dir=is_dir)
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def iter_nodes(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in pre-order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count(self) -> int:
        return sum(1 for _ in self.iter_nodes())


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of one completed scan.

    Attributes:
        root_path: Path the scan was started from.
        root: Root of the scanned tree.
        node_count: Nodes reachable from ``root``, root included.
        error: Optional non-fatal error attached by the caller.
    """

    root_path: str
    root: TreeNode
    node_count: int
    error: Exception | None = None
