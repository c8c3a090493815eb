"""A binary search tree that ignores duplicate values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A tree node holding a value and two optional subtrees."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def insert(self, value: Any) -> None:
        """Insert a value below this node; an equal value is ignored."""
        node = self
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return


class BinarySearchTree:
    """An ordered set of values stored as a binary search tree."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: Any) -> None:
        """Insert a value; an equal value already present is ignored."""
        if self.root is None:
            self.root = TreeNode(value)
        else:
            self.root.insert(value)

    def search(self, value: Any) -> bool:
        """Tell whether the value is in the tree."""
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return self.search(value)