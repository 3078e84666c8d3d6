"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _insert(node: Optional[TreeNode], data: Any) -> TreeNode:
    if node is None:
        return TreeNode(data)
    if data < node.data:
        node.left = _insert(node.left, data)
    elif data > node.data:
        node.right = _insert(node.right, data)
    return node


def _min_node(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[TreeNode], data: Any) -> Optional[TreeNode]:
    if node is None:
        return None
    if data < node.data:
        node.left = _delete(node.left, data)
    elif data > node.data:
        node.right = _delete(node.right, data)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _min_node(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def _height(node: Optional[TreeNode]) -> int:
    if node is None:
        return -1
    return 1 + max(_height(node.left), _height(node.right))


class BinarySearchTree:
    """A binary search tree; inserting a value already present has no effect."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> None:
        """Insert *data* unless it is already in the tree."""
        self.root = _insert(self.root, data)

    def search(self, data: Any) -> Optional[TreeNode]:
        """Return the node holding *data*, or None if it is absent."""
        node = self.root
        while node is not None and node.data != data:
            node = node.left if data < node.data else node.right
        return node

    def delete(self, data: Any) -> bool:
        """Remove *data* from the tree; return whether it was present."""
        if self.search(data) is None:
            return False
        self.root = _delete(self.root, data)
        return True

    def minimum(self) -> Any:
        """Return the smallest value; raise ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        return _min_node(self.root).data

    def inorder(self) -> list[Any]:
        """Values in ascending (in-order) order."""
        return list(_inorder(self.root))

    def preorder(self) -> list[Any]:
        """Values in pre-order: node, left subtree, right subtree."""
        return list(_preorder(self.root))

    def postorder(self) -> list[Any]:
        """Values in post-order: left subtree, right subtree, node."""
        return list(_postorder(self.root))

    def height(self) -> int:
        """Height in edges; an empty tree has height -1."""
        return _height(self.root)

    def __contains__(self, data: Any) -> bool:
        return self.search(data) is not None

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"