"""A binary search tree of matrices keyed by their names."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from matscript.matrix import Matrix


@dataclass
class _Node:
    matrix: Matrix
    left: _Node | None = None
    right: _Node | None = None


class MatrixTree:
    """Matrices ordered by name; equal names are placed to the right."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, matrix: Matrix) -> None:
        """Add a matrix to the tree without copying it."""
        node = _Node(matrix)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if matrix.name < current.matrix.name:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find(self, name: str) -> Matrix | None:
        """Return the matrix with the given name, or None."""
        current = self._root
        while current is not None:
            if name == current.matrix.name:
                return current.matrix
            current = current.left if name < current.matrix.name else current.right
        return None

    def __iter__(self) -> Iterator[Matrix]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.matrix
            current = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None