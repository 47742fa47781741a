"""Binary trees that map a bit stream onto constellation point indices.

Each constellation point is a leaf. The tree is built by repeatedly
joining the first two entries of a queue and appending the new node to
the end. This keeps the code lengths as even as the number of points
allows.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a constellation index."""

    constellation_index: int = -1
    depth: int = 0
    edge_value: int = 0
    parent: Optional["HuffmanNode"] = field(default=None, repr=False)
    children: tuple["HuffmanNode", ...] = field(default=(), repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def bits(self) -> tuple[int, ...]:
        """Edge values on the path from the root down to this node."""
        path = []
        node = self
        while node.parent is not None:
            path.append(node.edge_value)
            node = node.parent
        return tuple(reversed(path))


class HuffmanTree:
    """A tree with ``length`` equiprobable leaves, one per constellation point."""

    def __init__(self, length: int) -> None:
        if length < 1:
            raise ValueError("a Huffman tree needs at least one leaf")
        self.leaves: tuple[HuffmanNode, ...] = tuple(
            HuffmanNode(constellation_index=index) for index in range(length)
        )
        queue = deque(self.leaves)
        while len(queue) > 1:
            first = queue.popleft()
            second = queue.popleft()
            parent = HuffmanNode(children=(first, second))
            first.parent, first.edge_value = parent, 0
            second.parent, second.edge_value = parent, 1
            queue.append(parent)
        self.root: HuffmanNode = queue[0]
        self._set_depths()

    def _set_depths(self) -> None:
        pending = [self.root]
        while pending:
            node = pending.pop()
            for child in node.children:
                child.depth = node.depth + 1
                pending.append(child)

    def __len__(self) -> int:
        return len(self.leaves)

    def leaf(self, index: int) -> HuffmanNode:
        """The leaf belonging to constellation point ``index``."""
        if not 0 <= index < len(self.leaves):
            raise IndexError(f"leaf index {index} out of range")
        return self.leaves[index]

    def walk(self, bits: Iterable[int]) -> HuffmanNode:
        """Follow bits from the root, consuming only as many as needed, to a leaf."""
        iterator = iter(bits)
        node = self.root
        while not node.is_leaf:
            try:
                bit = next(iterator)
            except StopIteration:
                raise ValueError("bit stream ended before a leaf was reached") from None
            node = node.children[1 if bit else 0]
        return node


def generate_huffman_tree(length: int) -> HuffmanTree:
    """Build the Huffman tree for a constellation of ``length`` points."""
    return HuffmanTree(length)