"""Huffman tree built from a 256-entry byte frequency table."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .priority_queue import PriorityQueue

SYMBOL_COUNT = 256

Code = tuple[bool, ...]


@dataclass(eq=False)
class Node:
    """A tree node; leaves carry a byte symbol, inner nodes a combined weight."""

    symbol: int
    freq: int
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _lighter(a: Node, b: Node) -> bool:
    return a.freq < b.freq


class HuffmanTree:
    """Prefix code for bytes; ``False`` is a step left, ``True`` a step right."""

    def __init__(self, frequencies: Sequence[int]) -> None:
        freqs = tuple(frequencies)
        if len(freqs) != SYMBOL_COUNT:
            raise ValueError(
                f"expected {SYMBOL_COUNT} frequencies, got {len(freqs)}"
            )
        self.frequencies = freqs
        self.root = self._build()

    def _build(self) -> Node | None:
        queue: PriorityQueue[Node] = PriorityQueue(_lighter)
        for symbol, freq in enumerate(self.frequencies):
            if freq > 0:
                queue.push(Node(symbol, freq))

        if len(queue) == 0:
            return None

        if len(queue) == 1:
            # A lone symbol still needs a one-bit path from the root.
            only = queue.pop()
            return Node(0, only.freq, left=only)

        while len(queue) > 1:
            first = queue.pop()
            second = queue.pop()
            queue.push(Node(0, first.freq + second.freq, left=first, right=second))
        return queue.pop()

    def codes(self) -> dict[int, Code]:
        """Map every symbol present in the tree to its bit sequence."""
        return dict(self._walk(self.root, ()))

    def _walk(self, node: Node | None, path: Code) -> Iterator[tuple[int, Code]]:
        if node is None:
            return
        if node.is_leaf():
            yield node.symbol, path
            return
        yield from self._walk(node.left, path + (False,))
        yield from self._walk(node.right, path + (True,))

    def compress(self, data: Iterable[int]) -> list[bool]:
        """Encode bytes; symbols absent from the tree are skipped."""
        if self.root is None:
            return []
        table = self.codes()
        bits: list[bool] = []
        for byte in data:
            bits.extend(table.get(byte, ()))
        return bits

    def decompress(self, bits: Iterable[bool]) -> bytes:
        """Decode a bit sequence; a trailing incomplete code is dropped."""
        root = self.root
        if root is None:
            return b""
        if root.is_leaf():
            return bytes(root.symbol for _ in bits)

        out = bytearray()
        node = root
        for bit in bits:
            nxt = node.right if bit else node.left
            if nxt is None:
                raise ValueError("bit sequence does not follow a path in the tree")
            node = nxt
            if node.is_leaf():
                out.append(node.symbol)
                node = root
        return bytes(out)