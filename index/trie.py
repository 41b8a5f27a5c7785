from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

V = TypeVar("V")

_MISSING = object()


class _Node:
    __slots__ = ("children", "value")

    def __init__(self) -> None:
        self.children: dict[int, _Node] = {}
        self.value: object = _MISSING


def _key(k: str | bytes) -> bytes:
    return k.encode("utf-8") if isinstance(k, str) else k


class ByteTrie(Generic[V]):
    """
    Trie keyed by the UTF-8 bytes of each term.

    One edge per byte, so every key sharing a byte prefix lives under the same
    node and `iter_prefix` never scans the rest of the vocabulary. The empty
    key is stored on the root.
    """

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def insert(self, key: str | bytes, value: V) -> None:
        node = self._root
        for b in _key(key):
            child = node.children.get(b)
            if child is None:
                child = node.children[b] = _Node()
            node = child
        if node.value is _MISSING:
            self._size += 1
        node.value = value

    def _find(self, key: bytes) -> _Node | None:
        node: _Node | None = self._root
        for b in key:
            node = node.children.get(b)
            if node is None:
                return None
        return node

    def get(self, key: str | bytes, default: V | None = None) -> V | None:
        node = self._find(_key(key))
        if node is None or node.value is _MISSING:
            return default
        return node.value  # type: ignore[return-value]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes)):
            return False
        node = self._find(_key(key))
        return node is not None and node.value is not _MISSING

    def __len__(self) -> int:
        return self._size

    def iter_prefix(self, prefix: str | bytes) -> Iterator[tuple[str, V]]:
        """Yield (term, value) for every key starting with `prefix`, in byte order."""
        start = _key(prefix)
        node = self._find(start)
        if node is None:
            return
        # iterative dfs; children pushed in reverse so smaller bytes pop first
        stack: list[tuple[bytes, _Node]] = [(start, node)]
        while stack:
            path, cur = stack.pop()
            if cur.value is not _MISSING:
                yield path.decode("utf-8"), cur.value  # type: ignore[misc]
            for b in sorted(cur.children, reverse=True):
                stack.append((path + bytes((b,)), cur.children[b]))

    def items(self) -> Iterator[tuple[str, V]]:
        return self.iter_prefix(b"")
