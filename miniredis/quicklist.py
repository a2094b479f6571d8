"""List values stored as a sequence of bounded chunks."""

from __future__ import annotations

from typing import Iterator, Optional

NODE_MAX_SIZE = 512


def normalize_range(start: int, stop: int, length: int) -> Optional[tuple[int, int]]:
    """Resolve an inclusive, possibly negative range; None if it is empty."""
    if length == 0:
        return None
    if start < 0:
        start += length
    if stop < 0:
        stop += length
    start = max(start, 0)
    stop = min(stop, length - 1)
    if start > stop or start >= length or stop < 0:
        return None
    return start, stop


class QuickList:
    """A double-ended list of byte strings kept in chunks of bounded size."""

    __slots__ = ("_nodes", "_len", "_max_node_size")

    def __init__(self, max_node_size: int = NODE_MAX_SIZE) -> None:
        self._nodes: list[list[bytes]] = []
        self._len = 0
        self._max_node_size = max_node_size

    def _split(self, position: int) -> None:
        node = self._nodes[position]
        if len(node) <= self._max_node_size:
            return
        mid = len(node) // 2
        self._nodes.insert(position + 1, node[mid:])
        del node[mid:]

    def _locate(self, index: int) -> Optional[tuple[list[bytes], int]]:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            return None
        for node in self._nodes:
            if index < len(node):
                return node, index
            index -= len(node)
        return None

    def __iter__(self) -> Iterator[bytes]:
        for node in self._nodes:
            yield from node

    def __len__(self) -> int:
        return self._len

    def push_front(self, value: bytes) -> None:
        if not self._nodes:
            self._nodes.append([value])
        else:
            self._nodes[0].insert(0, value)
            self._split(0)
        self._len += 1

    def push_back(self, value: bytes) -> None:
        if not self._nodes:
            self._nodes.append([value])
        else:
            self._nodes[-1].append(value)
            self._split(len(self._nodes) - 1)
        self._len += 1

    def pop_front(self) -> Optional[bytes]:
        if not self._nodes:
            return None
        head = self._nodes[0]
        value = head.pop(0)
        if not head:
            self._nodes.pop(0)
        self._len -= 1
        return value

    def pop_back(self) -> Optional[bytes]:
        if not self._nodes:
            return None
        tail = self._nodes[-1]
        value = tail.pop()
        if not tail:
            self._nodes.pop()
        self._len -= 1
        return value

    def get(self, index: int) -> Optional[bytes]:
        """Return the element at ``index`` (negative counts from the end), or None."""
        found = self._locate(index)
        if found is None:
            return None
        node, offset = found
        return node[offset]

    def set(self, index: int, value: bytes) -> None:
        """Replace the element at ``index``; raise IndexError when out of range."""
        found = self._locate(index)
        if found is None:
            raise IndexError("index out of range")
        node, offset = found
        node[offset] = value

    def range(self, start: int, stop: int) -> list[bytes]:
        """Return elements from ``start`` to ``stop`` inclusive."""
        if self._len == 0:
            return []
        if start < 0:
            start += self._len
        if stop < 0:
            stop += self._len
        start = max(start, 0)
        stop = min(stop, self._len - 1)
        if start > stop:
            return []
        result = []
        for position, value in enumerate(self):
            if position > stop:
                break
            if position >= start:
                result.append(value)
        return result

    def remove_by_value(self, count: int, value: bytes) -> int:
        """Remove matches from the head (count > 0), the tail (count < 0) or all (0)."""
        limit = abs(count) if count else None
        removed = 0
        nodes = reversed(self._nodes) if count < 0 else iter(self._nodes)
        for node in list(nodes):
            if limit is not None and removed >= limit:
                break
            positions = [i for i, item in enumerate(node) if item == value]
            if count < 0:
                positions.reverse()
            if limit is not None:
                positions = positions[: limit - removed]
            for position in sorted(positions, reverse=True):
                del node[position]
            removed += len(positions)
        self._nodes = [node for node in self._nodes if node]
        self._len -= removed
        return removed

    def trim(self, start: int, stop: int) -> None:
        """Keep only the elements from ``start`` to ``stop`` inclusive."""
        if self._len == 0:
            return
        bounds = normalize_range(start, stop, self._len)
        if bounds is None:
            self._nodes = []
            self._len = 0
            return
        start, stop = bounds
        right_remove = self._len - stop - 1
        for _ in range(start):
            self.pop_front()
        for _ in range(right_remove):
            self.pop_back()

    def to_write_cmd_line(self, key: str) -> list[bytes]:
        return [b"rpush", key.encode("utf-8", "surrogateescape"), *self]

    def clone(self) -> "QuickList":
        copy = QuickList(self._max_node_size)
        for value in self:
            copy.push_back(value)
        return copy