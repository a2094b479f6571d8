"""Set values, kept as integers until a non-integer or too many arrive."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .util import parse_int

MAX_INTSET_ENTRIES = 512


class Encoding(enum.Enum):
    INTSET = 0
    HASH = 1


class SetObject:
    """An unordered set of byte strings with a compact integer encoding."""

    __slots__ = ("_ints", "_members")

    def __init__(self) -> None:
        self._ints: Optional[set[int]] = set()
        self._members: Optional[dict[bytes, None]] = None

    @property
    def encoding(self) -> Encoding:
        return Encoding.INTSET if self._ints is not None else Encoding.HASH

    def _upgrade(self) -> None:
        if self._ints is None:
            return
        self._members = dict.fromkeys(str(v).encode() for v in sorted(self._ints))
        self._ints = None

    def add(self, member: bytes) -> bool:
        """Add a member; return True if it was not present."""
        if self._ints is not None:
            value = parse_int(member)
            if value is not None:
                added = value not in self._ints
                self._ints.add(value)
                if len(self._ints) > MAX_INTSET_ENTRIES:
                    self._upgrade()
                return added
            self._upgrade()
        member = bytes(member)
        if member in self._members:
            return False
        self._members[member] = None
        return True

    def remove(self, member: bytes) -> bool:
        if self._ints is not None:
            value = parse_int(member)
            if value is None or value not in self._ints:
                return False
            self._ints.discard(value)
            return True
        return self._members.pop(bytes(member), False) is None

    def contains(self, member: bytes) -> bool:
        if self._ints is not None:
            value = parse_int(member)
            return value is not None and value in self._ints
        return bytes(member) in self._members

    def __len__(self) -> int:
        return len(self._ints) if self._ints is not None else len(self._members)

    def members(self) -> list[bytes]:
        if self._ints is not None:
            return [str(v).encode() for v in sorted(self._ints)]
        return list(self._members)

    def random(self) -> Optional[bytes]:
        """Return a random member, or None when the set is empty."""
        if not len(self):
            return None
        if self._ints is not None:
            return str(random.choice(tuple(self._ints))).encode()
        return random.choice(tuple(self._members))

    def pop(self) -> Optional[bytes]:
        """Remove and return a random member, or None when the set is empty."""
        member = self.random()
        if member is not None:
            self.remove(member)
        return member

    def to_write_cmd_line(self, key: str) -> list[bytes]:
        return [b"sadd", key.encode("utf-8", "surrogateescape"), *self.members()]

    def clone(self) -> "SetObject":
        copy = SetObject()
        for member in self.members():
            copy.add(member)
        return copy