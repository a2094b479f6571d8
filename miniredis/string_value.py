"""String values, stored as an integer when they look like one."""

from __future__ import annotations

from typing import Optional

from .util import parse_int


def _wrap_int64(value: int) -> int:
    return (value + (1 << 63)) % (1 << 64) - (1 << 63)


class SimpleString:
    """A binary-safe string value with an integer encoding."""

    __slots__ = ("_int", "_raw")

    def __init__(self) -> None:
        self._int: Optional[int] = None
        self._raw: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes) -> "SimpleString":
        value = cls()
        value.set(data)
        return value

    @classmethod
    def from_int(cls, value: int) -> "SimpleString":
        result = cls()
        result._int = _wrap_int64(value)
        return result

    def get(self) -> bytes:
        if self._int is not None:
            return str(self._int).encode()
        return self._raw

    def set(self, data: bytes) -> None:
        parsed = parse_int(data)
        if parsed is not None:
            self._int = parsed
            self._raw = b""
        else:
            self._int = None
            self._raw = bytes(data)

    def incr_by(self, delta: int) -> int:
        """Add ``delta`` to an integer value; raise ``ValueError`` otherwise."""
        if self._int is None:
            raise ValueError("value is not an integer")
        self._int = _wrap_int64(self._int + delta)
        return self._int

    def to_write_cmd_line(self, key: str) -> list[bytes]:
        return [b"set", key.encode("utf-8", "surrogateescape"), self.get()]

    def clone(self) -> "SimpleString":
        copy = SimpleString()
        copy._int = self._int
        copy._raw = self._raw
        return copy