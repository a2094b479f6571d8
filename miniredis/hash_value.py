"""Hash values: a mapping from field names to byte strings."""

from __future__ import annotations

from typing import Optional


class RedisHash:
    """A field -> value mapping with the hash command operations."""

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, bytes] = {}

    def hset(self, field: str, value: bytes) -> int:
        """Set a field; return 1 if it is new, 0 if it was updated."""
        added = 0 if field in self._fields else 1
        self._fields[field] = bytes(value)
        return added

    def hget(self, field: str) -> Optional[bytes]:
        return self._fields.get(field)

    def hdel(self, *args: str) -> int:
        """Delete the given fields; return how many existed."""
        return sum(self._fields.pop(field, None) is not None for field in args)

    def hexists(self, field: str) -> bool:
        return field in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def hkeys(self) -> list[str]:
        return list(self._fields)

    def hvals(self) -> list[bytes]:
        return list(self._fields.values())

    def hgetall(self) -> dict[str, bytes]:
        return dict(self._fields)

    def to_write_cmd_line(self, key: str) -> list[bytes]:
        line = [b"hmset", key.encode("utf-8", "surrogateescape")]
        for field, value in self._fields.items():
            line.extend((field.encode("utf-8", "surrogateescape"), value))
        return line

    def clone(self) -> "RedisHash":
        copy = RedisHash()
        copy._fields = dict(self._fields)
        return copy