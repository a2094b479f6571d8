"""Command metadata, the keyspace the commands work on, and key commands."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from .util import parse_int

Reply = Union[int, bytes, str, None, list]
"""A command result: int, bulk bytes, status string, null (None) or array."""

OK = "OK"
WRONGTYPE_MESSAGE = "WRONGTYPE Operation against a key holding the wrong kind of value"
ERR_WRONG_TYPE = "ERR wrong type"


class CommandError(Exception):
    """An error reply produced by a command."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


ExecFunc = Callable[["Keyspace", Sequence[bytes]], Reply]


@dataclass(frozen=True)
class Command:
    """A command's name, handler and arity (negative means "at least")."""

    name: str
    executor: ExecFunc
    arity: int


def decode_key(arg: bytes) -> str:
    """Turn a key argument into the string used in the keyspace."""
    return arg.decode("utf-8", "surrogateescape")


class Keyspace:
    """Keys mapped to values, with optional expiry times (Unix seconds)."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._ttl: dict[str, float] = {}

    def get(self, key: str) -> Optional[Any]:
        """Return the value stored at ``key``, or None if absent or expired."""
        expire_at = self._ttl.get(key)
        if expire_at is not None and time.time() > expire_at:
            self._data.pop(key, None)
            del self._ttl[key]
            return None
        return self._data.get(key)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> bool:
        """Delete a key and its expiry; return whether it existed."""
        self._ttl.pop(key, None)
        return self._data.pop(key, None) is not None

    def set_expire(self, key: str, expire_at: float) -> None:
        self._ttl[key] = expire_at

    def delete_ttl(self, key: str) -> None:
        self._ttl.pop(key, None)

    def expire_time(self, key: str) -> Optional[float]:
        return self._ttl.get(key)


def exec_del(db: Keyspace, args: Sequence[bytes]) -> int:
    """DEL key [key ...]: return how many keys were removed."""
    deleted = 0
    for arg in args:
        key = decode_key(arg)
        if db.get(key) is not None:
            db.remove(key)
            deleted += 1
    return deleted


def exec_expire(db: Keyspace, args: Sequence[bytes]) -> int:
    """EXPIRE key seconds: a non-positive time deletes the key at once."""
    key = decode_key(args[0])
    seconds = parse_int(args[1])
    if seconds is None:
        raise CommandError("ERR invalid expire time")
    if db.get(key) is None:
        return 0
    if seconds <= 0:
        db.remove(key)
        return 1
    db.set_expire(key, time.time() + seconds)
    return 1