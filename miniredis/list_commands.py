"""List commands: LPUSH, LRANGE, LTRIM and friends."""

from __future__ import annotations

from typing import Optional, Sequence

from .command import ERR_WRONG_TYPE, OK, CommandError, Keyspace, decode_key
from .quicklist import QuickList
from .util import parse_int

_NOT_INTEGER = "ERR value is not an integer"


def _get_list(db: Keyspace, key: str) -> Optional[QuickList]:
    value = db.get(key)
    if value is None:
        return None
    if not isinstance(value, QuickList):
        raise CommandError(ERR_WRONG_TYPE)
    return value


def _get_or_create_list(db: Keyspace, key: str) -> QuickList:
    value = _get_list(db, key)
    if value is None:
        value = QuickList()
        db.put(key, value)
    return value


def _parse_int_strict(arg: bytes) -> int:
    value = parse_int(arg)
    if value is None:
        raise CommandError(_NOT_INTEGER)
    return value


def _parse_int_lenient(arg: bytes) -> int:
    """Parse an index; anything unparsable counts as 0."""
    return parse_int(arg) or 0


def exec_lpush(db: Keyspace, args: Sequence[bytes]) -> int:
    """LPUSH key element [element ...]: return the new length."""
    values = _get_or_create_list(db, decode_key(args[0]))
    for item in args[1:]:
        values.push_front(bytes(item))
    return len(values)


def exec_rpush(db: Keyspace, args: Sequence[bytes]) -> int:
    """RPUSH key element [element ...]: return the new length."""
    values = _get_or_create_list(db, decode_key(args[0]))
    for item in args[1:]:
        values.push_back(bytes(item))
    return len(values)


def exec_lpop(db: Keyspace, args: Sequence[bytes]) -> Optional[bytes]:
    values = _get_list(db, decode_key(args[0]))
    return None if values is None else values.pop_front()


def exec_rpop(db: Keyspace, args: Sequence[bytes]) -> Optional[bytes]:
    values = _get_list(db, decode_key(args[0]))
    return None if values is None else values.pop_back()


def exec_llen(db: Keyspace, args: Sequence[bytes]) -> int:
    values = _get_list(db, decode_key(args[0]))
    return 0 if values is None else len(values)


def exec_lindex(db: Keyspace, args: Sequence[bytes]) -> Optional[bytes]:
    """LINDEX key index: None when the key or index is missing."""
    index = _parse_int_strict(args[1])
    values = _get_list(db, decode_key(args[0]))
    return None if values is None else values.get(index)


def exec_lset(db: Keyspace, args: Sequence[bytes]) -> str:
    """LSET key index element."""
    index = _parse_int_strict(args[1])
    values = _get_list(db, decode_key(args[0]))
    if values is None:
        raise CommandError("ERR no such key")
    try:
        values.set(index, bytes(args[2]))
    except IndexError:
        raise CommandError("ERR index out of range") from None
    return OK


def exec_lrange(db: Keyspace, args: Sequence[bytes]) -> Optional[list[bytes]]:
    """LRANGE key start stop: None when the key does not exist."""
    start = _parse_int_lenient(args[1])
    stop = _parse_int_lenient(args[2])
    values = _get_list(db, decode_key(args[0]))
    if values is None:
        return None
    return values.range(start, stop)


def exec_lrem(db: Keyspace, args: Sequence[bytes]) -> int:
    """LREM key count element: return how many elements were removed."""
    count = _parse_int_strict(args[1])
    values = _get_list(db, decode_key(args[0]))
    if values is None:
        return 0
    return values.remove_by_value(count, bytes(args[2]))


def exec_ltrim(db: Keyspace, args: Sequence[bytes]) -> str:
    """LTRIM key start stop."""
    start = _parse_int_lenient(args[1])
    stop = _parse_int_lenient(args[2])
    values = _get_list(db, decode_key(args[0]))
    if values is not None:
        values.trim(start, stop)
    return OK