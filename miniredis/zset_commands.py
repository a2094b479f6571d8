"""Sorted-set commands: ZADD, ZRANGE, ZCOUNT and friends."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from .command import ERR_WRONG_TYPE, CommandError, Keyspace, decode_key
from .util import parse_int
from .zset import ZSet, format_score

_NOT_VALID_FLOAT = "ERR value is not a valid float"


def _arity_error(name: str) -> CommandError:
    return CommandError(f"ERR wrong number of arguments for '{name}' command")


def _parse_float(arg: bytes) -> Optional[float]:
    """Parse a decimal float the strict way; None when it is not one."""
    try:
        text = bytes(arg).decode("ascii")
    except UnicodeDecodeError:
        return None
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isinf(value) and "inf" not in text.lower():
        return None
    return value


def _get_zset(db: Keyspace, key: str) -> Optional[ZSet]:
    value = db.get(key)
    if value is None:
        return None
    if not isinstance(value, ZSet):
        raise CommandError(ERR_WRONG_TYPE)
    return value


def _get_or_create_zset(db: Keyspace, key: str) -> ZSet:
    """Return the sorted set at ``key``; anything else there is replaced."""
    value = db.get(key)
    if isinstance(value, ZSet):
        return value
    created = ZSet()
    db.put(key, created)
    return created


def exec_zadd(db: Keyspace, args: Sequence[bytes]) -> int:
    """ZADD key [NX|XX] score member [score member ...]: return members added."""
    if len(args) < 3:
        raise _arity_error("zadd")

    key = decode_key(args[0])
    zset = _get_or_create_zset(db, key)

    nx = xx = False
    first_pair = 1
    for position, raw in enumerate(args[1:], start=1):
        option = bytes(raw).lower()
        if option == b"nx":
            nx = True
        elif option == b"xx":
            xx = True
        else:
            first_pair = position
            break

    pairs = args[first_pair:]
    if len(pairs) % 2 != 0:
        raise _arity_error("zadd")

    added = 0
    items = iter(pairs)
    for raw_score, member in zip(items, items):
        score = _parse_float(raw_score)
        if score is None or math.isnan(score):
            raise CommandError(_NOT_VALID_FLOAT)
        added += zset.zadd(score, bytes(member), nx, xx)

    db.put(key, zset)
    return added


def exec_zcard(db: Keyspace, args: Sequence[bytes]) -> int:
    zset = _get_zset(db, decode_key(args[0]))
    return 0 if zset is None else zset.zcard()


def exec_zscore(db: Keyspace, args: Sequence[bytes]) -> Optional[bytes]:
    """ZSCORE key member: the score as text, or None."""
    zset = _get_zset(db, decode_key(args[0]))
    if zset is None:
        return None
    score = zset.zscore(args[1])
    return None if score is None else format_score(score).encode()


def exec_zrank(db: Keyspace, args: Sequence[bytes]) -> Optional[int]:
    zset = _get_zset(db, decode_key(args[0]))
    return None if zset is None else zset.zrank(args[1])


def exec_zrevrank(db: Keyspace, args: Sequence[bytes]) -> Optional[int]:
    zset = _get_zset(db, decode_key(args[0]))
    return None if zset is None else zset.zrevrank(args[1])


def _range(db: Keyspace, args: Sequence[bytes], reverse: bool) -> Optional[list[bytes]]:
    start = parse_int(args[1])
    stop = parse_int(args[2])
    if start is None or stop is None:
        raise CommandError("ERR value is not an integer")
    with_scores = len(args) > 3 and bytes(args[3]).lower() == b"withscores"

    zset = _get_zset(db, decode_key(args[0]))
    if zset is None:
        return None
    if reverse:
        return zset.zrevrange(start, stop, with_scores)
    return zset.zrange(start, stop, with_scores)


def exec_zrange(db: Keyspace, args: Sequence[bytes]) -> Optional[list[bytes]]:
    """ZRANGE key start stop [WITHSCORES]: None when the key is missing."""
    return _range(db, args, reverse=False)


def exec_zrevrange(db: Keyspace, args: Sequence[bytes]) -> Optional[list[bytes]]:
    """ZREVRANGE key start stop [WITHSCORES]: None when the key is missing."""
    return _range(db, args, reverse=True)


def exec_zcount(db: Keyspace, args: Sequence[bytes]) -> int:
    """ZCOUNT key min max: members with min <= score <= max."""
    low = _parse_float(args[1])
    high = _parse_float(args[2])
    if low is None or high is None:
        raise CommandError("ERR value is not a float")

    zset = _get_zset(db, decode_key(args[0]))
    if zset is None:
        return 0
    if math.isnan(low) or math.isnan(high):
        return 0
    return zset.zcount(low, high)


def exec_zrem(db: Keyspace, args: Sequence[bytes]) -> int:
    """ZREM key member [member ...]: return how many members were removed."""
    if len(args) < 2:
        raise _arity_error("zrem")
    zset = _get_zset(db, decode_key(args[0]))
    if zset is None:
        return 0
    return sum(zset.zrem(member) for member in args[1:])