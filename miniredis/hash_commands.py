"""Hash commands: HSET, HGET, HGETALL and friends."""

from __future__ import annotations

from typing import Optional, Sequence

from .command import OK, WRONGTYPE_MESSAGE, CommandError, Keyspace, decode_key
from .hash_value import RedisHash


def _arity_error(name: str) -> CommandError:
    return CommandError(f"ERR wrong number of arguments for '{name}' command")


def _get_hash(db: Keyspace, key: str) -> Optional[RedisHash]:
    value = db.get(key)
    if value is None:
        return None
    if not isinstance(value, RedisHash):
        raise CommandError(WRONGTYPE_MESSAGE)
    return value


def _get_or_create_hash(db: Keyspace, key: str) -> RedisHash:
    value = _get_hash(db, key)
    if value is None:
        value = RedisHash()
        db.put(key, value)
    return value


def exec_hset(db: Keyspace, args: Sequence[bytes]) -> int:
    """HSET key field value: return 1 for a new field, 0 for an update."""
    if len(args) < 3:
        raise _arity_error("hset")
    value = _get_or_create_hash(db, decode_key(args[0]))
    return value.hset(decode_key(args[1]), args[2])


def exec_hget(db: Keyspace, args: Sequence[bytes]) -> Optional[bytes]:
    """HGET key field."""
    if len(args) != 2:
        raise _arity_error("hget")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return None
    return value.hget(decode_key(args[1]))


def exec_hdel(db: Keyspace, args: Sequence[bytes]) -> int:
    """HDEL key field [field ...]: return how many fields were removed."""
    if len(args) < 2:
        raise _arity_error("hdel")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return 0
    return value.hdel(*(decode_key(arg) for arg in args[1:]))


def exec_hexists(db: Keyspace, args: Sequence[bytes]) -> int:
    """HEXISTS key field."""
    if len(args) != 2:
        raise _arity_error("hexists")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return 0
    return int(value.hexists(decode_key(args[1])))


def exec_hlen(db: Keyspace, args: Sequence[bytes]) -> int:
    """HLEN key."""
    if len(args) != 1:
        raise _arity_error("hlen")
    value = _get_hash(db, decode_key(args[0]))
    return 0 if value is None else len(value)


def exec_hkeys(db: Keyspace, args: Sequence[bytes]) -> Optional[list[bytes]]:
    """HKEYS key: None when the key does not exist."""
    if len(args) != 1:
        raise _arity_error("hkeys")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return None
    return [field.encode("utf-8", "surrogateescape") for field in value.hkeys()]


def exec_hvals(db: Keyspace, args: Sequence[bytes]) -> Optional[list[bytes]]:
    """HVALS key: None when the key does not exist."""
    if len(args) != 1:
        raise _arity_error("hvals")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return None
    return value.hvals()


def exec_hgetall(db: Keyspace, args: Sequence[bytes]) -> Optional[list[bytes]]:
    """HGETALL key: fields and values interleaved; None when the key is missing."""
    if len(args) != 1:
        raise _arity_error("hgetall")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return None
    result: list[bytes] = []
    for field, item in value.hgetall().items():
        result.extend((field.encode("utf-8", "surrogateescape"), item))
    return result


def exec_hmset(db: Keyspace, args: Sequence[bytes]) -> str:
    """HMSET key field value [field value ...]."""
    if len(args) < 3 or len(args) % 2 == 0:
        raise _arity_error("hmset")
    value = _get_or_create_hash(db, decode_key(args[0]))
    pairs = iter(args[1:])
    for field, item in zip(pairs, pairs):
        value.hset(decode_key(field), item)
    return OK


def exec_hmget(db: Keyspace, args: Sequence[bytes]) -> list[Optional[bytes]]:
    """HMGET key field [field ...]: None for each missing field."""
    if len(args) < 2:
        raise _arity_error("hmget")
    value = _get_hash(db, decode_key(args[0]))
    if value is None:
        return [None] * (len(args) - 1)
    return [value.hget(decode_key(field)) for field in args[1:]]