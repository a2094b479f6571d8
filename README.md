# miniredis

Redis-style value types, command functions for keys, hashes, lists and
sorted sets over an in-memory keyspace, and an interactive client that
speaks RESP over TCP.

Every command is a plain function that takes a `Keyspace` and the
command's arguments as `bytes`. It returns a reply: an `int`, bulk
`bytes`, the status string `"OK"`, `None` for a null reply, or a list.
A failure in the Redis sense raises `miniredis.command.CommandError`.

## Value types

Each value type is a class that can be used on its own:

- `miniredis.string_value.SimpleString` keeps a value as a signed 64-bit
  integer when it parses as one, and as raw bytes otherwise. Build one
  with `SimpleString.from_bytes(data)` or `SimpleString.from_int(value)`.
  `incr_by(delta)` raises `ValueError` when the value is not an integer.
- `miniredis.hash_value.RedisHash` maps string fields to byte values
  (`hset`, `hget`, `hdel`, `hexists`, `hkeys`, `hvals`, `hgetall`,
  `len()`).
- `miniredis.set_value.SetObject` holds byte-string members. It starts
  with an integer encoding and switches to a hash encoding when a
  non-integer member arrives or it holds more than 512 members; the
  `encoding` property returns an `Encoding` (`INTSET` or `HASH`).
  `random()` and `pop()` return `None` on an empty set.
- `miniredis.quicklist.QuickList` is a double-ended list kept in chunks
  of at most 512 elements. Indexes may be negative. `get` returns `None`
  out of range; `set` raises `IndexError`. `range(start, stop)` and
  `trim(start, stop)` take inclusive bounds, and
  `remove_by_value(count, value)` removes from the head (`count > 0`),
  the tail (`count < 0`) or everywhere (`0`).
  `miniredis.quicklist.normalize_range` resolves such bounds.
- `miniredis.zset.ZSet` is a sorted set ordered by score, then by member
  bytes. `zadd(score, member, nx=False, xx=False)` returns 1 when a
  member is added; a NaN score raises `ValueError`. `zrank` and
  `zrevrank` return `None` for a missing member, and `zcount(low, high)`
  counts inclusively. `miniredis.zset.format_score` renders a score as a
  plain decimal (`3.0` becomes `"3"`).

```python
from miniredis.quicklist import QuickList
from miniredis.string_value import SimpleString
from miniredis.zset import ZSet

counter = SimpleString.from_bytes(b"10")
counter.incr_by(5)          # 15
counter.get()               # b"15"

items = QuickList()
for word in (b"a", b"b", b"c", b"d"):
    items.push_back(word)
items.range(1, -1)          # [b"b", b"c", b"d"]

board = ZSet()
board.zadd(1.5, b"alice")
board.zadd(2.5, b"bob")
board.zrank(b"bob")         # 1
board.zrange(0, -1, True)   # [b"alice", b"1.5", b"bob", b"2.5"]
```

Every value type has `to_write_cmd_line(key)`, which returns the command
line that rebuilds the value (for example `[b"set", b"k", b"15"]`), and
`clone()`, which returns an independent copy.

## Keyspace and commands

`miniredis.command.Keyspace` maps string keys to values, with optional
expiry times in Unix seconds (`get`, `put`, `remove`, `set_expire`,
`delete_ttl`, `expire_time`). An expired key is dropped the next time it
is read. `miniredis.command.Command` is a frozen dataclass recording a
command's `name`, `executor` and `arity` (negative means "at least").

| Module | Commands |
| --- | --- |
| `miniredis.command` | `exec_del`, `exec_expire` |
| `miniredis.hash_commands` | `exec_hset`, `exec_hget`, `exec_hdel`, `exec_hexists`, `exec_hlen`, `exec_hkeys`, `exec_hvals`, `exec_hgetall`, `exec_hmset`, `exec_hmget` |
| `miniredis.list_commands` | `exec_lpush`, `exec_rpush`, `exec_lpop`, `exec_rpop`, `exec_llen`, `exec_lindex`, `exec_lset`, `exec_lrange`, `exec_lrem`, `exec_ltrim` |
| `miniredis.zset_commands` | `exec_zadd` (with `NX` and `XX`), `exec_zcard`, `exec_zscore`, `exec_zrank`, `exec_zrevrank`, `exec_zrange`, `exec_zrevrange` (both with `WITHSCORES`), `exec_zcount`, `exec_zrem` |

```python
from miniredis.command import CommandError, Keyspace, exec_expire
from miniredis.hash_commands import exec_hget, exec_hset
from miniredis.list_commands import exec_lrange, exec_rpush

db = Keyspace()
exec_rpush(db, [b"queue", b"a", b"b", b"c"])   # 3
exec_lrange(db, [b"queue", b"0", b"-1"])       # [b"a", b"b", b"c"]
exec_hset(db, [b"user", b"name", b"ada"])      # 1
exec_hget(db, [b"user", b"name"])              # b"ada"
exec_expire(db, [b"user", b"60"])              # 1

try:
    exec_hget(db, [b"queue", b"name"])
except CommandError as exc:
    exc.message   # "WRONGTYPE Operation against a key holding the wrong kind of value"
```

## Client

`miniredis.cli` holds a line-based client and the pieces it is built from:

- `split_args(line)` splits a typed line on whitespace.
- `encode_resp_array(args)` encodes arguments as a RESP array of bulk
  strings.
- `format_reply(value)` renders a reply as text: `(nil)` for `None`,
  `(error) ...` for an error, one line per element of a list.

```python
from miniredis.cli import encode_resp_array, split_args

encode_resp_array(split_args("SET k v"))
# b"*3\r\n$3\r\nSET\r\n$1\r\nk\r\n$1\r\nv\r\n"
```

To connect to a RESP server and type commands interactively:

```
miniredis-cli --addr 127.0.0.1:6379
```

`--addr` defaults to `127.0.0.1:6379`. Type `quit` or `exit` to leave.

## Utilities

`miniredis.util` has `to_cmd_line(payload)`, which turns a list of bytes
or a space-separated string into a command line (anything else raises
`TypeError`); `parse_int(data)`, which parses a signed 64-bit decimal
integer or returns `None`; and `log_bytes_arr(prefix, content)`, which
logs a command line at INFO level.

## What is not included

- There is no server: nothing listens on a socket or dispatches commands
  from a connection, so `miniredis-cli` needs a RESP server from
  elsewhere.
- There are no command functions for strings (such as SET, GET, INCR) or
  for sets (such as SADD, SMEMBERS); `SimpleString` and `SetObject` are
  available only as value types.
- There is no table that maps command names to `Command` entries.
- Nothing is persisted; the keyspace lives only in memory.