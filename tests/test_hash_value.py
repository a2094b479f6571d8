from miniredis.hash_value import RedisHash


def test_new_hash_is_empty():
    assert len(RedisHash()) == 0


def test_hset_hget():
    h = RedisHash()
    assert h.hset("f1", b"v1") == 1
    assert h.hget("f1") == b"v1"
    assert h.hset("f1", b"new") == 0
    assert h.hget("f1") == b"new"
    assert h.hget("no") is None


def test_hdel():
    h = RedisHash()
    h.hset("f1", b"v1")
    h.hset("f2", b"v2")
    assert h.hdel("f1", "f2") == 2
    assert len(h) == 0
    assert h.hdel("f1") == 0


def test_hexists():
    h = RedisHash()
    h.hset("f", b"v")
    assert h.hexists("f") is True
    assert h.hexists("no") is False


def test_len():
    h = RedisHash()
    assert len(h) == 0
    for i in range(100):
        h.hset(chr(i), b"val")
    assert len(h) == 100


def test_hkeys_hvals_hgetall():
    h = RedisHash()
    data = {"f1": b"v1", "f2": b"v2", "f3": b"v3"}
    for field, value in data.items():
        h.hset(field, value)
    assert sorted(h.hkeys()) == ["f1", "f2", "f3"]
    assert sorted(h.hvals()) == [b"v1", b"v2", b"v3"]
    assert h.hgetall() == data


def test_binary_safe():
    h = RedisHash()
    value = b"a\x00b\x00c"
    h.hset("bin", value)
    assert h.hget("bin") == value
    assert h.hvals() == [value]
    assert h.hgetall()["bin"] == value


def test_to_write_cmd_line():
    h = RedisHash()
    h.hset("a", b"1")
    h.hset("b", b"2")
    line = h.to_write_cmd_line("k")
    assert line[:2] == [b"hmset", b"k"]
    pairs = dict(zip(line[2::2], line[3::2]))
    assert pairs == {b"a": b"1", b"b": b"2"}


def test_clone_is_independent():
    h = RedisHash()
    h.hset("a", b"1")
    copy = h.clone()
    copy.hset("b", b"2")
    copy.hset("a", b"changed")
    assert h.hgetall() == {"a": b"1"}
    assert copy.hgetall() == {"a": b"changed", "b": b"2"}