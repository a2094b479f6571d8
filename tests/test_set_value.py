from miniredis.set_value import MAX_INTSET_ENTRIES, Encoding, SetObject


def test_new_set_is_empty_intset():
    s = SetObject()
    assert len(s) == 0
    assert s.encoding is Encoding.INTSET


def test_add_and_contains():
    s = SetObject()
    assert s.add(b"123") is True
    assert s.add(b"123") is False
    assert s.contains(b"123") is True
    assert s.contains(b"456") is False
    assert s.add(b"abc") is True
    assert s.encoding is Encoding.HASH
    assert s.add(b"789") is True
    assert s.contains(b"123") is True


def test_upgrade_threshold():
    s = SetObject()
    for i in range(MAX_INTSET_ENTRIES):
        s.add(str(i).encode())
    assert s.encoding is Encoding.INTSET
    assert len(s) == MAX_INTSET_ENTRIES
    s.add(b"513")
    assert s.encoding is Encoding.HASH
    assert len(s) == MAX_INTSET_ENTRIES + 1
    assert all(s.contains(str(i).encode()) for i in range(MAX_INTSET_ENTRIES))


def test_remove():
    s = SetObject()
    s.add(b"1")
    assert s.remove(b"1") is True
    assert s.remove(b"1") is False
    assert len(s) == 0
    s.add(b"a")
    assert s.remove(b"a") is True
    assert len(s) == 0
    assert s.remove(b"999") is False


def test_members():
    s = SetObject()
    for v in (b"3", b"1", b"2"):
        s.add(v)
    assert sorted(s.members()) == [b"1", b"2", b"3"]


def test_random_and_pop_empty():
    s = SetObject()
    assert s.random() is None
    assert s.pop() is None


def test_random_and_pop():
    s = SetObject()
    values = {str(i).encode() for i in range(100)}
    for v in values:
        s.add(v)
    for _ in range(1000):
        assert s.random() in values
    popped = set()
    while len(s):
        member = s.pop()
        assert member in values
        popped.add(member)
    assert popped == values


def test_pop_in_hash_encoding():
    s = SetObject()
    s.add(b"x")
    s.add(b"y")
    first = s.pop()
    assert first in {b"x", b"y"}
    assert len(s) == 1
    assert s.contains(first) is False


def test_to_write_cmd_line():
    s = SetObject()
    s.add(b"2")
    s.add(b"1")
    assert s.to_write_cmd_line("k") == [b"sadd", b"k", b"1", b"2"]


def test_clone_is_independent():
    s = SetObject()
    s.add(b"a")
    copy = s.clone()
    copy.add(b"b")
    assert s.members() == [b"a"]
    assert sorted(copy.members()) == [b"a", b"b"]