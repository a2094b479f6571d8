import math
import sys

import pytest

from miniredis.zset import ZSet, format_score


def test_small_basic_crud():
    zs = ZSet()
    assert zs.zadd(1, b"m1") == 1
    assert zs.zadd(2, b"m2") == 1
    assert zs.zadd(3, b"m1") == 0
    assert zs.zscore(b"m1") == 3
    assert zs.zrank(b"m1") == 1
    assert zs.zrank(b"m2") == 0
    assert zs.zrem(b"m1") == 1
    assert zs.zcard() == 1


def test_small_zrange():
    zs = ZSet()
    for i in range(10):
        zs.zadd(float(10 - i), f"m{i}".encode())
    arr = zs.zrange(0, 9, True)
    assert len(arr) == 20
    for i in range(10):
        assert float(arr[i * 2 + 1]) == float(i + 1)
    rev = zs.zrevrange(0, 2, False)
    assert rev == [b"m0", b"m1", b"m2"]


def test_small_zcount():
    zs = ZSet()
    for i in range(1, 11):
        zs.zadd(float(i), f"m{i}".encode())
    assert zs.zcount(3, 7) == 5
    assert zs.zcount(11, 20) == 0


def test_small_zincrby():
    zs = ZSet()
    zs.zadd(10, b"m")
    assert zs.zincrby(5, b"m") == 15
    assert zs.zscore(b"m") == 15
    assert zs.zincrby(3, b"new") == 3


def test_small_edge():
    zs = ZSet()
    assert zs.zrank(b"no") is None
    assert zs.zcount(-sys.float_info.max, sys.float_info.max) == 0
    assert zs.zrange(0, -1, False) == []
    zs.zadd(1, b"m")
    assert zs.zrange(-1, -2, False) == []


def test_large_basic_crud():
    zs = ZSet()
    for i in range(200):
        zs.zadd(float(i * 10), f"m{i}".encode())
    assert zs.zcard() == 200
    assert zs.zscore(b"m199") == 1990
    assert zs.zrem(b"m100") == 1
    assert zs.zcard() == 199


def test_large_zrange():
    zs = ZSet()
    for i in range(500):
        zs.zadd(float(i), f"m{i}".encode())
    arr = zs.zrange(100, 199, True)
    assert len(arr) == 200
    assert float(arr[1]) == 100
    rev = zs.zrevrange(0, 9, False)
    assert len(rev) == 10
    assert rev[0] == b"m499"


def test_large_zcount():
    zs = ZSet()
    for i in range(1000):
        zs.zadd(float(i), f"m{i}".encode())
    assert zs.zcount(100, 200) == 101
    assert zs.zcount(500.5, 600.5) == 100


def test_large_zincrby():
    zs = ZSet()
    for i in range(300):
        zs.zadd(float(i), f"m{i}".encode())
    assert zs.zincrby(50.5, b"m150") == 200.5
    assert zs.zrank(b"m150") == 200


def test_nx_and_xx():
    zs = ZSet()
    assert zs.zadd(1, b"a", xx=True) == 0
    assert zs.zscore(b"a") is None
    assert zs.zadd(1, b"a", nx=True) == 1
    assert zs.zadd(5, b"a", nx=True) == 0
    assert zs.zscore(b"a") == 1
    assert zs.zadd(7, b"a", xx=True) == 0
    assert zs.zscore(b"a") == 7


def test_equal_scores_ordered_by_member():
    zs = ZSet()
    zs.zadd(1, b"c")
    zs.zadd(1, b"a")
    zs.zadd(1, b"b")
    assert zs.zrange(0, -1) == [b"a", b"b", b"c"]
    assert zs.zrevrange(0, -1) == [b"c", b"b", b"a"]
    assert zs.zrevrank(b"a") == 2


def test_zrem_missing():
    zs = ZSet()
    assert zs.zrem(b"x") == 0


def test_nan_score_rejected():
    zs = ZSet()
    with pytest.raises(ValueError):
        zs.zadd(math.nan, b"a")


def test_zrevrange_with_scores():
    zs = ZSet()
    zs.zadd(1, b"a")
    zs.zadd(2.5, b"b")
    assert zs.zrevrange(0, 1, True) == [b"b", b"2.5", b"a", b"1"]


def test_clear():
    zs = ZSet()
    zs.zadd(1, b"a")
    zs.clear()
    assert zs.zcard() == 0
    assert zs.zrange(0, -1) == []


def test_to_write_cmd_line():
    zs = ZSet()
    zs.zadd(2, b"b")
    zs.zadd(1.5, b"a")
    assert zs.to_write_cmd_line("z") == [b"zadd", b"z", b"1.5", b"a", b"2", b"b"]


def test_clone_is_independent():
    zs = ZSet()
    zs.zadd(1, b"a")
    copy = zs.clone()
    copy.zadd(2, b"b")
    assert zs.zcard() == 1
    assert copy.zrange(0, -1) == [b"a", b"b"]


@pytest.mark.parametrize(
    "score, text",
    [
        (3.0, "3"),
        (1.5, "1.5"),
        (3.14, "3.14"),
        (1e16, "10000000000000000"),
        (-2.0, "-2"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
    ],
)
def test_format_score(score, text):
    assert format_score(score) == text