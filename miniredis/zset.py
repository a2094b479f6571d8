"""Sorted-set values: members ordered by score, then by member bytes."""

from __future__ import annotations

import bisect
import math
from decimal import Decimal
from typing import Optional


def format_score(score: float) -> str:
    """Format a score as the shortest plain decimal, without an exponent."""
    if math.isnan(score):
        return "NaN"
    if math.isinf(score):
        return "+Inf" if score > 0 else "-Inf"
    text = format(Decimal(repr(score)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _clamp(start: int, stop: int, length: int) -> Optional[tuple[int, int]]:
    if start < 0:
        start += length
    if stop < 0:
        stop += length
    start = max(start, 0)
    stop = min(stop, length - 1)
    if start > stop or length == 0:
        return None
    return start, stop


def _score_key(entry: tuple[float, bytes]) -> float:
    return entry[0]


class ZSet:
    """A set of byte-string members, each with a float score, kept in order."""

    __slots__ = ("_scores", "_ordered")

    def __init__(self) -> None:
        self._scores: dict[bytes, float] = {}
        self._ordered: list[tuple[float, bytes]] = []

    def __len__(self) -> int:
        return len(self._scores)

    def _discard(self, score: float, member: bytes) -> None:
        position = bisect.bisect_left(self._ordered, (score, member))
        del self._ordered[position]

    def zadd(self, score: float, member: bytes, nx: bool = False, xx: bool = False) -> int:
        """Add or update a member; return 1 if it was added.

        ``nx`` only adds new members, ``xx`` only updates existing ones.
        A NaN score raises ``ValueError``.
        """
        if math.isnan(score):
            raise ValueError("score is not a number")
        member = bytes(member)
        exists = member in self._scores
        if (nx and exists) or (xx and not exists):
            return 0
        if exists:
            self._discard(self._scores[member], member)
        bisect.insort(self._ordered, (score, member))
        self._scores[member] = score
        return 0 if exists else 1

    def zrem(self, member: bytes) -> int:
        """Remove a member; return 1 if it was present."""
        member = bytes(member)
        score = self._scores.pop(member, None)
        if score is None:
            return 0
        self._discard(score, member)
        return 1

    def zscore(self, member: bytes) -> Optional[float]:
        return self._scores.get(bytes(member))

    def zrank(self, member: bytes) -> Optional[int]:
        """Return the 0-based ascending rank of a member, or None."""
        member = bytes(member)
        score = self._scores.get(member)
        if score is None:
            return None
        return bisect.bisect_left(self._ordered, (score, member))

    def zrevrank(self, member: bytes) -> Optional[int]:
        """Return the 0-based descending rank of a member, or None."""
        rank = self.zrank(member)
        if rank is None:
            return None
        return len(self._ordered) - 1 - rank

    @staticmethod
    def _render(entries, with_scores: bool) -> list[bytes]:
        result: list[bytes] = []
        for score, member in entries:
            result.append(member)
            if with_scores:
                result.append(format_score(score).encode())
        return result

    def zrange(self, start: int, stop: int, with_scores: bool = False) -> list[bytes]:
        """Return members from ``start`` to ``stop`` inclusive, lowest score first."""
        bounds = _clamp(start, stop, len(self._ordered))
        if bounds is None:
            return []
        first, last = bounds
        return self._render(self._ordered[first : last + 1], with_scores)

    def zrevrange(self, start: int, stop: int, with_scores: bool = False) -> list[bytes]:
        """Return members from ``start`` to ``stop`` inclusive, highest score first."""
        length = len(self._ordered)
        bounds = _clamp(start, stop, length)
        if bounds is None:
            return []
        first, last = bounds
        entries = (self._ordered[length - 1 - i] for i in range(first, last + 1))
        return self._render(entries, with_scores)

    def zcount(self, low: float, high: float) -> int:
        """Count members whose score lies in ``[low, high]``."""
        left = bisect.bisect_left(self._ordered, low, key=_score_key)
        right = bisect.bisect_right(self._ordered, high, key=_score_key)
        return max(0, right - left)

    def zincrby(self, delta: float, member: bytes) -> float:
        """Add ``delta`` to a member's score (0 if absent); return the new score."""
        new_score = self._scores.get(bytes(member), 0.0) + delta
        self.zadd(new_score, member)
        return new_score

    def zcard(self) -> int:
        return len(self._scores)

    def clear(self) -> None:
        self._scores = {}
        self._ordered = []

    def to_write_cmd_line(self, key: str) -> list[bytes]:
        line = [b"zadd", key.encode("utf-8", "surrogateescape")]
        for score, member in self._ordered:
            line.extend((format_score(score).encode(), member))
        return line

    def clone(self) -> "ZSet":
        copy = ZSet()
        copy._scores = dict(self._scores)
        copy._ordered = list(self._ordered)
        return copy