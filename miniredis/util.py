"""Small helpers shared by the data types and command handlers."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Union

_LOG = logging.getLogger(__name__)

_INT_PATTERN = re.compile(rb"[+-]?[0-9]+")

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def to_cmd_line(payload: Union[list, tuple, str]) -> list[bytes]:
    """Turn a parsed request into a list of byte-string arguments.

    A list must hold only ``bytes``; a string is split on single spaces.
    Anything else raises ``TypeError``.
    """
    if isinstance(payload, (list, tuple)):
        if not all(isinstance(item, bytes) for item in payload):
            raise TypeError("command line elements must be bytes")
        return list(payload)
    if isinstance(payload, str):
        return [part.encode("utf-8", "surrogateescape") for part in payload.split(" ")]
    raise TypeError(f"cannot build a command line from {type(payload).__name__}")


def log_bytes_arr(prefix: str, content: Iterable[bytes]) -> None:
    """Log the arguments of a command line, space separated, under a prefix."""
    parts = "".join(item.decode("utf-8", "replace") + " " for item in content)
    _LOG.info("[%s] %s", prefix, parts)


def parse_int(data: bytes) -> Optional[int]:
    """Parse a signed 64-bit decimal integer; return ``None`` if it is not one."""
    if not _INT_PATTERN.fullmatch(data):
        return None
    value = int(data)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value