"""An interactive command-line client speaking RESP over TCP."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import BinaryIO, Iterable, Optional, TextIO, Union

from .command import CommandError

DEFAULT_ADDR = "127.0.0.1:6379"


def encode_resp_array(args: Iterable[Union[str, bytes]]) -> bytes:
    """Encode arguments as a RESP array of bulk strings."""
    items = [arg.encode("utf-8") if isinstance(arg, str) else bytes(arg) for arg in args]
    parts = [b"*%d\r\n" % len(items)]
    for item in items:
        parts.append(b"$%d\r\n" % len(item))
        parts.append(item)
        parts.append(b"\r\n")
    return b"".join(parts)


def split_args(line: str) -> list[str]:
    """Split an input line on runs of whitespace."""
    return line.split()


def format_reply(value) -> str:
    """Render a reply the way the client prints it, one line per value."""
    if value is None:
        return "(nil)\n"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "replace") + "\n"
    if isinstance(value, str):
        return value + "\n"
    if isinstance(value, list):
        return "".join(format_reply(item) for item in value)
    if isinstance(value, BaseException):
        message = value.message if isinstance(value, CommandError) else str(value)
        return f"(error) {message}\n"
    return f"{value}\n"


def _read_line(reader: BinaryIO) -> bytes:
    line = reader.readline()
    if not line:
        raise ConnectionError("connection closed")
    if not line.endswith(b"\r\n"):
        raise ValueError("protocol error: line not terminated by CRLF")
    return line[:-2]


def _read_reply(reader: BinaryIO):
    """Read one RESP reply; error replies come back as CommandError values."""
    line = _read_line(reader)
    if not line:
        raise ValueError("protocol error: empty line")
    kind, body = line[:1], line[1:]
    if kind == b"+":
        return body.decode("utf-8", "replace")
    if kind == b"-":
        return CommandError(body.decode("utf-8", "replace"))
    if kind == b":":
        return int(body)
    if kind == b"$":
        size = int(body)
        if size < 0:
            return None
        data = reader.read(size + 2)
        if len(data) < size + 2:
            raise ConnectionError("connection closed")
        if data[size:] != b"\r\n":
            raise ValueError("protocol error: bulk string not terminated by CRLF")
        return data[:size]
    if kind == b"*":
        count = int(body)
        if count < 0:
            return None
        return [_read_reply(reader) for _ in range(count)]
    raise ValueError(f"protocol error: unknown reply type {kind!r}")


def _split_addr(addr: str) -> tuple[str, int]:
    host, _, port = addr.rpartition(":")
    return host or "localhost", int(port)


def _repl(sock: socket.socket, reader: BinaryIO, stdin: TextIO, stdout: TextIO) -> int:
    while True:
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("read input error: EOF\n")
            return 1

        line = line.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            stdout.write("bye\n")
            return 0

        args = split_args(line)
        if not args:
            continue

        try:
            sock.sendall(encode_resp_array(args))
        except OSError as exc:
            stdout.write(f"write error: {exc}\n")
            return 1

        try:
            reply = _read_reply(reader)
        except (OSError, ValueError) as exc:
            stdout.write(f"read response error: {exc}\n")
            return 1

        stdout.write(format_reply(reply))


def main(argv: Optional[list[str]] = None) -> int:
    """Connect to a server and run commands typed on standard input."""
    parser = argparse.ArgumentParser(
        prog="miniredis-cli", description="Start a CLI client to connect to a server"
    )
    parser.add_argument("--addr", default=DEFAULT_ADDR, help="server address to connect to")
    options = parser.parse_args(argv)

    try:
        host, port = _split_addr(options.addr)
        sock = socket.create_connection((host, port))
    except (OSError, ValueError) as exc:
        print(f"failed to connect to {options.addr}: {exc}", file=sys.stderr)
        return 1

    print(f"Connected to {options.addr}", file=sys.stderr)
    with sock, sock.makefile("rb") as reader:
        return _repl(sock, reader, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())