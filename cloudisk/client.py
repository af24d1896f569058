"""Interactive command-line client: sends commands and uploads files."""

from __future__ import annotations

import argparse
import os
import selectors
import socket
import struct
import sys
from collections.abc import Sequence

from .net import send_all, tcp_connect
from .protocol import CmdType, Train, parse_command

__all__ = [
    "CHUNK_SIZE",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "FILE_SIZE",
    "main",
    "puts_command",
    "send_command",
]

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
CHUNK_SIZE = 1000
FILE_SIZE = struct.Struct("<q")
_INPUT_SIZE = 128
_REPLY_SIZE = 128


def puts_command(sock: socket.socket, filename: str | os.PathLike[str]) -> int:
    """Upload *filename*: its size as 8 bytes, then its content.

    Returns the number of content bytes sent. Raises OSError when the file
    cannot be opened.
    """
    with open(filename, "rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        print(f"file length: {size}")
        send_all(sock, FILE_SIZE.pack(size))
        sent = 0
        while sent < size:
            chunk = handle.read(CHUNK_SIZE)
            if not chunk:
                break
            sent += send_all(sock, chunk)
    print("file send over.")
    return sent


def send_command(sock: socket.socket, line: str) -> Train:
    """Send the frame for the command *line*; upload the file for ``puts``.

    Returns the frame that was sent.
    """
    train = parse_command(line)
    send_all(sock, train.pack())
    if train.type is CmdType.PUTS:
        puts_command(sock, train.data.decode("utf-8"))
    return train


def _run_line(sock: socket.socket, raw: bytes) -> None:
    line = raw.decode("utf-8", errors="replace").rstrip("\r")
    try:
        send_command(sock, line)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloudisk-client", description="Send commands to a cloudisk server."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to the server and relay commands typed on standard input."""
    args = _build_parser().parse_args(argv)
    try:
        sock = tcp_connect(args.host, args.port)
    except OSError as exc:
        print(f"connect: {exc}", file=sys.stderr)
        return 1

    stdin_fd = sys.stdin.fileno()
    with sock, selectors.DefaultSelector() as selector:
        selector.register(stdin_fd, selectors.EVENT_READ, "stdin")
        selector.register(sock, selectors.EVENT_READ, "server")
        pending = b""
        while True:
            for key, _ in selector.select():
                if key.data == "stdin":
                    chunk = os.read(stdin_fd, _INPUT_SIZE)
                    if not chunk:
                        if pending:
                            _run_line(sock, pending)
                        print("byebye.")
                        return 0
                    pending += chunk
                    *lines, pending = pending.split(b"\n")
                    for line in lines:
                        _run_line(sock, line)
                else:
                    reply = sock.recv(_REPLY_SIZE)
                    if not reply:
                        print("server closed.")
                        return 0
                    print(f"recv: {reply.decode('utf-8', errors='replace')}")