"""TCP socket helpers for the client and the server."""

from __future__ import annotations

import socket

__all__ = ["tcp_init", "tcp_connect", "send_all", "recv_exact"]


def tcp_init(ip: str, port: int | str) -> socket.socket:
    """Return a TCP socket bound to *ip*:*port* with address reuse on.

    The socket is bound but not yet listening.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((ip, int(port)))
    except BaseException:
        sock.close()
        raise
    return sock


def tcp_connect(ip: str, port: int) -> socket.socket:
    """Return a TCP socket connected to *ip*:*port*."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((ip, int(port)))
    except BaseException:
        sock.close()
        raise
    return sock


def send_all(sock: socket.socket, data: bytes) -> int:
    """Send every byte of *data*; return how many were sent."""
    sock.sendall(data)
    return len(data)


def recv_exact(sock: socket.socket, length: int) -> bytes:
    """Receive *length* bytes, or fewer if the peer closes the connection first."""
    chunks = []
    remaining = length
    while remaining > 0:
        chunk = sock.recv(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)