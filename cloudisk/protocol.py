"""Command types and the fixed-layout command frame exchanged with the server."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from .strutil import split_string

__all__ = [
    "HEADER_SIZE",
    "MAX_DATA",
    "CmdType",
    "Train",
    "get_command_type",
    "parse_command",
]

_HEADER = struct.Struct("<ii")
HEADER_SIZE = _HEADER.size
MAX_DATA = 1000
_MAX_WORDS = 10


class CmdType(enum.IntEnum):
    """Kinds of request and response carried in a frame."""

    PWD = 1
    LS = 2
    CD = 3
    MKDIR = 4
    RMDIR = 5
    PUTS = 6
    GETS = 7
    NOTCMD = 8

    TASK_LOGIN_SECTION1 = 100
    TASK_LOGIN_SECTION1_RESP_OK = 101
    TASK_LOGIN_SECTION1_RESP_ERROR = 102
    TASK_LOGIN_SECTION2 = 103
    TASK_LOGIN_SECTION2_RESP_OK = 104
    TASK_LOGIN_SECTION2_RESP_ERROR = 105


_COMMANDS = {
    "pwd": CmdType.PWD,
    "ls": CmdType.LS,
    "cd": CmdType.CD,
    "mkdir": CmdType.MKDIR,
    "rmdir": CmdType.RMDIR,
    "puts": CmdType.PUTS,
    "gets": CmdType.GETS,
}


@dataclass(frozen=True)
class Train:
    """A frame: a length, a command type and up to ``MAX_DATA`` bytes of content."""

    type: CmdType
    data: bytes = b""

    def __post_init__(self) -> None:
        if len(self.data) > MAX_DATA:
            raise ValueError(f"frame content longer than {MAX_DATA} bytes")

    @property
    def length(self) -> int:
        return len(self.data)

    def pack(self) -> bytes:
        """Return the wire form: length, type, then the content."""
        return _HEADER.pack(self.length, int(self.type)) + self.data

    @classmethod
    def unpack(cls, data: bytes) -> Train:
        """Decode a frame from the start of *data*; trailing bytes are ignored."""
        if len(data) < HEADER_SIZE:
            raise ValueError("frame header is truncated")
        length, kind = _HEADER.unpack_from(data)
        if not 0 <= length <= MAX_DATA:
            raise ValueError(f"invalid frame length {length}")
        end = HEADER_SIZE + length
        if len(data) < end:
            raise ValueError("frame content is truncated")
        return cls(CmdType(kind), bytes(data[HEADER_SIZE:end]))


def get_command_type(word: str) -> CmdType:
    """Return the command type named by *word*, or ``CmdType.NOTCMD``."""
    return _COMMANDS.get(word, CmdType.NOTCMD)


def parse_command(line: str) -> Train:
    """Build a frame from a command line such as ``"cd docs"``."""
    words = split_string(line, " ", _MAX_WORDS)
    kind = get_command_type(words[0] if words else "")
    argument = words[1].encode("utf-8") if len(words) > 1 else b""
    return Train(kind, argument)