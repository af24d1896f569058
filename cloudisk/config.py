"""Reading of ``key=value`` server configuration files."""

from __future__ import annotations

import os

from .hashtable import HashTable
from .strutil import split_string

__all__ = ["IP", "PORT", "THREAD_NUM", "read_config"]

IP = "ip"
PORT = "port"
THREAD_NUM = "thread_num"


def read_config(filename: str | os.PathLike[str]) -> HashTable:
    """Load ``key=value`` lines from *filename* into a new table.

    Lines without a value are skipped; anything after a second ``=`` is
    dropped; a later key replaces an earlier one.
    """
    table = HashTable()
    with open(filename, encoding="utf-8") as handle:
        for line in handle:
            tokens = split_string(line.rstrip("\r\n"), "=", 3)
            if len(tokens) == 2:
                key, value = tokens
                table.insert(key, value)
    return table