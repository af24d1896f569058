"""String helpers shared by the client and the server."""

from __future__ import annotations

import re

__all__ = ["split_string"]


def split_string(text: str, delimiter: str, max_tokens: int) -> list[str]:
    """Split *text* on any character of *delimiter*, skipping empty tokens.

    At most ``max_tokens - 1`` tokens are returned; the rest of the text is
    dropped. An empty *delimiter* yields the whole text as a single token.
    """
    if max_tokens < 1:
        raise ValueError("max_tokens must be at least 1")
    if delimiter:
        pieces = re.split("[" + re.escape(delimiter) + "]", text)
    else:
        pieces = [text]
    tokens = (piece for piece in pieces if piece)
    return [token for _, token in zip(range(max_tokens - 1), tokens)]