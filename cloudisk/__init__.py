"""TCP file-sharing client, command framing and server-side building blocks."""

__version__ = "0.1.0"