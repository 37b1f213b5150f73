"""Protocols for Tagsmith.

Defines the sink contracts that renderers write into. ``io.StringIO``,
open text files, ``sys.stdout`` and ``StringBuilder`` all satisfy
``TextSink``; ``io.BytesIO`` and binary files satisfy ``ByteSink``.
"""

from __future__ import annotations

from typing import Protocol


class TextSink(Protocol):
    """Anything with a ``write(str)`` method."""

    def write(self, s: str, /) -> object:
        """Write a chunk of text."""
        ...


class ByteSink(Protocol):
    """Anything with a ``write(bytes)`` method."""

    def write(self, b: bytes, /) -> object:
        """Write a chunk of bytes."""
        ...
