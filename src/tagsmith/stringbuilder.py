"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. It is the in-memory ``TextSink`` that
``render()`` and ``render_plain_text()`` write into.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator with a text-stream ``write``.
    
    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("<b>")
            3
            >>> sb.write("Hello")
            5
            >>> sb.build()
            '<b>Hello'
    
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def write(self, s: str) -> int:
        """Append a string (empty strings are skipped).

        Returns:
            Number of characters written
        """
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def getvalue(self) -> str:
        """Alias of ``build`` matching ``io.StringIO``."""
        return self.build()
