"""Exception classes for Tagsmith.

Provides standardized exceptions for error handling throughout Tagsmith.

File and encoding failures (``OSError``, ``UnicodeEncodeError``) are never
wrapped: they reach the caller exactly as the standard library raised them.
"""

from __future__ import annotations

from collections.abc import Sequence


class TagsmithError(Exception):
    """Base exception for all Tagsmith errors.
    
    Subclass this for specific error categories.
    """

    pass


class MalformedAttributeListError(TagsmithError, ValueError):
    """Attribute list did not alternate cleanly between keys and values.

    Only raised when ``RenderConfig.strict_attributes`` is enabled. The
    default behaviour drops the trailing unpaired element.
    """

    def __init__(self, attributes: Sequence[str]) -> None:
        """Initialize with the offending attribute list.
        
        Args:
            attributes: The odd-length key/value sequence that was supplied
        """
        self.attributes = tuple(attributes)
        dangling = self.attributes[-1] if self.attributes else ""
        super().__init__(
            f"Attribute list has {len(self.attributes)} elements; "
            f"expected key/value pairs, {dangling!r} has no value"
        )


class RenderError(TagsmithError):
    """Error during markup rendering.
    
    Raised when a node graph cannot be written out.
    """

    pass


class RenderDepthError(RenderError):
    """Rendering went deeper than ``RenderConfig.max_depth``.

    Almost always means a node was added inside one of its own descendants.
    """

    def __init__(self, max_depth: int, tag_name: str | None) -> None:
        """Initialize depth error.
        
        Args:
            max_depth: The configured nesting limit
            tag_name: Name of the node being entered when the limit was hit
        """
        self.max_depth = max_depth
        self.tag_name = tag_name

        where = f" at <{tag_name}>" if tag_name else ""
        super().__init__(f"Render depth exceeded {max_depth}{where}; check for cyclic content")
