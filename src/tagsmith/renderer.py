"""Markup renderer for TagNode graphs.

A single recursive walk serves both output modes:

- Markup mode writes ``<name attrs>``, the content, then ``</name>``
  (or ``<name attrs/>`` for empty tags).
- Plain-text mode skips all tag markup but still descends into children
  and writes leaf text, which strips a fragment down to its readable text.

In both modes a node whose name is in the exclusion set is dropped together
with everything beneath it. Exclusion looks at the node's own name only.

Nothing is escaped. Attribute values and text are written exactly as they
were supplied.

Thread Safety:
Rendering only reads the node graph, so disjoint graphs can be rendered
from several threads at once. Rendering while another thread mutates a
node reachable from the root is undefined.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from tagsmith.config import get_render_config
from tagsmith.errors import RenderDepthError
from tagsmith.stringbuilder import StringBuilder
from tagsmith.utils.logger import get_logger

if TYPE_CHECKING:
    from tagsmith.node import TagNode
    from tagsmith.protocols import ByteSink, TextSink

logger = get_logger(__name__)


def stream_to(
    node: TagNode,
    out: TextSink,
    render_tags: bool = True,
    exclude: Iterable[str] = (),
) -> None:
    """Write a node and its content to a text sink.

    Args:
        node: Root of the fragment to write
        out: Any object with a ``write(str)`` method
        render_tags: Write tag markup (True) or only text content (False)
        exclude: Tag names whose whole subtree is skipped; a single str is
            taken as one name

    Raises:
        RenderDepthError: If ``RenderConfig.max_depth`` is set and exceeded
    """
    if isinstance(exclude, str):
        exclude = (exclude,)
    excluded = frozenset(exclude)
    max_depth = get_render_config().max_depth
    _stream(node, out, render_tags, excluded, max_depth, 1)


def _stream(
    node: TagNode,
    out: TextSink,
    render_tags: bool,
    excluded: frozenset[str],
    max_depth: int | None,
    depth: int,
) -> None:
    name = node.name
    if max_depth is not None and depth > max_depth:
        raise RenderDepthError(max_depth, name)

    if name is not None and name in excluded:
        return

    markup = render_tags and name is not None
    if markup:
        out.write("<")
        out.write(name)
        if node.attribute_text is not None:
            out.write(node.attribute_text)
        if node.is_empty:
            out.write("/>")
            return
        out.write(">")

    if node.children:
        for child in node.children:
            _stream(child, out, render_tags, excluded, max_depth, depth + 1)
    elif node.text is not None:
        out.write(node.text)

    if markup:
        out.write("</")
        out.write(name)
        out.write(">")


def render(node: TagNode) -> str:
    """Render a node as markup."""
    sb = StringBuilder()
    stream_to(node, sb)
    return sb.build()


def render_plain_text(node: TagNode, exclude: Iterable[str] = ()) -> str:
    """Render only the text content of a node.

    Example:
        >>> from tagsmith import tag
        >>> p = tag("p")["This is the ", tag("i")["full"], " content"]
        >>> render_plain_text(p)
        'This is the full content'
    """
    sb = StringBuilder()
    stream_to(node, sb, render_tags=False, exclude=exclude)
    return sb.build()


def stream_bytes(node: TagNode, target: ByteSink, encoding: str | None = None) -> None:
    """Render a node as markup and write it to a byte sink.

    Each call writes a complete, independent rendering, so repeated calls
    against the same open target append. Whether a byte-order mark is
    written depends only on the codec (``utf-8-sig`` writes one per call).

    Args:
        node: Root of the fragment to write
        target: Any object with a ``write(bytes)`` method
        encoding: Codec name; defaults to ``RenderConfig.encoding``

    Raises:
        UnicodeEncodeError: If the markup cannot be represented in ``encoding``
    """
    codec = encoding or get_render_config().encoding
    data = render(node).encode(codec)
    target.write(data)
    logger.debug("Streamed %d bytes as %s", len(data), codec)
