"""
Tagsmith: Fluent HTML/XML Markup Builder

Build a graph of tag nodes in code and render it to markup, plain text,
or encoded bytes. Output-only: no parsing, no validation, no escaping.

Quick Start:
    >>> from tagsmith import tag
    >>> page = tag("div", "class", "glass")["Hello, world"]
    >>> str(page)
    '<div class="glass">Hello, world</div>'

    >>> menu = tag("ul")[tag("li").repeat("One", "Two")]
    >>> str(menu)
    '<ul><li>One</li><li>Two</li></ul>'

    >>> tag("p")["This is the ", tag("i")["full"], " content"].to_plain_text()
    'This is the full content'

Escaping:
    Text and attribute values are written verbatim. Escape ``&``, ``<``,
    ``>`` and ``"`` yourself when the input is not already safe markup.
"""

from tagsmith.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tagsmith.errors import (
    MalformedAttributeListError,
    RenderDepthError,
    RenderError,
    TagsmithError,
)
from tagsmith.node import (
    AttributedContent,
    Content,
    TagNode,
    as_node,
    empty_tag,
    fragment,
    tag,
    text,
)
from tagsmith.renderer import render, render_plain_text, stream_bytes, stream_to
from tagsmith.serialization import from_dict, from_json, to_dict, to_json
from tagsmith.stringbuilder import StringBuilder

__version__ = "0.1.0"

__all__ = [
    # Nodes
    "AttributedContent",
    "Content",
    "TagNode",
    "as_node",
    "empty_tag",
    "fragment",
    "tag",
    "text",
    # Rendering
    "StringBuilder",
    "render",
    "render_plain_text",
    "stream_bytes",
    "stream_to",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "MalformedAttributeListError",
    "RenderDepthError",
    "RenderError",
    "TagsmithError",
    "__version__",
]
