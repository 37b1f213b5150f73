"""Mutable tag nodes for building HTML/XML markup.

A TagNode is one element (or, with no name, a transparent run of content)
in a markup fragment. Nodes are built with the factory functions at the
bottom of this module and filled in with fluent methods that return the
node itself:

    >>> from tagsmith import tag
    >>> str(tag("div", "class", "glass")["Hello, world"])
    '<div class="glass">Hello, world</div>'
    >>> str(tag("div")["1", tag("p")["2"], "3"])
    '<div>1<p>2</p>3</div>'

Content Rules:
- A node holds either text or children. Adding children to a node that has
  text turns that text into a leading transparent child first.
- Adding any content clears the empty (self-closing) flag.
- Wherever content is accepted, a plain ``str`` becomes a transparent
  text node (see ``as_node``).

Shared Content:
The same node instance may be added under several parents. It is not
copied, so later changes to it show up everywhere it was placed. Use
``clone()`` when an independent copy is wanted. A node must never be added
inside its own subtree: rendering would not terminate (set
``RenderConfig.max_depth`` to turn that into an error).

Thread Safety:
Nodes are plain mutable objects with no locking. Callers sharing nodes
between threads must synchronise mutation themselves.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple, TypeAlias

from tagsmith import renderer
from tagsmith.config import get_render_config
from tagsmith.errors import MalformedAttributeListError
from tagsmith.protocols import ByteSink, TextSink
from tagsmith.utils.logger import get_logger

logger = get_logger(__name__)


class TagNode:
    """A markup element, or a transparent content run when ``name`` is None.

    Attributes:
        name: Tag name, or None to render only the content
        children: Child nodes; when non-empty they are rendered instead of ``text``
        text: Raw text, rendered only when there are no children
        is_empty: Render as ``<name/>`` and never render content
        attributes: Key/value pairs in insertion order
        attribute_text: Rendered form of ``attributes`` (`` k="v"`` per pair)

    """

    __slots__ = ("name", "children", "text", "is_empty", "attributes", "attribute_text")

    def __init__(
        self,
        name: str | None = None,
        *,
        text: str | None = None,
        is_empty: bool = False,
    ) -> None:
        self.name = name
        self.children: list[TagNode] = []
        self.text = text
        self.is_empty = is_empty
        self.attributes: tuple[tuple[str, str], ...] = ()
        self.attribute_text: str | None = None

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set_text(self, text: str | None) -> TagNode:
        """Set the raw text content.

        Text is only rendered while the node has no children.
        """
        self.text = text
        return self

    def add(self, *content: Content) -> TagNode:
        """Append content after anything already present.

        Strings become transparent text nodes. Calling with no content
        leaves the node untouched.
        """
        return self.extend(content)

    def extend(self, content: Iterable[Content] | None) -> TagNode:
        """Append every item of an iterable as content.

        Example:
            >>> str(tag("x").extend(s for s in "abc"))
            '<x>abc</x>'
        """
        if content is None:
            return self

        nodes = [as_node(item) for item in content]
        if not nodes:
            return self

        self.is_empty = False
        if self.text is not None:
            self.children.append(text(self.text))
            self.text = None
        self.children.extend(nodes)
        return self

    def empty(self) -> TagNode:
        """Mark as an empty tag, rendered as ``<name/>``.

        Existing content is kept but not rendered.
        """
        self.is_empty = True
        return self

    def set_attributes(self, *pairs: str) -> TagNode:
        """Replace the attributes from a flat key, value, key, value... list.

        An unpaired trailing element is dropped, unless
        ``RenderConfig.strict_attributes`` is on, in which case
        ``MalformedAttributeListError`` is raised. Passing fewer than two
        elements leaves the current attributes as they are.
        """
        limit = len(pairs) - len(pairs) % 2
        if limit != len(pairs):
            if get_render_config().strict_attributes:
                raise MalformedAttributeListError(pairs)
            logger.debug("Dropping unpaired attribute %r on <%s>", pairs[-1], self.name)
        if limit <= 0:
            return self

        self.attributes = tuple((pairs[i], pairs[i + 1]) for i in range(0, limit, 2))
        self.attribute_text = "".join(f' {key}="{value}"' for key, value in self.attributes)
        return self

    def append_attribute(self, key: str, value: str) -> TagNode:
        """Add one attribute after the existing ones.

        The rendered attribute text is extended in place, not rebuilt.
        """
        self.attributes = (*self.attributes, (key, value))
        self.attribute_text = f'{self.attribute_text or ""} {key}="{value}"'
        return self

    def load_file(self, path: str | os.PathLike[str], encoding: str | None = None) -> TagNode:
        """Use the contents of a text file as this node's text.

        Line endings are kept as stored. A leading byte-order mark is dropped.

        Raises:
            OSError: Propagated unchanged if the file cannot be read
            UnicodeDecodeError: If the bytes are not valid in ``encoding``
        """
        data = Path(path).read_bytes()
        content = data.decode(encoding or get_render_config().encoding)
        self.text = content.removeprefix("\ufeff")
        logger.debug("Loaded %d characters from %s", len(self.text), path)
        return self

    def __getitem__(self, content: Content | tuple[Content, ...] | list[Content]) -> TagNode:
        """Indexer shorthand: ``node["text"]`` sets text, ``node[a, b]`` adds content."""
        if isinstance(content, str):
            return self.set_text(content)
        if isinstance(content, (tuple, list)):
            return self.extend(content)
        return self.add(content)

    # -------------------------------------------------------------------------
    # Copying and repetition
    # -------------------------------------------------------------------------

    def clone(self) -> TagNode:
        """Deep copy: the copy shares no nodes with the original."""
        dup = self.empty_clone()
        dup.text = self.text
        dup.children = [child.clone() for child in self.children]
        return dup

    def empty_clone(self) -> TagNode:
        """Copy the tag itself (name, empty flag, attributes) without content."""
        dup = TagNode(self.name, is_empty=self.is_empty)
        dup.attributes = self.attributes
        dup.attribute_text = self.attribute_text
        return dup

    def repeat(self, *items: Content) -> TagNode:
        """Stamp out one copy of this tag per item, each holding that item.

        Example:
            >>> str(tag("p").repeat("One", "Two"))
            '<p>One</p><p>Two</p>'
        """
        container = fragment()
        for item in items:
            container.add(self.empty_clone().add(item))
        return container

    def repeat_with_attribute(
        self, *items: AttributedContent | tuple[str, str, Content | None]
    ) -> TagNode:
        """Stamp out copies of this tag, each with one extra attribute and its own content.

        The extra attribute follows the template's own attributes. A ``None``
        content leaves that copy without content.

        Example:
            >>> links = tag("a", "class", "c").repeat_with_attribute(
            ...     ("href", "1", "One"), ("href", "2", "Two"))
            >>> str(links)
            '<a class="c" href="1">One</a><a class="c" href="2">Two</a>'
        """
        container = fragment()
        for key, value, content in items:
            copy = self.empty_clone().append_attribute(key, value)
            if content is not None:
                copy.add(content)
            container.add(copy)
        return container

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Render as markup."""
        return renderer.render(self)

    def to_plain_text(self, *exclude: str) -> str:
        """Render text content only, skipping subtrees named in ``exclude``."""
        return renderer.render_plain_text(self, exclude)

    def stream_to(
        self,
        out: TextSink,
        render_tags: bool = True,
        exclude: Iterable[str] = (),
    ) -> None:
        """Write to a text sink; see ``tagsmith.renderer.stream_to``."""
        renderer.stream_to(self, out, render_tags, exclude)

    def stream_bytes(self, target: ByteSink, encoding: str | None = None) -> None:
        """Write encoded markup to a byte sink; see ``tagsmith.renderer.stream_bytes``."""
        renderer.stream_bytes(self, target, encoding)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self.name is None:
            label = "fragment"
        else:
            label = f"<{self.name}{self.attribute_text or ''}{'/' if self.is_empty else ''}>"
        if self.children:
            return f"TagNode({label}, children={len(self.children)})"
        if self.text is not None:
            return f"TagNode({label}, text={self.text!r})"
        return f"TagNode({label})"


Content: TypeAlias = str | TagNode


class AttributedContent(NamedTuple):
    """One entry for ``TagNode.repeat_with_attribute``.

    Attributes:
        key: Attribute name added to the copy
        value: Attribute value, written verbatim
        content: Content of the copy, or None for no content

    """

    key: str
    value: str
    content: Content | None


# =============================================================================
# Factories
# =============================================================================


def tag(name: str | None = None, *attributes: str) -> TagNode:
    """Create a tag.

    A trailing ``/`` on the name makes an empty tag (``tag("br/")``).
    ``attributes`` alternate between name and value.

    Example:
        >>> str(tag("div", "class", "plain"))
        '<div class="plain"></div>'
    """
    is_empty = False
    if name is not None and name.endswith("/"):
        name = name.rstrip("/")
        is_empty = True

    node = TagNode(name or None, is_empty=is_empty)
    node.set_attributes(*attributes)
    return node


def empty_tag(name: str | None, *attributes: str) -> TagNode:
    """Create a tag and mark it empty."""
    return tag(name, *attributes).empty()


def fragment() -> TagNode:
    """Create a transparent node, used to mix plain text with tags."""
    return TagNode()


def text(content: str) -> TagNode:
    """Create a transparent node holding ``content`` as text."""
    return TagNode(text=content)


def as_node(content: Content) -> TagNode:
    """Return ``content`` as a node, wrapping strings in a text node.

    Raises:
        TypeError: If ``content`` is neither a str nor a TagNode
    """
    if isinstance(content, TagNode):
        return content
    if isinstance(content, str):
        return text(content)
    raise TypeError(f"Tag content must be str or TagNode, not {type(content).__name__}")
