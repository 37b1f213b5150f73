"""Node serialization: JSON round-trip for TagNode graphs.

Converts nodes to/from JSON-compatible dicts. Useful for caching built
fragments, shipping them between processes, and debugging.

All JSON output is deterministic (sorted keys).

Shared children are written out once per parent, so a round-trip keeps
the rendered markup but not the sharing. Cyclic graphs cannot be
serialized.

Example:
    from tagsmith import tag
    from tagsmith.serialization import to_json, from_json

    page = tag("div", "class", "glass")["Hello"]
    restored = from_json(to_json(page))
    assert restored.render() == page.render()

Thread Safety:
    All functions are pure readers of their input.

"""

import json
from typing import Any

from tagsmith.node import TagNode


def to_dict(node: TagNode) -> dict[str, Any]:
    """Convert a node and its subtree to a JSON-compatible dict."""
    return {
        "name": node.name,
        "is_empty": node.is_empty,
        "text": node.text,
        "attributes": [[key, value] for key, value in node.attributes],
        "children": [to_dict(child) for child in node.children],
    }


def from_dict(data: dict[str, Any]) -> TagNode:
    """Rebuild a node from ``to_dict`` output.

    Missing keys fall back to the defaults of a fresh node.
    """
    node = TagNode(
        data.get("name"),
        text=data.get("text"),
        is_empty=bool(data.get("is_empty", False)),
    )
    for key, value in data.get("attributes", ()):
        node.append_attribute(key, value)
    node.children = [from_dict(child) for child in data.get("children", ())]
    return node


def to_json(node: TagNode, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(text: str) -> TagNode:
    """Deserialize a node from a JSON string."""
    return from_dict(json.loads(text))
