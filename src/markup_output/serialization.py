"""Tree serialization: JSON round-trip for abbreviation trees.

Lets an abbreviation parser living in another process (or language) hand its
tree over as plain data. Useful for:
- Feeding trees from editor plugins over a pipe
- Storing test fixtures
- Debugging and inspection

Node dicts carry only set fields; ``parent`` is never serialized and is
rebuilt from ``children`` on load.

Example:
    from markup_output.nodes import element, root
    from markup_output.serialization import from_json, to_json

    tree = root(element("div", element("p")))
    restored = from_json(to_json(tree))
    assert restored.first_child.first_child.name == "p"

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import Any

from markup_output.nodes import Attribute, AttributeOptions, Node


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a tree node (with its subtree) to a JSON-compatible dict.

    Default-valued fields are left out to keep fixtures short.

    Args:
        node: Any node, usually a tree root

    Returns:
        Dict with the node's set fields and serialized children

    """
    result: dict[str, Any] = {}
    if node.name is not None:
        result["name"] = node.name
    if node.value is not None:
        result["value"] = node.value
    if node.attributes:
        result["attributes"] = [_attribute_to_dict(a) for a in node.attributes]
    if node.is_group:
        result["is_group"] = True
    if node.self_closing:
        result["self_closing"] = True
    if node.children:
        result["children"] = [to_dict(child) for child in node.children]
    return result


def _attribute_to_dict(attribute: Attribute) -> dict[str, Any]:
    result: dict[str, Any] = {"name": attribute.name}
    if attribute.value is not None:
        result["value"] = attribute.value
    if attribute.options.boolean:
        result["boolean"] = True
    if attribute.options.implied:
        result["implied"] = True
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a tree node from a dict.

    Args:
        data: Dict as produced by ``to_dict`` (missing fields take defaults)

    Returns:
        Node with children attached and ``parent`` links rebuilt

    Raises:
        ValueError: If data is not a node dict

    """
    if not isinstance(data, dict):
        msg = f"Expected node dict, got {type(data).__name__}"
        raise ValueError(msg)

    unknown = set(data) - {"name", "value", "attributes", "is_group", "self_closing", "children"}
    if unknown:
        msg = f"Unknown node fields: {sorted(unknown)}"
        raise ValueError(msg)

    return Node(
        name=data.get("name"),
        value=data.get("value"),
        attributes=[_attribute_from_dict(a) for a in data.get("attributes", ())],
        children=[from_dict(child) for child in data.get("children", ())],
        is_group=bool(data.get("is_group", False)),
        self_closing=bool(data.get("self_closing", False)),
    )


def _attribute_from_dict(data: dict[str, Any]) -> Attribute:
    if not isinstance(data, dict) or "name" not in data:
        msg = f"Attribute must be a dict with 'name', got {data!r}"
        raise ValueError(msg)
    return Attribute(
        name=data["name"],
        value=data.get("value"),
        options=AttributeOptions(
            boolean=bool(data.get("boolean", False)),
            implied=bool(data.get("implied", False)),
        ),
    )


def to_json(tree: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        tree: Tree to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(tree), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a tree from a JSON string.

    Raises:
        ValueError: If the JSON is invalid or isn't a node object.

    """
    return from_dict(json.loads(data))
