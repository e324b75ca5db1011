"""Attribute and text helpers for indent-based syntaxes (Pug, Slim, Haml).

These syntaxes share a shorthand for the most common attributes: ``id`` and
``class`` become primary tokens (``#main.nav.dark``), everything else is a
secondary ``name=value`` token in syntax-specific brackets.

"""

from __future__ import annotations

from dataclasses import dataclass

from markup_output.fields import FieldRenderer
from markup_output.nodes import Node
from markup_output.profile import Profile
from markup_output.utils.text import split_lines


@dataclass(frozen=True, slots=True)
class SecondaryAttribute:
    """Rendered non-shorthand attribute."""

    name: str
    value: str
    is_boolean: bool


def split_attributes(
    node: Node,
    profile: Profile,
    fields: FieldRenderer,
) -> tuple[str, list[SecondaryAttribute]]:
    """Render node attributes as primary shorthand and secondary attributes.

    Implied attributes without value are dropped, as are ``id`` and
    ``class`` whose rendered value is empty.

    Returns:
        (primary shorthand such as ``"#a.b.c"``, secondary attributes)
    """
    primary: list[str] = []
    secondary: list[SecondaryAttribute] = []

    for attribute in node.attributes:
        if attribute.options.implied and attribute.value is None:
            continue

        name = profile.attribute(attribute.name)
        is_boolean = attribute.value is None and profile.is_boolean_attribute(attribute)
        value = "" if is_boolean else fields(attribute.value)

        match name.lower():
            case "id":
                if value:
                    primary.append(f"#{value}")
            case "class":
                if value:
                    primary.append("." + ".".join(value.split()))
            case _:
                secondary.append(SecondaryAttribute(name, value, is_boolean))

    return "".join(primary), secondary


def element_name(node: Node, profile: Profile, primary: str) -> str:
    """Output name of an element; ``div`` is implied by primary shorthand."""
    name = profile.name(node.name or "")
    if primary and name.lower() == "div":
        return ""
    return name


def is_nested_text(node: Node) -> bool:
    """Text-only node inside an element (needs a text marker like ``|``)."""
    parent = node.parent
    while parent is not None and parent.is_group:
        parent = parent.parent
    return node.is_text_only and parent is not None and not parent.is_root


def prefix_lines(value: str, marker: str, continuation: str) -> str:
    """Prefix the first line with ``marker`` and the others with ``continuation``.

    Example:
        >>> prefix_lines("a\\nb", "| ", "\\t| ")
        '| a\\n\\t| b'
    """
    lines = split_lines(value)
    return "\n".join(
        [marker + lines[0], *(continuation + line for line in lines[1:])]
    )
