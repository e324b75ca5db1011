"""Output nodes and the composition pass.

Output formatting is made of two steps:

1. ``compute_formats()`` walks the tree and decides a Format for every node
   (see ``markup_output.formatting``).
2. ``compose()`` walks the tree again. For each node, a syntax visitor fills
   an OutputNode with ``open``/``text``/``close`` fragments; the node's
   children are composed next, and the OutputNode wraps everything into
   the final string using its Format.

Renderers only decide *what* each fragment is. Leading/trailing whitespace,
re-indentation of multi-line fragments and line breaks between nodes are
applied here.

Thread Safety:
    compose() keeps no state outside its arguments. The FieldRenderer it
    threads through belongs to a single render call.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from markup_output.fields import FieldRenderer
from markup_output.nodes import Node
from markup_output.stringbuilder import StringBuilder
from markup_output.utils.text import split_lines


@dataclass(slots=True)
class Format:
    """Whitespace around a node's fragments.

    ``indent`` and ``newline`` are applied to line breaks *inside* fragments;
    ``before_*``/``after_*`` surround each fragment. A Format with empty
    ``indent`` and ``newline`` means "no formatting": internal line breaks
    collapse to single spaces.

    """

    indent: str = ""
    newline: str = ""
    before_open: str = ""
    after_open: str = ""
    before_close: str = ""
    after_close: str = ""
    before_text: str = ""
    after_text: str = ""

    def open(self, s: str | None) -> str:
        return self.wrap(s, self.before_open, self.after_open)

    def text(self, s: str | None) -> str:
        return self.wrap(s, self.before_text, self.after_text)

    def close(self, s: str | None) -> str:
        return self.wrap(s, self.before_close, self.after_close)

    def wrap(self, s: str | None, before: str, after: str) -> str:
        """Surround ``s`` with ``before`` and ``after``.

        Whitespace of ``s`` facing a non-empty boundary is trimmed.

        Example:
            >>> Format().wrap("  x  ", "<", "")
            '<x  '
            >>> Format().wrap("  x  ", "<", ">")
            '<x>'
        """
        if s is None:
            return ""
        if before:
            s = s.lstrip()
        if after:
            s = s.rstrip()
        return before + self.indent_text(s) + after

    def indent_text(self, s: str) -> str:
        """Re-indent continuation lines of ``s`` and normalize line breaks.

        Example:
            >>> Format(indent="\\t", newline="\\n").indent_text("a\\r\\nb\\rc")
            'a\\n\\tb\\n\\tc'
            >>> Format().indent_text("a\\nb")
            'a b'
        """
        lines = split_lines(s)
        if len(lines) == 1:
            return s

        separator = " " if not self.newline and not self.indent else self.newline
        return separator.join(
            [lines[0], *(self.indent + line for line in lines[1:])]
        )


class OutputNode:
    """Generated output of one tree node.

    The final output of a node is ``open``, ``text``, the children's output
    and ``close``, each passed through the node's Format. Fragments left as
    None produce nothing (not even their surrounding whitespace).

    """

    __slots__ = ("node", "format", "open", "text", "close")

    def __init__(self, node: Node | None = None, format: Format | None = None) -> None:
        self.node = node
        self.format = format if format is not None else Format()
        self.open: str | None = None
        self.text: str | None = None
        self.close: str | None = None

    def to_string(self, children: str = "") -> str:
        fmt = self.format
        return fmt.open(self.open) + fmt.text(self.text) + children + fmt.close(self.close)

    def __repr__(self) -> str:
        name = self.node.name if self.node is not None else None
        return (
            f"OutputNode(name={name!r}, open={self.open!r}, "
            f"text={self.text!r}, close={self.close!r})"
        )


Visitor = Callable[[Node, Format, FieldRenderer], OutputNode | None]
"""Syntax callback: fill an OutputNode for ``node``, or None to drop it."""


def compose(
    tree: Node,
    visitor: Visitor,
    fields: FieldRenderer,
    formats: dict[Node, Format] | None = None,
) -> str:
    """Compose output of all nodes below ``tree``.

    Args:
        tree: Tree root (produces no output itself)
        visitor: Syntax callback filling each node's fragments
        fields: Field renderer of the current render call
        formats: Per-node formats from ``compute_formats()``; nodes missing
            from the map get an empty Format

    Returns:
        Concatenated output of the root's children
    """
    return _compose_children(tree.children, visitor, fields, formats or {})


def _compose_children(
    nodes: list[Node],
    visitor: Visitor,
    fields: FieldRenderer,
    formats: dict[Node, Format],
) -> str:
    sb = StringBuilder()
    for node in nodes:
        if node.is_group:
            sb.append(_compose_children(node.children, visitor, fields, formats))
            continue

        fmt = formats.get(node)
        out_node = visitor(node, fmt if fmt is not None else Format(), fields)
        if out_node is None:
            continue

        # Children are composed after the visitor so their fields number
        # after the node's own open/text/close fields
        children = _compose_children(node.children, visitor, fields, formats)
        sb.append(out_node.to_string(children))
    return sb.build()
