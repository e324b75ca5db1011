"""Slim renderer.

Output shape:
    #header
    	ul.nav
    		li.nav-item title="test"

Secondary attributes may be wrapped in brackets with the ``attribute_wrap``
render option. With ``inline_break = 0`` a lone inline child is nested on
its parent's line (``li: a href=""``).

Thread Safety:
All per-render state is created fresh for each render() call.
"""

from __future__ import annotations

from markup_output.fields import FieldRenderer
from markup_output.formatting import Layout
from markup_output.nodes import Node
from markup_output.output import Format, OutputNode
from markup_output.profile import Profile
from markup_output.renderers.base import needs_text, render_pseudo_snippet, render_tree
from markup_output.renderers.indent import (
    SecondaryAttribute,
    element_name,
    is_nested_text,
    prefix_lines,
    split_attributes,
)
from markup_output.renderers.protocol import RenderOptions
from markup_output.utils.text import is_multiline

_WRAPS = {
    "none": (" ", ""),
    "round": ("(", ")"),
    "curly": ("{", "}"),
    "square": ("[", "]"),
}


class SlimRenderer:
    """Render abbreviation trees to Slim templates."""

    __slots__ = ("_profile", "_options")

    def __init__(
        self,
        profile: Profile | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        self._profile = profile or Profile()
        self._options = options or RenderOptions()

    def render(self, tree: Node) -> str:
        return render_tree(
            tree,
            self._profile,
            self._options,
            self.visit,
            layout=Layout.INDENT,
            inline_nesting=True,
        )

    def visit(self, node: Node, fmt: Format, fields: FieldRenderer) -> OutputNode:
        out_node = OutputNode(node, fmt)
        if render_pseudo_snippet(node, out_node, fields):
            return out_node

        if node.name:
            primary, secondary = split_attributes(node, self._profile, fields)
            out_node.open = (
                element_name(node, self._profile, primary)
                + primary
                + self._secondary(secondary)
                + ("/" if node.self_closing else "")
            )

        if needs_text(node):
            out_node.text = fields(self._format_value(node))

        return out_node

    def _secondary(self, attrs: list[SecondaryAttribute]) -> str:
        if not attrs:
            return ""

        wrap = self._options.attribute_wrap
        start, end = _WRAPS[wrap]
        tokens = []
        for attr in attrs:
            if attr.is_boolean:
                # Unwrapped attributes need an explicit value to stay parseable
                tokens.append(f"{attr.name}=true" if wrap == "none" else attr.name)
            else:
                tokens.append(f"{attr.name}={self._profile.quote(attr.value)}")
        return start + " ".join(tokens) + end

    def _format_value(self, node: Node) -> str | None:
        """Pipe text blocks; continuation lines sit under the pipe's text."""
        value = node.value
        if value is None:
            return None
        if is_nested_text(node):
            return prefix_lines(value, "| ", "  ")
        if not node.is_text_only and is_multiline(value):
            return prefix_lines(value, "| ", self._profile.indent(1) + "  ")
        return value


def slim(tree: Node, profile: Profile | None = None, options: RenderOptions | None = None) -> str:
    """Render ``tree`` as Slim."""
    return SlimRenderer(profile, options).render(tree)
