"""Pug (formerly Jade) renderer.

Output shape:
    #header
    	ul.nav
    		li.nav-item(title="test")

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
    element_name,
    is_nested_text,
    prefix_lines,
    split_attributes,
)
from markup_output.renderers.protocol import RenderOptions
from markup_output.utils.text import is_multiline


class PugRenderer:
    """Render abbreviation trees to Pug templates."""

    __slots__ = ("_profile", "_options")

    def __init__(
        self,
        profile: Profile | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        self._profile = profile or Profile()
        self._options = options or RenderOptions()

    def render(self, tree: Node) -> str:
        return render_tree(tree, self._profile, self._options, self.visit, layout=Layout.INDENT)

    def visit(self, node: Node, fmt: Format, fields: FieldRenderer) -> OutputNode:
        out_node = OutputNode(node, fmt)
        if render_pseudo_snippet(node, out_node, fields):
            return out_node

        profile = self._profile
        if node.name:
            primary, secondary = split_attributes(node, profile, fields)
            attrs = ", ".join(
                attr.name if attr.is_boolean else f"{attr.name}={profile.quote(attr.value)}"
                for attr in secondary
            )
            out_node.open = element_name(node, profile, primary) + primary + (
                f"({attrs})" if attrs else ""
            )

        if needs_text(node):
            out_node.text = fields(self._format_value(node))

        return out_node

    def _format_value(self, node: Node) -> str | None:
        """Pipe multi-line element text and nested text nodes."""
        value = node.value
        if value is None:
            return None
        if is_nested_text(node):
            return prefix_lines(value, "| ", "| ")
        if not node.is_text_only and is_multiline(value):
            return prefix_lines(value, "| ", self._profile.indent(1) + "| ")
        return value


def pug(tree: Node, profile: Profile | None = None, options: RenderOptions | None = None) -> str:
    """Render ``tree`` as Pug."""
    return PugRenderer(profile, options).render(tree)
