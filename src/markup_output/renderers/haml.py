"""Haml renderer.

Output shape:
    #header
    	%ul.nav
    		%li.nav-item(title="test")

Multi-line text is written as a multiline block: every line padded to the
same width and terminated with `` |``.

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
from markup_output.renderers.indent import element_name, split_attributes
from markup_output.renderers.protocol import RenderOptions
from markup_output.utils.text import is_multiline, split_lines


class HamlRenderer:
    """Render abbreviation trees to Haml templates."""

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
            name = element_name(node, profile, primary)
            compact = profile.get("compact_boolean_attributes")
            attrs = " ".join(
                (attr.name if compact else f"{attr.name}=true")
                if attr.is_boolean
                else f"{attr.name}={profile.quote(attr.value)}"
                for attr in secondary
            )
            out_node.open = (
                (f"%{name}" if name else "")
                + primary
                + (f"({attrs})" if attrs else "")
                + ("/" if node.self_closing else "")
            )

        if needs_text(node):
            out_node.text = fields(self._format_value(node))

        return out_node

    def _format_value(self, node: Node) -> str | None:
        value = node.value
        if value is None or not is_multiline(value):
            return value

        lines = split_lines(value)
        width = max(len(line) for line in lines)
        indent = "" if node.is_text_only else self._profile.indent(1)
        return "\n".join(
            f"{indent if i else ''}{line.ljust(width)} |" for i, line in enumerate(lines)
        )


def haml(tree: Node, profile: Profile | None = None, options: RenderOptions | None = None) -> str:
    """Render ``tree`` as Haml."""
    return HamlRenderer(profile, options).render(tree)
