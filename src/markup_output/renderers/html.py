"""HTML renderer.

Renders an abbreviation tree as tag-based markup using the markup layout:
block-level elements on their own lines, inline runs kept together.

Thread Safety:
HtmlRenderer holds only immutable configuration. All per-render state (format
map, field counter) is created fresh for each render() call, so multiple
threads can safely share a single instance.
"""

from __future__ import annotations

from markup_output.fields import FieldRenderer
from markup_output.formatting import Layout
from markup_output.nodes import Node
from markup_output.output import Format, OutputNode
from markup_output.profile import Profile
from markup_output.renderers.base import needs_text, render_pseudo_snippet, render_tree
from markup_output.renderers.protocol import RenderOptions


class HtmlRenderer:
    """Render abbreviation trees to HTML/XML markup.

    Usage:
        >>> from markup_output.nodes import element, root
        >>> renderer = HtmlRenderer()
        >>> renderer.render(root(element("div", element("p"))))
        '<div>\\n\\t<p></p>\\n</div>'

    """

    __slots__ = ("_profile", "_options")

    def __init__(
        self,
        profile: Profile | None = None,
        options: RenderOptions | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            profile: Output profile (context defaults if None)
            options: Per-syntax options
        """
        self._profile = profile or Profile()
        self._options = options or RenderOptions()

    def render(self, tree: Node) -> str:
        """Render all nodes below ``tree`` to markup."""
        return render_tree(tree, self._profile, self._options, self.visit, layout=Layout.MARKUP)

    def visit(self, node: Node, fmt: Format, fields: FieldRenderer) -> OutputNode:
        """Fill open/text/close fragments of a single node."""
        out_node = OutputNode(node, fmt)
        if render_pseudo_snippet(node, out_node, fields):
            return out_node

        profile = self._profile
        if node.name:
            name = profile.name(node.name)
            attrs = self._attributes(node, fields)
            self_close = profile.self_close() if node.self_closing else ""
            out_node.open = f"<{name}{' ' + attrs if attrs else ''}{self_close}>"
            if not node.self_closing:
                out_node.close = f"</{name}>"
        else:
            # Nameless nodes still carry the line break placed before them
            out_node.open = ""

        if needs_text(node):
            out_node.text = fields(node.value)

        return out_node

    def _attributes(self, node: Node, fields: FieldRenderer) -> str:
        profile = self._profile
        parts: list[str] = []
        for attribute in node.attributes:
            if attribute.value is None and (
                attribute.options.implied or profile.is_boolean_attribute(attribute)
            ):
                formatted = profile.attribute(attribute)
            else:
                formatted = profile.attribute(attribute, fields(attribute.value))
            if formatted:
                parts.append(formatted)
        return " ".join(parts)


def html(tree: Node, profile: Profile | None = None, options: RenderOptions | None = None) -> str:
    """Render ``tree`` as HTML."""
    return HtmlRenderer(profile, options).render(tree)
