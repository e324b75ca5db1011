"""Render driver shared by all syntax renderers.

Every render call builds its own format map and FieldRenderer, so a single
renderer instance can serve concurrent calls.

"""

from __future__ import annotations

from markup_output.fields import FieldRenderer
from markup_output.formatting import Layout, compute_formats
from markup_output.nodes import Node
from markup_output.output import Format, OutputNode, Visitor, compose
from markup_output.profile import Profile
from markup_output.renderers.protocol import RenderOptions
from markup_output.utils.logger import get_logger

logger = get_logger(__name__)


def render_tree(
    tree: Node,
    profile: Profile,
    options: RenderOptions,
    visit: Visitor,
    *,
    layout: Layout = Layout.MARKUP,
    inline_nesting: bool = False,
) -> str:
    """Run both output passes over ``tree`` with a syntax visitor.

    Args:
        tree: Tree root
        profile: Output profile
        options: Per-call options (field factory, post-processor)
        visit: Syntax callback filling each node's fragments
        layout: Layout rules for the format pass
        inline_nesting: See ``compute_formats()``

    Returns:
        Rendered output
    """
    formats = compute_formats(tree, profile, layout=layout, inline_nesting=inline_nesting)
    fields = FieldRenderer(options.field or profile.field)
    logger.debug("Composing %d nodes (%s layout)", len(formats), layout.value)

    post_process = options.post_process
    if post_process is None:
        return compose(tree, visit, fields, formats)

    def visitor(node: Node, fmt: Format, fields: FieldRenderer) -> OutputNode | None:
        out_node = visit(node, fmt, fields)
        return post_process(out_node, profile) if out_node is not None else None

    return compose(tree, visitor, fields, formats)


def render_pseudo_snippet(node: Node, out_node: OutputNode, fields: FieldRenderer) -> bool:
    """Fill output of a pseudo-snippet: a text-only node with children.

    The node's value is split at its lowest-index field: text before becomes
    the open fragment, text after the close fragment, so children appear
    where the field was. Without fields, the value becomes plain text.

    Returns:
        True if ``node`` is a pseudo-snippet (``out_node`` is filled)
    """
    if not (node.is_text_only and node.children):
        return False

    parts = fields.split(node.value or "")
    if parts is None:
        out_node.text = fields(node.value)
    else:
        out_node.open, out_node.close = parts
    return True


def needs_text(node: Node) -> bool:
    """Check if node text should be output.

    Nodes without value get an empty field as text, unless they have
    children or are self-closing.
    """
    return bool(node.value) or not (node.children or node.self_closing)
