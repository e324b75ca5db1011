"""Format decision pass: indentation and line breaks for every tree node.

A single pre-order walk decides, before any output is produced, where line
breaks go and how deep each node is indented. Decisions are collected in a
map keyed by node identity, so the input tree is never touched.

Layouts:
- ``Layout.MARKUP``: tag-based output (HTML, XML). Block-level elements go
  on their own lines; runs of inline elements stay on one line unless they
  sit next to block elements or exceed ``inline_break``.
- ``Layout.INDENT``: indentation-significant templates (Pug, Slim, Haml).
  Every element starts its own line; formatting cannot be turned off.

In both layouts the very first output node is never preceded by a line
break, and this check wins over every other rule.

"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from markup_output.nodes import Node
from markup_output.output import Format
from markup_output.profile import Profile
from markup_output.utils.text import is_multiline

NEWLINE = "\n"


class Layout(Enum):
    """How a syntax lays out nested nodes."""

    MARKUP = "markup"
    INDENT = "indent"


def compute_formats(
    tree: Node,
    profile: Profile,
    *,
    layout: Layout = Layout.MARKUP,
    inline_nesting: bool = False,
) -> dict[Node, Format]:
    """Decide the Format of every node below ``tree``.

    Args:
        tree: Tree root
        profile: Output profile
        layout: Markup or indent-based layout rules
        inline_nesting: Indent layout only: with ``inline_break == 0``, put a
            lone inline child on its parent's line after ``": "``

    Returns:
        Map from node to its Format (every descendant of ``tree`` has one)

    Raises:
        RenderError: If the tree is malformed
    """
    formats: dict[Node, Format] = {}
    if layout is Layout.INDENT:
        for node, depth in tree.walk():
            formats[node] = _indent_format(node, depth, profile, inline_nesting)
        return formats

    enabled = bool(profile.get("format", True))
    siblings: dict[Node, _Sibling] = {}
    if enabled:
        _index_siblings(tree.children, profile, siblings)

    for node, depth in tree.walk():
        fmt = formats.setdefault(node, Format())
        if enabled:
            _index_siblings(node.children, profile, siblings)
            _markup_format(node, depth, fmt, formats, profile, siblings[node])
    return formats


# =============================================================================
# Markup layout
# =============================================================================


class _Sibling(NamedTuple):
    """Position of a node among its siblings, computed once per parent."""

    index: int
    previous_inline: bool
    block_after: bool
    run_length: int


def _index_siblings(
    children: list[Node],
    profile: Profile,
    siblings: dict[Node, _Sibling],
) -> None:
    """Record sibling positions and inline run lengths in one pass over ``children``."""
    inline = [_is_inline(child, profile) for child in children]
    count = len(children)

    block_after = [False] * count
    for ix in range(count - 2, -1, -1):
        block_after[ix] = block_after[ix + 1] or not inline[ix + 1]

    start = 0
    for ix in range(count + 1):
        if ix < count and inline[ix]:
            continue
        # Children in [start, ix) form one inline run; ix itself is block-level
        for pos in range(start, min(ix + 1, count)):
            siblings[children[pos]] = _Sibling(
                index=pos,
                previous_inline=pos > 0 and inline[pos - 1],
                block_after=block_after[pos],
                run_length=ix - start if pos < ix else 1,
            )
        start = ix + 1


def _markup_format(
    node: Node,
    depth: int,
    fmt: Format,
    formats: dict[Node, Format],
    profile: Profile,
    sibling: _Sibling,
) -> None:
    level = _indent_level(node, depth, profile.get("format_skip") or frozenset())
    fmt.indent = profile.indent(level)
    fmt.newline = NEWLINE

    if _should_format(node, profile, sibling):
        fmt.before_open = fmt.newline + fmt.indent
        parent, first, last = _owner(node)

        # Parent text must line up with its first child
        if first and not parent.is_text_only and parent.value:
            formats[parent].after_open = fmt.before_open

        # Closing tag of a non-root parent goes on its own line
        if last and not parent.is_root:
            parent_fmt = formats[parent]
            parent_fmt.before_close = parent_fmt.newline + parent_fmt.indent

    if _is_forced(node, profile) and not node.children and not node.self_closing:
        fmt.after_open = fmt.newline + profile.indent(level + 1)
        fmt.before_close = fmt.newline + fmt.indent


def _indent_level(node: Node, depth: int, skip: frozenset[str]) -> int:
    """Depth minus ancestors that don't visually nest their children."""
    level = depth
    parent = node.parent
    if parent is not None and parent.is_text_only:
        level -= 1

    ancestor = parent
    while ancestor is not None and not ancestor.is_root:
        if ancestor.is_group or (ancestor.name or "").lower() in skip:
            level -= 1
        ancestor = ancestor.parent

    return max(level, 0)


def _should_format(node: Node, profile: Profile, sibling: _Sibling) -> bool:
    if _is_very_first(node):
        return False

    parent, _, _ = _owner(node)
    if _is_forced(parent, profile):
        return True

    return _should_format_inline(node, profile, sibling) if _is_inline(node, profile) else True


def _should_format_inline(node: Node, profile: Profile, sibling: _Sibling) -> bool:
    """Check if an inline node still needs a line break before it."""
    # Pseudo-snippet: its children need block boundaries
    if node.is_text_only and node.children:
        return True

    if sibling.index == 0:
        # First in parent: break if a block-level sibling follows
        if sibling.block_after:
            return True
    elif not sibling.previous_inline:
        # Right after a block-level sibling
        return True

    threshold = profile.get("inline_break", 0) or 0
    if threshold > 0:
        return sibling.run_length >= threshold

    return False


# =============================================================================
# Indent layout
# =============================================================================


def _indent_format(node: Node, depth: int, profile: Profile, inline_nesting: bool) -> Format:
    parent = node.parent
    level = depth
    if parent.is_text_only:
        level -= 1
    ancestor = parent
    while ancestor is not None and not ancestor.is_root:
        if ancestor.is_group:
            level -= 1
        ancestor = ancestor.parent

    fmt = Format(indent=profile.indent(level), newline=NEWLINE)
    prefix = fmt.newline + fmt.indent

    if (
        inline_nesting
        and profile.get("inline_break") == 0
        and not node.is_text_only
        and _is_inline(node, profile)
        and not parent.is_root
        and not parent.is_group
        and parent.value is None
        and len(parent.children) == 1
    ):
        fmt.before_open = ": "
    elif not _is_very_first(node):
        fmt.before_open = prefix
        # Text-only nodes have no open fragment, the break goes before text
        if node.is_text_only:
            fmt.before_text = prefix

    if not node.is_text_only and node.value:
        fmt.before_text = prefix + profile.indent(1) if is_multiline(node.value) else " "

    return fmt


# =============================================================================
# Helpers
# =============================================================================


def _is_inline(node: Node | None, profile: Profile) -> bool:
    return node is not None and (node.is_text_only or profile.is_inline(node))


def _is_forced(node: Node, profile: Profile) -> bool:
    force = profile.get("format_force") or frozenset()
    return bool(node.name) and node.name.lower() in force


def _owner(node: Node) -> tuple[Node, bool, bool]:
    """Nearest non-group ancestor, looking through group wrappers.

    Returns:
        (owner, node is its first output child, node is its last output child)
    """
    first = last = True
    while True:
        parent = node.parent
        if parent is None:
            return node, first, last
        first = first and node is _first_output_child(parent)
        last = last and node is _last_output_child(parent)
        if parent.is_root or not parent.is_group:
            return parent, first, last
        node = parent


def _is_very_first(node: Node) -> bool:
    """First node of the whole output."""
    parent, first, _ = _owner(node)
    return first and parent.is_root


def _has_output(node: Node) -> bool:
    """Groups without element or text descendants produce no output."""
    return not node.is_group or any(_has_output(child) for child in node.children)


def _first_output_child(node: Node) -> Node | None:
    return next((child for child in node.children if _has_output(child)), None)


def _last_output_child(node: Node) -> Node | None:
    return next((child for child in reversed(node.children) if _has_output(child)), None)
