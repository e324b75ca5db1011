"""Abbreviation tree nodes for markup_output.

The tree is produced by an external abbreviation parser (``div>p*3`` and
friends) and is read-only input for the output engine. Nodes are mutable
dataclasses with slots so parsers and tests can assemble them
incrementally; the renderer itself never mutates them.

Node Shape:
Node
├── name          element name, None for text and group nodes
├── value         literal text, may embed fields like ``${1:placeholder}``
├── attributes    ordered Attribute list
├── children      ordered Node list (owned)
└── parent        back-reference to the owning node (not owned)

Navigation (``first_child``, ``next_sibling``, ``child_index`` ...) is always
derived from the parent's ``children`` list, never stored.

Nodes compare and hash by identity, so they can key the per-render format
map without copying the tree.

Example:
    >>> from markup_output.nodes import element, root
    >>> tree = root(element("div", *(element("p") for _ in range(3))))
    >>> tree.first_child.name
    'div'
    >>> len(tree.first_child.children)
    3

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from markup_output.errors import RenderError


@dataclass(frozen=True, slots=True)
class AttributeOptions:
    """Parser-provided attribute flags.

    Attributes:
        boolean: Attribute was written in boolean form (``input[disabled.]``)
        implied: Attribute comes from a snippet and is dropped when empty

    """

    boolean: bool = False
    implied: bool = False


@dataclass(frozen=True, slots=True)
class Attribute:
    """Element attribute.

    ``value`` of None means "no value given"; renderers turn it into an
    empty field, a boolean attribute or nothing at all depending on
    ``options`` and the profile.

    """

    name: str
    value: str | None = None
    options: AttributeOptions = field(default_factory=AttributeOptions)


@dataclass(slots=True, eq=False)
class Node:
    """Abbreviation tree node.

    A node with neither name nor value acting as a container is a group
    (``(a+b)``) when ``is_group`` is set; the root of a parsed tree is a
    nameless node without parent.

    """

    name: str | None = None
    value: str | None = None
    attributes: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    is_group: bool = False
    self_closing: bool = False
    parent: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    # -- Flags -----------------------------------------------------------------

    @property
    def is_text_only(self) -> bool:
        """Node has text but no element name (``{Hello}``)."""
        return not self.name and bool(self.value)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    # -- Derived navigation ----------------------------------------------------

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Node | None:
        return self.children[-1] if self.children else None

    @property
    def child_index(self) -> int:
        """Position in parent's children, -1 for the root."""
        if self.parent is None:
            return -1
        return self.parent.children.index(self)

    @property
    def next_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        ix = siblings.index(self) + 1
        return siblings[ix] if ix < len(siblings) else None

    @property
    def previous_sibling(self) -> Node | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        ix = siblings.index(self) - 1
        return siblings[ix] if ix >= 0 else None

    # -- Mutation (for parsers and tests) --------------------------------------

    def append_child(self, child: Node) -> Node:
        """Append child, detaching it from its previous parent.

        Returns:
            The appended child, for chaining
        """
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    # -- Traversal -------------------------------------------------------------

    def walk(self) -> Iterator[tuple[Node, int]]:
        """Yield ``(node, depth)`` for all descendants in pre-order.

        Direct children have depth 0. The walk verifies that every child
        points back to its owner and that no node is reached twice.

        Raises:
            RenderError: If the tree is malformed
        """
        seen: set[int] = {id(self)}
        stack: list[tuple[Node, int]] = [(c, 0) for c in reversed(self.children)]
        owners: dict[int, Node] = {id(c): self for c in self.children}

        while stack:
            node, depth = stack.pop()
            if id(node) in seen:
                raise RenderError("Node reached twice, tree contains a cycle", node.name)
            seen.add(id(node))
            if node.parent is not owners[id(node)]:
                raise RenderError("Child node does not reference its parent", node.name)

            yield node, depth

            for child in reversed(node.children):
                owners[id(child)] = node
                stack.append((child, depth + 1))


# =============================================================================
# Builders
# =============================================================================


def attr(
    name: str,
    value: str | None = None,
    *,
    boolean: bool = False,
    implied: bool = False,
) -> Attribute:
    """Create an Attribute."""
    return Attribute(name, value, AttributeOptions(boolean=boolean, implied=implied))


def element(
    name: str,
    *children: Node,
    attributes: Iterable[Attribute] = (),
    value: str | None = None,
    self_closing: bool = False,
) -> Node:
    """Create an element node owning ``children``.

    Example:
        >>> a = element("a", attributes=[attr("href")], value="link")
        >>> a.attributes[0].name
        'href'
    """
    return Node(
        name=name,
        value=value,
        attributes=list(attributes),
        children=list(children),
        self_closing=self_closing,
    )


def text(value: str, *children: Node) -> Node:
    """Create a text-only node; with children it becomes a pseudo-snippet."""
    return Node(value=value, children=list(children))


def group(*children: Node) -> Node:
    """Create a grouping node (``(a+b)``) that renders only its children."""
    return Node(children=list(children), is_group=True)


def root(*children: Node) -> Node:
    """Create a tree root."""
    return Node(children=list(children))
