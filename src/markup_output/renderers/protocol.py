"""Renderer protocol and per-call render options.

Any renderer that implements ``render(tree) -> str`` conforms to
``TreeRenderer``. The built-in ``HtmlRenderer`` is the reference
implementation; ``PugRenderer``, ``SlimRenderer`` and ``HamlRenderer``
cover indent-based template syntaxes.

Example:
    from markup_output.renderers.protocol import TreeRenderer

    def expand(renderer: TreeRenderer, tree: Node) -> str:
        return renderer.render(tree)

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from markup_output.nodes import Node
    from markup_output.output import OutputNode
    from markup_output.profile import Profile

ATTRIBUTE_WRAPS = ("none", "round", "curly", "square")


class TreeRenderer(Protocol):
    """Protocol for abbreviation tree renderers."""

    def render(self, tree: Node) -> str:
        """Render all nodes below the tree root to a string."""
        ...


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options of a single syntax render call.

    Attributes:
        field: Field (tabstop) factory overriding the profile's
        attribute_wrap: Brackets around secondary attributes in Slim:
            "none", "round", "curly" or "square"
        post_process: Called with every filled OutputNode and the profile;
            returns the node to output, or None to drop the node together
            with its children

    """

    field: Callable[..., str] | None = None
    attribute_wrap: str = "none"
    post_process: Callable[[OutputNode, Profile], OutputNode | None] | None = None

    def __post_init__(self) -> None:
        if self.attribute_wrap not in ATTRIBUTE_WRAPS:
            msg = f"attribute_wrap must be one of {ATTRIBUTE_WRAPS}, got {self.attribute_wrap!r}"
            raise ValueError(msg)
