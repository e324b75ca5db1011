"""Syntax renderers.

Each syntax is a visitor plugged into the shared output passes:

- html: tag-based markup (HTML, XML, XHTML)
- pug, slim, haml: indentation-significant templates

"""

from collections.abc import Callable

from markup_output.nodes import Node
from markup_output.profile import Profile
from markup_output.renderers.haml import HamlRenderer, haml
from markup_output.renderers.html import HtmlRenderer, html
from markup_output.renderers.protocol import RenderOptions, TreeRenderer
from markup_output.renderers.pug import PugRenderer, pug
from markup_output.renderers.slim import SlimRenderer, slim

SyntaxRenderer = Callable[[Node, Profile | None, RenderOptions | None], str]

# Registry of syntax names to render functions
SYNTAXES: dict[str, SyntaxRenderer] = {
    "html": html,
    "pug": pug,
    "slim": slim,
    "haml": haml,
}

__all__ = [
    "SYNTAXES",
    "HamlRenderer",
    "HtmlRenderer",
    "PugRenderer",
    "RenderOptions",
    "SlimRenderer",
    "SyntaxRenderer",
    "TreeRenderer",
    "haml",
    "html",
    "pug",
    "slim",
]
