"""
markup_output — Abbreviation tree to markup output engine

Turns a parsed abbreviation tree (``div>p*3``, ``ul>li.item$*2``) into
formatted markup: HTML/XML, or Pug, Slim and Haml templates. Editor fields
(tabstops) embedded in node text are renumbered consistently across the
whole output.

Quick Start:
    >>> from markup_output import element, render, root
    >>> tree = root(element("div", *(element("p") for _ in range(3))))
    >>> print(render(tree))
    <div>
    	<p></p>
    	<p></p>
    	<p></p>
    </div>

    >>> # Other syntaxes
    >>> render(tree, syntax="pug")
    'div\\n\\tp\\n\\tp\\n\\tp'

Editor Fields:
    >>> from markup_output import RenderOptions
    >>> field = lambda index, placeholder="": f"${{{index}:{placeholder}}}"
    >>> render(root(element("a", value="${1:link}")), options=RenderOptions(field=field))
    '<a>${2:link}</a>'

Configuration:
    >>> from markup_output import ProfileOptions, profile_options_context
    >>> with profile_options_context(ProfileOptions(indent="  ")):
    ...     html = render(tree)
"""

from markup_output.config import (
    ProfileOptions,
    get_profile_options,
    profile_options_context,
    reset_profile_options,
    set_profile_options,
)
from markup_output.errors import MarkupOutputError, ProfileError, RenderError
from markup_output.fields import Field, FieldRenderer, FieldState, FieldString, parse_fields
from markup_output.formatting import Layout, compute_formats
from markup_output.nodes import (
    Attribute,
    AttributeOptions,
    Node,
    attr,
    element,
    group,
    root,
    text,
)
from markup_output.output import Format, OutputNode, compose
from markup_output.profile import Profile
from markup_output.renderers import (
    SYNTAXES,
    HamlRenderer,
    HtmlRenderer,
    PugRenderer,
    RenderOptions,
    SlimRenderer,
    TreeRenderer,
)
from markup_output.serialization import from_dict, from_json, to_dict, to_json
from markup_output.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def render(
    tree: Node,
    profile: Profile | None = None,
    syntax: str = "html",
    options: RenderOptions | None = None,
) -> str:
    """Render an abbreviation tree as markup in the given syntax.

    Args:
        tree: Tree root (its own name and value are not output)
        profile: Output profile (context defaults if None)
        syntax: One of "html", "pug", "slim", "haml"; anything else falls
            back to "html"
        options: Per-call options (field factory, attribute wrap,
            post-processor)

    Returns:
        Rendered markup

    Raises:
        RenderError: If the tree's parent links are inconsistent

    Example:
        >>> render(root(element("p", element("i"), element("i"))))
        '<p><i></i><i></i></p>'
    """
    renderer = SYNTAXES.get(syntax)
    if renderer is None:
        logger.debug("Unknown syntax %r, falling back to html", syntax)
        renderer = SYNTAXES["html"]

    logger.debug("Rendering %s", syntax)
    return renderer(tree, profile, options)


__all__ = [
    # Main API
    "render",
    "__version__",
    # Tree model
    "Attribute",
    "AttributeOptions",
    "Node",
    "attr",
    "element",
    "group",
    "root",
    "text",
    # Profile & configuration
    "Profile",
    "ProfileOptions",
    "get_profile_options",
    "profile_options_context",
    "reset_profile_options",
    "set_profile_options",
    # Output engine
    "Field",
    "FieldRenderer",
    "FieldState",
    "FieldString",
    "Format",
    "Layout",
    "OutputNode",
    "compose",
    "compute_formats",
    "parse_fields",
    # Renderers
    "SYNTAXES",
    "HamlRenderer",
    "HtmlRenderer",
    "PugRenderer",
    "RenderOptions",
    "SlimRenderer",
    "TreeRenderer",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "MarkupOutputError",
    "ProfileError",
    "RenderError",
]
