"""Output profile: formatting preferences consumed by the renderers.

A Profile wraps immutable ProfileOptions and answers the questions the
format pass and the syntax renderers ask: how deep is one indent, how to
quote and case names, which elements are inline, which attributes are
boolean.

Thread Safety:
Profile holds no mutable state after construction. Safe to share.

"""

from __future__ import annotations

from typing import Any

from markup_output.config import ProfileOptions, get_profile_options
from markup_output.nodes import Attribute, Node
from markup_output.utils.text import apply_case

_SELF_CLOSE = {"html": "", "xml": "/", "xhtml": " /"}


class Profile:
    """Output profile.

    Usage:
        >>> from markup_output.nodes import attr
        >>> profile = Profile(ProfileOptions(tag_case="upper"))
        >>> profile.name("div")
        'DIV'
        >>> profile.attribute(attr("disabled", boolean=True))
        'disabled="disabled"'

    Without options, reads the context-local defaults
    (see ``markup_output.config``).

    """

    __slots__ = ("_options", "_quote_char")

    def __init__(self, options: ProfileOptions | None = None) -> None:
        self._options = options if options is not None else get_profile_options()
        self._quote_char = "'" if self._options.attribute_quotes == "single" else '"'

    @classmethod
    def from_dict(cls, config_dict: dict) -> Profile:
        """Create a profile from a settings dictionary."""
        return cls(ProfileOptions.from_dict(config_dict))

    @property
    def options(self) -> ProfileOptions:
        return self._options

    def get(self, option: str, default: Any = None) -> Any:
        """Return option value by name, ``default`` for unknown options."""
        return getattr(self._options, option, default)

    def indent(self, level: int) -> str:
        """Indentation string for the given nesting level."""
        return self._options.indent * max(level, 0)

    def quote(self, text: str) -> str:
        """Quote text with the configured quote character."""
        return f"{self._quote_char}{text}{self._quote_char}"

    def name(self, name: str) -> str:
        """Element name in the configured case."""
        return apply_case(name, self._options.tag_case)

    def attribute(self, attribute: str | Attribute, value: str | None = None) -> str:
        """Format attribute name, or a full ``name="value"`` attribute.

        Given a plain name, returns it in the configured case. Given an
        Attribute, returns its complete markup: empty string for an implied
        attribute without value, ``name`` or ``name="name"`` for booleans,
        ``name="value"`` otherwise. ``value`` overrides the attribute's own
        value (renderers pass the field-rendered text here).
        """
        if isinstance(attribute, str):
            return apply_case(attribute, self._options.attribute_case)

        if attribute.options.implied and attribute.value is None:
            return ""

        name = apply_case(attribute.name, self._options.attribute_case)
        if attribute.value is None and self.is_boolean_attribute(attribute):
            if self._options.compact_boolean_attributes:
                return name
            return f"{name}={self.quote(name)}"

        if value is None:
            value = attribute.value or ""
        return f"{name}={self.quote(value)}"

    def is_inline(self, node: Node | str | None) -> bool:
        """Check if an element name, or node, is inline-level.

        A node is inline when it has an inline-level name, or when it has no
        name and is text-only.
        """
        if node is None:
            return False
        if isinstance(node, str):
            return node.lower() in self._options.inline_elements
        if node.name:
            return self.is_inline(node.name)
        return node.is_text_only

    def is_boolean_attribute(self, attribute: Attribute) -> bool:
        return (
            attribute.options.boolean
            or attribute.name.lower() in self._options.boolean_attributes
        )

    def self_close(self) -> str:
        """Closing mark for self-closing tags (``""``, ``"/"`` or ``" /"``)."""
        return _SELF_CLOSE[self._options.self_closing_style]

    def field(self, index: int, placeholder: str = "") -> str:
        """Output a field (tabstop) through the configured factory."""
        return self._options.field(index, placeholder)

    def __repr__(self) -> str:
        return f"Profile({self._options!r})"
