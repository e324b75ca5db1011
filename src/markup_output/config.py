"""ContextVar-based output profile configuration for markup_output.

Provides thread-local defaults using Python's ContextVars (PEP 567).
``Profile()`` without explicit options reads the options active in the
current context, so an editor host can set preferences once per request.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and concurrent renders never see each other's options.

Usage:
    # Explicit options
    profile = Profile(ProfileOptions(inline_break=0, tag_case="upper"))

    # Context-wide defaults
    with profile_options_context(ProfileOptions(indent="  ")):
        html = render(tree)  # uses two-space indent

    # From editor settings (camelCase keys accepted)
    options = ProfileOptions.from_dict({"selfClosingStyle": "xhtml"})

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields

from markup_output.errors import ProfileError

INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a", "abbr", "acronym", "applet", "b", "basefont", "bdo", "big", "br",
        "button", "cite", "code", "del", "dfn", "em", "font", "i", "iframe",
        "img", "input", "ins", "kbd", "label", "map", "object", "q", "s",
        "samp", "select", "small", "span", "strike", "strong", "sub", "sup",
        "textarea", "tt", "u", "var",
    }
)  # fmt: skip

BOOLEAN_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "contenteditable", "seamless", "async", "autofocus", "autoplay",
        "checked", "controls", "defer", "disabled", "formnovalidate", "hidden",
        "ismap", "loop", "multiple", "muted", "novalidate", "readonly",
        "required", "reversed", "selected", "typemustmatch",
    }
)  # fmt: skip

_CASES = ("", "lower", "upper")
_QUOTES = ("double", "single")
_SELF_CLOSING_STYLES = ("html", "xml", "xhtml")

_SET_FIELDS = {"format_skip", "format_force", "inline_elements", "boolean_attributes"}
_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def default_field(index: int, placeholder: str = "") -> str:
    """Default field output: just the placeholder, no tabstop markup."""
    return placeholder or ""


@dataclass(frozen=True, slots=True)
class ProfileOptions:
    """Immutable output profile options.

    Attributes:
        indent: String for one indentation level
        tag_case: Element name case: "" (as-is), "lower" or "upper"
        attribute_case: Attribute name case: "" (as-is), "lower" or "upper"
        attribute_quotes: "double" or "single"
        format: Enable indentation and line breaks in tag-based output
        format_skip: Element names whose children are not indented
        format_force: Element names whose contents always go on new lines
        inline_break: Number of adjacent inline siblings that forces line
            breaks (0 disables)
        compact_boolean_attributes: Output ``disabled`` instead of
            ``disabled="disabled"``
        self_closing_style: "html" (``<br>``), "xml" (``<br/>``) or
            "xhtml" (``<br />``)
        inline_elements: Element names treated as inline-level
        boolean_attributes: Attribute names treated as boolean
        field: Tabstop factory ``field(index, placeholder) -> str``

    """

    indent: str = "\t"
    tag_case: str = ""
    attribute_case: str = ""
    attribute_quotes: str = "double"
    format: bool = True
    format_skip: frozenset[str] = frozenset({"html"})
    format_force: frozenset[str] = frozenset({"body"})
    inline_break: int = 3
    compact_boolean_attributes: bool = False
    self_closing_style: str = "html"
    inline_elements: frozenset[str] = INLINE_ELEMENTS
    boolean_attributes: frozenset[str] = BOOLEAN_ATTRIBUTES
    field: Callable[..., str] = field(default=default_field, compare=False)

    def __post_init__(self) -> None:
        if self.tag_case not in _CASES:
            raise ProfileError("tag_case", self.tag_case, f"expected one of {_CASES}")
        if self.attribute_case not in _CASES:
            raise ProfileError(
                "attribute_case", self.attribute_case, f"expected one of {_CASES}"
            )
        if self.attribute_quotes not in _QUOTES:
            raise ProfileError(
                "attribute_quotes", self.attribute_quotes, f"expected one of {_QUOTES}"
            )
        if self.self_closing_style not in _SELF_CLOSING_STYLES:
            raise ProfileError(
                "self_closing_style",
                self.self_closing_style,
                f"expected one of {_SELF_CLOSING_STYLES}",
            )
        if self.inline_break < 0:
            raise ProfileError("inline_break", self.inline_break, "must be 0 or positive")

        # Name sets may arrive as lists from editor settings
        for name in _SET_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                object.__setattr__(self, name, _name_set(value))

    @classmethod
    def from_dict(cls, config_dict: dict) -> ProfileOptions:
        """Create ProfileOptions from dictionary.

        Keys may be snake_case attribute names or the camelCase spelling
        used by editor settings (``inlineBreak``, ``selfClosingStyle``).
        Unknown keys are silently ignored; ``None`` values keep the default.
        The legacy ``"asis"`` case value means "keep as-is".

        Example:
            >>> options = ProfileOptions.from_dict({
            ...     "inlineBreak": 0,
            ...     "formatSkip": ["html", "head"],
            ...     "unknown_key": "ignored",
            ... })
            >>> options.inline_break
            0

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {}
        for key, value in config_dict.items():
            name = _CAMEL_RE.sub("_", key).lower()
            if name not in valid_fields or value is None:
                continue
            if name in ("tag_case", "attribute_case") and value == "asis":
                value = ""
            filtered[name] = value
        return cls(**filtered)


def _name_set(names: Iterable[str] | str) -> frozenset[str]:
    if isinstance(names, str):
        names = names.replace(",", " ").split()
    return frozenset(name.lower() for name in names)


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: ProfileOptions = ProfileOptions()

# Thread-local options via ContextVar
_profile_options: ContextVar[ProfileOptions] = ContextVar(
    "profile_options",
    default=_DEFAULT_OPTIONS,
)


def get_profile_options() -> ProfileOptions:
    """Get the profile options active in the current context."""
    return _profile_options.get()


def set_profile_options(options: ProfileOptions) -> None:
    """Set profile options for the current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _profile_options.set(options)


def reset_profile_options() -> None:
    """Reset the current context to the default options."""
    _profile_options.set(_DEFAULT_OPTIONS)


@contextmanager
def profile_options_context(options: ProfileOptions) -> Iterator[None]:
    """Context manager for temporary profile option changes.

    Example:
        >>> from markup_output.profile import Profile
        >>> with profile_options_context(ProfileOptions(indent="  ")):
        ...     Profile().indent(2)
        '    '

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        options even if an exception is raised.

    """
    previous = _profile_options.get()
    _profile_options.set(options)
    try:
        yield
    finally:
        _profile_options.set(previous)


__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "INLINE_ELEMENTS",
    "ProfileOptions",
    "default_field",
    "get_profile_options",
    "profile_options_context",
    "reset_profile_options",
    "set_profile_options",
]
