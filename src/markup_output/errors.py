"""Exception classes for markup_output.

Rendering is total over well-formed trees, so only caller contract
violations and invalid configuration surface as errors.
"""

from __future__ import annotations


class MarkupOutputError(Exception):
    """Base exception for all markup_output errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MarkupOutputError):
    """Malformed abbreviation tree detected during a render walk.

    Raised when a child's ``parent`` reference does not point back to the
    node that owns it, or when the tree contains a cycle.
    """

    def __init__(self, message: str, node_name: str | None = None) -> None:
        """Initialize render error.

        Args:
            message: Description of the violated precondition
            node_name: Name of the offending node, if it has one
        """
        self.message = message
        self.node_name = node_name

        location = f" (node '{node_name}')" if node_name else ""
        super().__init__(f"{message}{location}")


class ProfileError(MarkupOutputError, ValueError):
    """Invalid output profile option.

    Raised when an option has a value outside its documented set,
    e.g. ``tag_case="title"`` or a negative ``inline_break``.
    """

    def __init__(self, option: str, value: object, message: str) -> None:
        """Initialize profile error.

        Args:
            option: Option name (e.g., "attribute_quotes")
            value: The rejected value
            message: Description of the accepted values
        """
        self.option = option
        self.value = value
        super().__init__(f"Profile option '{option}'={value!r}: {message}")
