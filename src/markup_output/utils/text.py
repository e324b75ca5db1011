"""Text helpers shared by the output engine and the syntax renderers."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text on any line break style (``\\r\\n``, ``\\r`` or ``\\n``).

    Examples:
        >>> split_lines("a\\r\\nb\\rc\\nd")
        ['a', 'b', 'c', 'd']
        >>> split_lines("")
        ['']
    """
    return _LINE_BREAK.split(text)


def is_multiline(text: str | None) -> bool:
    """Check if text contains a line break."""
    return bool(text) and _LINE_BREAK.search(text) is not None


def apply_case(text: str, case: str) -> str:
    """Change case of text: ``"upper"``, ``"lower"``, anything else keeps it."""
    if case == "upper":
        return text.upper()
    if case == "lower":
        return text.lower()
    return text
