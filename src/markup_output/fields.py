"""Fields (tabstops) in node text and their tree-wide numbering.

Node values and attribute values may embed editor fields:

- ``$1`` or ``${1}``: field 1 with no placeholder
- ``${1:placeholder}``: field 1 with placeholder text (braces inside the
  placeholder must be balanced)
- ``\\$``, ``\\{``, ``\\}``, ``\\\\``: literal characters

Most editors link all fields sharing an index, so indices written locally
in each node must not collide across the rendered tree. FieldRenderer
offsets every node's indices by a single FieldState counter that only moves
forward during one render call.

Example:
    >>> renderer = FieldRenderer(lambda i, p="": f"${{{i}:{p}}}" if p else f"${{{i}}}")
    >>> renderer("${0} ${1:foo}")
    '${1} ${2:foo}'
    >>> renderer("${0} ${1:foo}")
    '${3} ${4:foo}'
    >>> renderer(None)
    '${5}'

Thread Safety:
    parse_fields() is pure. A FieldRenderer carries the mutable counter of
    exactly one render call; renderers create a fresh one per call.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from markup_output.config import default_field
from markup_output.stringbuilder import StringBuilder

FieldFactory = Callable[..., str]

_DIGITS = re.compile(r"\d+")
_ESCAPABLE = frozenset("$\\{}")


@dataclass(frozen=True, slots=True)
class Field:
    """Field found in text.

    Attributes:
        index: Field index as written (node-local until offset)
        placeholder: Placeholder text, empty if none
        location: Offset of the placeholder in the cleaned string

    """

    index: int
    placeholder: str
    location: int

    @property
    def length(self) -> int:
        return len(self.placeholder)

    @property
    def end(self) -> int:
        return self.location + len(self.placeholder)


@dataclass(frozen=True, slots=True)
class FieldString:
    """Text with field markers replaced by their placeholders."""

    string: str
    fields: tuple[Field, ...] = ()

    def mark(self, token: FieldFactory) -> str:
        """Replace every field's placeholder with ``token(index, placeholder)``.

        Fields are emitted in location order.
        """
        ordered = sorted(enumerate(self.fields), key=lambda item: (item[1].end, item[0]))
        sb = StringBuilder()
        offset = 0
        for _, fld in ordered:
            sb.append(self.string[offset : fld.location])
            sb.append(token(fld.index, self.string[fld.location : fld.end]))
            offset = fld.end
        sb.append(self.string[offset:])
        return sb.build()

    def lowest_field(self) -> Field | None:
        """Field with the lowest index (first one wins on ties)."""
        result: Field | None = None
        for fld in self.fields:
            if result is None or fld.index < result.index:
                result = fld
        return result

    def split(self, fld: Field) -> tuple[FieldString, FieldString]:
        """Split around ``fld``, dropping it.

        Returns:
            (text before the field, text after the field)
        """
        ix = self.fields.index(fld)
        left = FieldString(self.string[: fld.location], self.fields[:ix])
        right = FieldString(
            self.string[fld.end :],
            tuple(
                Field(f.index, f.placeholder, f.location - fld.end)
                for f in self.fields[ix + 1 :]
            ),
        )
        return left, right


def parse_fields(text: str) -> FieldString:
    """Find fields in text.

    Example:
        >>> model = parse_fields("a ${1:b} c $2")
        >>> model.string
        'a b c '
        >>> [(f.index, f.placeholder, f.location) for f in model.fields]
        [(1, 'b', 2), (2, '', 6)]
    """
    parts: list[str] = []
    fields: list[Field] = []
    length = 0
    pos = 0
    end = len(text)

    while pos < end:
        ch = text[pos]
        if ch == "\\" and pos + 1 < end and text[pos + 1] in _ESCAPABLE:
            parts.append(text[pos + 1])
            length += 1
            pos += 2
            continue

        if ch == "$":
            consumed = _consume_field(text, pos)
            if consumed is not None:
                index, placeholder, pos = consumed
                fields.append(Field(index, placeholder, length))
                parts.append(placeholder)
                length += len(placeholder)
                continue

        parts.append(ch)
        length += 1
        pos += 1

    return FieldString("".join(parts), tuple(fields))


def _consume_field(text: str, pos: int) -> tuple[int, str, int] | None:
    """Consume field at ``pos`` (pointing at ``$``).

    Returns:
        (index, placeholder, position after the field), or None if there
        is no well-formed field here.
    """
    pos += 1
    m = _DIGITS.match(text, pos)
    if m:
        return int(m.group()), "", m.end()

    if not text.startswith("{", pos):
        return None

    m = _DIGITS.match(text, pos + 1)
    if not m:
        return None

    index = int(m.group())
    pos = m.end()
    placeholder = ""
    if text.startswith(":", pos):
        consumed = _consume_placeholder(text, pos + 1)
        if consumed is None:
            return None
        placeholder, pos = consumed

    if not text.startswith("}", pos):
        return None
    return index, placeholder, pos + 1


def _consume_placeholder(text: str, pos: int) -> tuple[str, int] | None:
    """Consume placeholder up to the brace closing the field."""
    parts: list[str] = []
    depth = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch == "\\" and pos + 1 < end and text[pos + 1] in _ESCAPABLE:
            parts.append(text[pos + 1])
            pos += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            if not depth:
                return "".join(parts), pos
            depth -= 1
        parts.append(ch)
        pos += 1
    return None


@dataclass(slots=True)
class FieldState:
    """Next free field index of one render call."""

    index: int = 1


class FieldRenderer:
    """Render node text with tree-wide field numbering.

    Calling the renderer parses fields in the given text, shifts their
    indices past everything emitted so far and outputs them through the
    field factory. Empty text outputs a single fresh field.

    """

    __slots__ = ("_field", "state")

    def __init__(self, field: FieldFactory | None = None, state: FieldState | None = None) -> None:
        """Initialize renderer.

        Args:
            field: Factory ``field(index, placeholder) -> str``
            state: Counter to continue from (a fresh one starting at 1 if None)
        """
        self._field = field or default_field
        self.state = state if state is not None else FieldState()

    def __call__(self, text: str | None) -> str:
        if not text:
            index = self.state.index
            self.state.index += 1
            return self._field(index, "")
        return self.mark(parse_fields(text))

    def mark(self, model: FieldString) -> str:
        """Output a parsed text, allocating global indices for its fields."""
        return self._allocate(model).mark(self._field)

    def split(self, text: str) -> tuple[str, str] | None:
        """Render text as a pseudo-snippet wrapping its children.

        The field with the lowest index marks where children go: text before
        it is rendered as the opening part, text after it as the closing part.

        Returns:
            (open, close), or None when text contains no fields
        """
        model = parse_fields(text)
        lowest = model.lowest_field()
        if lowest is None:
            return None
        ix = model.fields.index(lowest)
        model = self._allocate(model)
        left, right = model.split(model.fields[ix])
        return left.mark(self._field), right.mark(self._field)

    def _allocate(self, model: FieldString) -> FieldString:
        if not model.fields:
            return model

        base = self.state.index
        shifted = tuple(
            Field(f.index + base, f.placeholder, f.location) for f in model.fields
        )
        self.state.index = max(self.state.index, max(f.index for f in shifted) + 1)
        return FieldString(model.string, shifted)
