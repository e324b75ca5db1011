"""Tests for the output Profile."""

import pytest

from markup_output.config import ProfileOptions, profile_options_context
from markup_output.nodes import attr, element, text
from markup_output.profile import Profile


def make(**options) -> Profile:  # type: ignore[no-untyped-def]
    return Profile(ProfileOptions(**options))


class TestNames:
    """Tag and attribute name casing."""

    @pytest.mark.parametrize(
        ("case", "expected"),
        [("", ["Foo", "bAr"]), ("upper", ["FOO", "BAR"]), ("lower", ["foo", "bar"])],
    )
    def test_tag_name(self, case: str, expected: list[str]) -> None:
        profile = make(tag_case=case)
        assert [profile.name("Foo"), profile.name("bAr")] == expected

    @pytest.mark.parametrize(
        ("case", "expected"),
        [("", ["Foo", "bAr"]), ("upper", ["FOO", "BAR"]), ("lower", ["foo", "bar"])],
    )
    def test_attribute_name(self, case: str, expected: list[str]) -> None:
        profile = make(attribute_case=case)
        assert [profile.attribute("Foo"), profile.attribute("bAr")] == expected


class TestAttributes:
    """Full attribute output."""

    def test_full_attribute(self) -> None:
        profile = make()
        assert profile.attribute(attr("foo", "bar")) == 'foo="bar"'
        assert profile.attribute(attr("Foo", "bAr")) == 'Foo="bAr"'
        assert profile.attribute(attr("foo")) == 'foo=""'

    def test_value_override(self) -> None:
        assert make().attribute(attr("foo", "bar"), "baz") == 'foo="baz"'

    def test_boolean(self) -> None:
        assert make().attribute(attr("foo", boolean=True)) == 'foo="foo"'
        compact = make(compact_boolean_attributes=True)
        assert compact.attribute(attr("foo", boolean=True)) == "foo"

    def test_boolean_by_name(self) -> None:
        assert make(compact_boolean_attributes=True).attribute(attr("checked")) == "checked"

    def test_boolean_with_value_is_regular(self) -> None:
        assert make().attribute(attr("checked", "yes")) == 'checked="yes"'

    def test_implied(self) -> None:
        profile = make(attribute_case="lower")
        assert profile.attribute(attr("foo", implied=True)) == ""
        assert profile.attribute(attr("foo", "", implied=True)) == 'foo=""'
        assert profile.attribute(attr("foo", "bar", implied=True)) == 'foo="bar"'

    def test_single_quotes(self) -> None:
        assert make(attribute_quotes="single").quote("x") == "'x'"


class TestQueries:
    """Inline, boolean and formatting queries."""

    def test_is_inline_name(self) -> None:
        profile = make()
        assert profile.is_inline("span")
        assert profile.is_inline("SPAN")
        assert not profile.is_inline("div")

    def test_is_inline_node(self) -> None:
        profile = make()
        assert profile.is_inline(element("b"))
        assert profile.is_inline(text("hello"))
        assert not profile.is_inline(element("p"))
        assert not profile.is_inline(None)

    def test_custom_inline_elements(self) -> None:
        profile = make(inline_elements=["x-icon"])
        assert profile.is_inline("x-icon")
        assert not profile.is_inline("span")

    def test_indent(self) -> None:
        profile = make(indent="  ")
        assert profile.indent(0) == ""
        assert profile.indent(2) == "    "
        assert profile.indent(-1) == ""

    @pytest.mark.parametrize(("style", "mark"), [("html", ""), ("xml", "/"), ("xhtml", " /")])
    def test_self_close(self, style: str, mark: str) -> None:
        assert make(self_closing_style=style).self_close() == mark

    def test_get(self) -> None:
        profile = make(inline_break=0)
        assert profile.get("inline_break") == 0
        assert profile.get("missing", "fallback") == "fallback"

    def test_field(self) -> None:
        assert make().field(1, "x") == "x"
        assert make(field=lambda i, p="": f"<{i}>").field(3) == "<3>"


class TestConstruction:
    """Profile creation."""

    def test_context_defaults(self) -> None:
        with profile_options_context(ProfileOptions(indent="    ")):
            assert Profile().indent(1) == "    "
        assert Profile().indent(1) == "\t"

    def test_from_dict(self) -> None:
        profile = Profile.from_dict({"tagCase": "upper"})
        assert profile.name("a") == "A"

    def test_repr(self) -> None:
        assert repr(make()).startswith("Profile(ProfileOptions(")
