"""Tests for Slim output."""

import pytest

from markup_output.config import ProfileOptions
from markup_output.nodes import Node, attr, element, root, text
from markup_output.profile import Profile
from markup_output.renderers.protocol import RenderOptions
from markup_output.renderers.slim import slim


def expand(tree: Node, wrap: str = "none", **options) -> str:  # type: ignore[no-untyped-def]
    return slim(tree, Profile(ProfileOptions(**options)), RenderOptions(attribute_wrap=wrap))


class TestElements:
    """Elements and attributes."""

    def test_nesting(self) -> None:
        assert expand(root(element("a", element("b")))) == "a\n\tb"

    def test_shorthand(self) -> None:
        tree = root(element("div", attributes=[attr("id", "main"), attr("class", "a b")]))
        assert expand(tree) == "#main.a.b"

    @pytest.mark.parametrize(
        ("wrap", "expected"),
        [
            ("none", 'a href="x" title="y"'),
            ("round", 'a(href="x" title="y")'),
            ("curly", 'a{href="x" title="y"}'),
            ("square", 'a[href="x" title="y"]'),
        ],
    )
    def test_attribute_wrap(self, wrap: str, expected: str) -> None:
        tree = root(element("a", attributes=[attr("href", "x"), attr("title", "y")]))
        assert expand(tree, wrap) == expected

    def test_boolean_unwrapped(self) -> None:
        tree = root(element("input", attributes=[attr("disabled")], self_closing=True))
        assert expand(tree) == "input disabled=true/"

    def test_boolean_wrapped(self) -> None:
        tree = root(element("input", attributes=[attr("disabled")], self_closing=True))
        assert expand(tree, "round") == "input(disabled)/"

    def test_invalid_wrap(self) -> None:
        with pytest.raises(ValueError, match="attribute_wrap"):
            RenderOptions(attribute_wrap="angle")


class TestInlineNesting:
    """Lone inline children nested with ``:``."""

    def test_nested_on_parent_line(self) -> None:
        tree = root(element("ul", element("li", element("a"))))
        assert expand(tree, inline_break=0) == "ul\n\tli: a"

    def test_default_profile_keeps_lines(self) -> None:
        tree = root(element("ul", element("li", element("a"))))
        assert expand(tree) == "ul\n\tli\n\t\ta"

    def test_parent_with_text_keeps_lines(self) -> None:
        tree = root(element("li", element("a"), value="x"))
        assert expand(tree, inline_break=0) == "li x\n\ta"


class TestText:
    """Text output."""

    def test_element_text(self) -> None:
        assert expand(root(element("p", value="hi"))) == "p hi"

    def test_multiline_element_text(self) -> None:
        assert expand(root(element("span", value="a\nb"))) == "span\n\t| a\n\t  b"

    def test_nested_text_node(self) -> None:
        assert expand(root(element("p", text("a\nb")))) == "p\n\t| a\n\t  b"

    def test_top_level_text(self) -> None:
        assert expand(root(text("plain"))) == "plain"


class TestInlineNestingText:
    """Text children are never nested with ``:``."""

    def test_lone_text_child_on_own_line(self) -> None:
        tree = root(element("li", text("hi")))
        assert expand(tree, inline_break=0) == "li\n\t| hi"

    def test_lone_element_child_still_nested(self) -> None:
        tree = root(element("li", element("b")))
        assert expand(tree, inline_break=0) == "li: b"
