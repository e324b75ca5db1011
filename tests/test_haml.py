"""Tests for Haml output."""

from markup_output.config import ProfileOptions
from markup_output.nodes import Node, attr, element, root, text
from markup_output.profile import Profile
from markup_output.renderers.haml import haml


def expand(tree: Node, **options) -> str:  # type: ignore[no-untyped-def]
    return haml(tree, Profile(ProfileOptions(**options)))


class TestElements:
    """Elements and attributes."""

    def test_nesting(self) -> None:
        assert expand(root(element("a", element("b")))) == "%a\n\t%b"

    def test_div_shorthand(self) -> None:
        tree = root(element("div", attributes=[attr("id", "main"), attr("class", "a b")]))
        assert expand(tree) == "#main.a.b"

    def test_named_element_shorthand(self) -> None:
        tree = root(element("p", attributes=[attr("class", "note")]))
        assert expand(tree) == "%p.note"

    def test_secondary_attributes(self) -> None:
        tree = root(element("a", attributes=[attr("href", "x"), attr("title", "y")]))
        assert expand(tree) == '%a(href="x" title="y")'

    def test_boolean_attributes(self) -> None:
        tree = root(element("input", attributes=[attr("disabled")], self_closing=True))
        assert expand(tree) == "%input(disabled=true)/"
        assert expand(tree, compact_boolean_attributes=True) == "%input(disabled)/"

    def test_empty_id_skipped(self) -> None:
        tree = root(element("p", attributes=[attr("id", "")]))
        assert expand(tree) == "%p"


class TestText:
    """Text output."""

    def test_element_text(self) -> None:
        assert expand(root(element("p", value="hi"))) == "%p hi"

    def test_multiline_element_text(self) -> None:
        assert expand(root(element("p", value="ab\nc"))) == "%p\n\tab |\n\tc  |"

    def test_multiline_text_node(self) -> None:
        assert expand(root(text("a\nbb"))) == "a  |\nbb |"
