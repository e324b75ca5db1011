"""Tests for Format, OutputNode and the composition pass."""

from markup_output.fields import FieldRenderer
from markup_output.nodes import element, group, root, text
from markup_output.output import Format, OutputNode, compose


def name_visitor(node, fmt, fields):  # type: ignore[no-untyped-def]
    out_node = OutputNode(node, fmt)
    out_node.open = f"<{node.name}>" if node.name else None
    out_node.text = fields(node.value) if node.value else None
    out_node.close = f"</{node.name}>" if node.name else None
    return out_node


class TestFormat:
    """Test fragment wrapping."""

    def test_open(self) -> None:
        assert Format(before_open="<", after_open=">").open("a") == "<a>"

    def test_close(self) -> None:
        assert Format(before_close="</", after_close=">").close("a") == "</a>"

    def test_text_reindents_lines(self) -> None:
        fmt = Format(indent="\t", newline="\n")
        assert fmt.text("a\r\nb\rc\nd") == "a\n\tb\n\tc\n\td"

    def test_text_unformatted_joins_with_spaces(self) -> None:
        assert Format().text("a\r\nb\rc\nd") == "a b c d"

    def test_wrap_trims_only_facing_boundaries(self) -> None:
        fmt = Format()
        assert fmt.wrap("  x  ", "<", "") == "<x  "
        assert fmt.wrap("  x  ", "", ">") == "  x>"
        assert fmt.wrap("  x  ", "<", ">") == "<x>"

    def test_wrap_none(self) -> None:
        assert Format().wrap(None, "<", ">") == ""

    def test_wrap_empty_keeps_boundaries(self) -> None:
        assert Format().wrap("", "\n\t", "") == "\n\t"


class TestOutputNode:
    """Test OutputNode serialization."""

    def test_open(self) -> None:
        out_node = OutputNode(None, Format(before_open="<", after_open=">"))
        out_node.open = "a"
        assert out_node.to_string() == "<a>"

    def test_close(self) -> None:
        out_node = OutputNode(None, Format(before_close="</", after_close=">"))
        out_node.close = "a"
        assert out_node.to_string() == "</a>"

    def test_children_between_text_and_close(self) -> None:
        out_node = OutputNode()
        out_node.open, out_node.text, out_node.close = "<p>", "hi", "</p>"
        assert out_node.to_string("<b></b>") == "<p>hi<b></b></p>"

    def test_empty_node(self) -> None:
        assert OutputNode().to_string() == ""

    def test_repr(self) -> None:
        out_node = OutputNode(element("p"))
        out_node.open = "<p>"
        assert "name='p'" in repr(out_node)


class TestCompose:
    """Test the composition walk."""

    def test_post_order(self) -> None:
        tree = root(element("a", element("b")), element("c"))
        assert compose(tree, name_visitor, FieldRenderer()) == "<a><b></b></a><c></c>"

    def test_groups_unwrap(self) -> None:
        tree = root(element("a", group(element("b"), element("c"))))
        assert compose(tree, name_visitor, FieldRenderer()) == "<a><b></b><c></c></a>"

    def test_none_drops_subtree(self) -> None:
        def visitor(node, fmt, fields):  # type: ignore[no-untyped-def]
            return None if node.name == "b" else name_visitor(node, fmt, fields)

        tree = root(element("a", element("b", element("c"))), element("d"))
        assert compose(tree, visitor, FieldRenderer()) == "<a></a><d></d>"

    def test_parent_fields_number_before_children(self) -> None:
        def tabstop(index: int, placeholder: str = "") -> str:
            return f"[{index}]"

        tree = root(element("a", text("$0"), value="$0"))
        assert compose(tree, name_visitor, FieldRenderer(tabstop)) == "<a>[1][2]</a>"

    def test_formats_applied(self) -> None:
        p = element("p")
        tree = root(element("div", p))
        formats = {p: Format(before_open="\n\t")}
        assert compose(tree, name_visitor, FieldRenderer(), formats) == "<div>\n\t<p></p></div>"
