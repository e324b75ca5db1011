"""Tests for markup_output.serialization: tree JSON round-trip."""

import json

import pytest

from markup_output import render
from markup_output.nodes import attr, element, group, root, text
from markup_output.serialization import from_dict, from_json, to_dict, to_json


def _sample():  # type: ignore[no-untyped-def]
    return root(
        element(
            "ul",
            group(
                element("li", value="${1:one}", attributes=[attr("class", "item")]),
                element("li", attributes=[attr("title", implied=True)]),
            ),
            attributes=[attr("id", "nav")],
        ),
        element("input", attributes=[attr("disabled", boolean=True)], self_closing=True),
        text("<!-- $0 -->", element("b")),
    )


class TestToDict:
    """Dict output."""

    def test_defaults_omitted(self) -> None:
        assert to_dict(element("p")) == {"name": "p"}

    def test_full_node(self) -> None:
        data = to_dict(element("input", attributes=[attr("x", "1", implied=True)], self_closing=True))
        assert data == {
            "name": "input",
            "attributes": [{"name": "x", "value": "1", "implied": True}],
            "self_closing": True,
        }

    def test_parent_not_serialized(self) -> None:
        assert "parent" not in json.dumps(to_dict(_sample()))


class TestRoundTrip:
    """Loaded trees render like the originals."""

    @pytest.mark.parametrize("syntax", ["html", "pug", "slim", "haml"])
    def test_render_equivalent(self, syntax: str) -> None:
        tree = _sample()
        assert render(from_dict(to_dict(tree)), syntax=syntax) == render(tree, syntax=syntax)

    def test_json(self) -> None:
        tree = _sample()
        assert to_dict(from_json(to_json(tree))) == to_dict(tree)

    def test_parent_links_rebuilt(self) -> None:
        restored = from_dict(to_dict(_sample()))
        for node, _ in restored.walk():
            assert node in node.parent.children

    def test_json_deterministic(self) -> None:
        assert to_json(_sample()) == to_json(_sample())

    def test_json_indent(self) -> None:
        assert "\n" in to_json(_sample(), indent=2)


class TestErrors:
    """Malformed input."""

    def test_not_a_dict(self) -> None:
        with pytest.raises(ValueError, match="Expected node dict"):
            from_dict(["div"])  # type: ignore[arg-type]

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError, match="Unknown node fields"):
            from_dict({"name": "div", "tag": "p"})

    def test_bad_attribute(self) -> None:
        with pytest.raises(ValueError, match="Attribute"):
            from_dict({"name": "div", "attributes": [{"value": "x"}]})

    def test_invalid_json(self) -> None:
        with pytest.raises(ValueError):
            from_json("{not json")
