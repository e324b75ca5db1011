"""Tests for the error hierarchy."""

import pytest

from markup_output import MarkupOutputError, ProfileError, RenderError, render
from markup_output.config import ProfileOptions
from markup_output.nodes import element, root


class TestHierarchy:
    """All package errors share a base class."""

    def test_render_error(self) -> None:
        err = RenderError("broken", "div")
        assert isinstance(err, MarkupOutputError)
        assert err.node_name == "div"
        assert str(err) == "broken (node 'div')"

    def test_render_error_without_name(self) -> None:
        assert str(RenderError("broken")) == "broken"

    def test_profile_error(self) -> None:
        err = ProfileError("tag_case", "title", "expected lower or upper")
        assert isinstance(err, MarkupOutputError)
        assert isinstance(err, ValueError)
        assert "tag_case" in str(err)
        assert "'title'" in str(err)


class TestRaised:
    """Errors surface from the public API."""

    def test_render_broken_tree(self) -> None:
        p = element("p")
        tree = root(element("div", p))
        p.parent = tree
        with pytest.raises(RenderError):
            render(tree)

    @pytest.mark.parametrize("syntax", ["html", "pug", "slim", "haml"])
    def test_no_partial_output(self, syntax: str) -> None:
        p = element("p")
        tree = root(element("div"), element("div", p))
        p.parent = None
        with pytest.raises(MarkupOutputError):
            render(tree, syntax=syntax)

    def test_invalid_profile(self) -> None:
        with pytest.raises(MarkupOutputError):
            ProfileOptions(self_closing_style="sgml")
