"""Tests for the selector facade entry points."""

import pytest

from object_tasks.selector import (
    Combinator,
    DuplicateViolation,
    OrderViolation,
    SelectorBuilder,
    facade,
)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    @pytest.mark.parametrize(
        "name, value, expected",
        [
            ("element", "div", "div"),
            ("id", "main", "#main"),
            ("class_", "container", ".container"),
            ("attr", "type=text", "[type=text]"),
            ("pseudo_class", "hover", ":hover"),
            ("pseudo_element", "before", "::before"),
        ],
    )
    def test_single_fragment(self, name: str, value: str, expected: str) -> None:
        builder = getattr(facade, name)(value)
        assert isinstance(builder, SelectorBuilder)
        assert builder.stringify() == expected

    def test_class_reachable_by_css_name(self) -> None:
        builder = getattr(facade, "class")("container").class_("wide")
        assert isinstance(builder, SelectorBuilder)
        assert builder.stringify() == ".container.wide"

    def test_unknown_name_still_raises(self) -> None:
        with pytest.raises(AttributeError):
            facade.pseudoClass  # noqa: B018

    def test_each_call_builds_fresh_instance(self) -> None:
        first = facade.element("div")
        second = facade.element("span")
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_id_chain(self) -> None:
        result = facade.id("main").class_("container").class_("editable")
        assert result.stringify() == "#main.container.editable"

    def test_element_chain(self) -> None:
        result = facade.element("a").attr('href$=".png"').pseudo_class("focus")
        assert result.stringify() == 'a[href$=".png"]:focus'

    def test_chain_violations(self) -> None:
        with pytest.raises(DuplicateViolation):
            facade.element("div").element("span")
        with pytest.raises(OrderViolation):
            facade.pseudo_class("hover").attr("href")


# ---------------------------------------------------------------------------
# Combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_combine_two(self) -> None:
        a = facade.element("div").id("main")
        b = facade.element("p").class_("intro")
        result = facade.combine(a, "+", b)
        assert result.stringify() == f"{a.stringify()} + {b.stringify()}"

    def test_combine_returns_new_builder(self) -> None:
        a = facade.element("div")
        b = facade.element("p")
        result = facade.combine(a, ">", b)
        assert result is not a and result is not b
        assert a.stringify() == "div"

    def test_nested_combine(self) -> None:
        x = facade.element("h1")
        y = facade.element("h2")
        z = facade.element("h3")
        result = facade.combine(facade.combine(x, "~", y), "+", z)
        assert result.stringify() == "h1 ~ h2 + h3"

    def test_combinator_enum(self) -> None:
        result = facade.combine(
            facade.element("ul"), Combinator.CHILD, facade.element("li")
        )
        assert result.stringify() == "ul > li"

    def test_deeply_nested(self) -> None:
        result = facade.combine(
            facade.element("div").id("main").class_("container").class_("draggable"),
            "+",
            facade.combine(
                facade.element("table").id("data"),
                "~",
                facade.combine(
                    facade.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    facade.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )
