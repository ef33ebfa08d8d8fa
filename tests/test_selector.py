"""Tests for Selector chaining, rendering and validation."""

import pytest

from cssbuilder import FragmentKind, Selector, ValidationError
from cssbuilder import css_selector_builder as builder

# =========================================================================
# Rendering
# =========================================================================


class TestRendering:
    """Each fragment kind renders with its own prefix and no separators."""

    def test_element(self) -> None:
        assert builder.element("div").stringify() == "div"

    def test_id(self) -> None:
        assert builder.id("main").stringify() == "#main"

    def test_class(self) -> None:
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self) -> None:
        assert builder.attr("href").stringify() == "[href]"

    def test_pseudo_class(self) -> None:
        assert builder.pseudo_class("hover").stringify() == ":hover"

    def test_pseudo_element(self) -> None:
        assert builder.pseudo_element("before").stringify() == "::before"

    def test_id_with_classes(self) -> None:
        result = builder.id("main").class_("container").class_("editable").stringify()
        assert result == "#main.container.editable"

    def test_element_attr_pseudo_class(self) -> None:
        result = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        assert result == 'a[href$=".png"]:focus'

    def test_full_compound(self) -> None:
        result = (
            builder.element("li")
            .id("item")
            .class_("active")
            .attr("data-x")
            .pseudo_class("first-child")
            .pseudo_element("after")
            .stringify()
        )
        assert result == "li#item.active[data-x]:first-child::after"

    def test_str_matches_stringify(self) -> None:
        selector = builder.element("p").class_("lead")
        assert str(selector) == selector.stringify() == "p.lead"

    def test_repr(self) -> None:
        assert repr(builder.element("p")) == "Selector('p')"

    def test_stringify_is_repeatable(self) -> None:
        selector = builder.element("p")
        assert selector.stringify() == selector.stringify()


# =========================================================================
# Chaining
# =========================================================================


class TestChaining:
    """Fragment methods mutate and return the same instance."""

    def test_returns_self(self) -> None:
        selector = builder.element("div")
        assert selector.id("main") is selector
        assert selector.class_("a") is selector

    def test_repeatable_kinds(self) -> None:
        result = (
            builder.element("input")
            .class_("a")
            .class_("b")
            .attr("type=text")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_class("valid")
            .stringify()
        )
        assert result == "input.a.b[type=text][required]:focus:valid"

    def test_extend_after_stringify(self) -> None:
        selector = builder.element("div")
        assert selector.stringify() == "div"
        selector.class_("late")
        assert selector.stringify() == "div.late"

    def test_independent_chains(self) -> None:
        a = builder.element("div")
        b = builder.element("span")
        a.class_("x")
        assert b.stringify() == "span"
        b.id("y")
        assert a.stringify() == "div.x"

    def test_skipping_kinds_is_allowed(self) -> None:
        assert builder.element("a").pseudo_class("hover").stringify() == "a:hover"

    def test_empty_selector(self) -> None:
        selector = Selector()
        assert selector.stringify() == ""
        assert len(selector) == 0
        assert selector.element("div").stringify() == "div"


# =========================================================================
# Cardinality
# =========================================================================


class TestCardinality:
    """element, id and pseudo-element occur at most once."""

    def test_element_twice(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            builder.element("div").element("span")
        assert exc_info.value.rule == ValidationError.CARDINALITY
        assert exc_info.value.kind is FragmentKind.ELEMENT

    def test_id_twice(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            builder.element("div").id("main").id("x")
        assert exc_info.value.rule == ValidationError.CARDINALITY
        assert exc_info.value.kind is FragmentKind.ID

    def test_pseudo_element_twice(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            builder.pseudo_element("before").pseudo_element("after")
        assert exc_info.value.rule == ValidationError.CARDINALITY
        assert exc_info.value.kind is FragmentKind.PSEUDO_ELEMENT

    def test_message_mentions_once(self) -> None:
        with pytest.raises(ValidationError, match="more than one time"):
            builder.id("a").id("b")


# =========================================================================
# Ordering
# =========================================================================


class TestOrdering:
    """No kind may follow a kind that comes later in canonical order."""

    def test_id_after_attr(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            builder.attr("href").id("x")
        assert exc_info.value.rule == ValidationError.ORDER
        assert exc_info.value.kind is FragmentKind.ID

    def test_class_after_attr(self) -> None:
        with pytest.raises(ValidationError, match="order"):
            builder.attr("href").class_("x")

    def test_element_after_id(self) -> None:
        with pytest.raises(ValidationError):
            builder.id("main").element("div")

    def test_element_after_class(self) -> None:
        with pytest.raises(ValidationError):
            builder.class_("x").element("div")

    def test_attr_after_pseudo_class(self) -> None:
        with pytest.raises(ValidationError):
            builder.pseudo_class("hover").attr("href")

    @pytest.mark.parametrize(
        "method",
        ["element", "id", "class_", "attr", "pseudo_class"],
    )
    def test_nothing_after_pseudo_element(self, method: str) -> None:
        selector = builder.pseudo_element("before")
        with pytest.raises(ValidationError) as exc_info:
            getattr(selector, method)("x")
        assert exc_info.value.rule == ValidationError.ORDER

    def test_order_checked_before_cardinality(self) -> None:
        """A repeated single kind that is also out of order reports ordering."""
        with pytest.raises(ValidationError) as exc_info:
            builder.element("div").class_("a").element("span")
        assert exc_info.value.rule == ValidationError.ORDER

    def test_message_lists_canonical_order(self) -> None:
        with pytest.raises(ValidationError, match="element, id, class, attribute"):
            builder.pseudo_class("hover").class_("x")


# =========================================================================
# State after failure
# =========================================================================


class TestFailureLeavesStateIntact:
    """The rejected fragment is never appended."""

    def test_fragments_unchanged(self) -> None:
        selector = builder.element("div").id("main")
        with pytest.raises(ValidationError):
            selector.id("x")
        assert selector.fragments == ("div", "#main")
        assert selector.stringify() == "div#main"
        assert selector.count(FragmentKind.ID) == 1

    def test_chain_continues_after_failure(self) -> None:
        selector = builder.element("div")
        with pytest.raises(ValidationError):
            selector.element("span")
        assert selector.class_("ok").stringify() == "div.ok"


# =========================================================================
# Inspection
# =========================================================================


class TestInspection:
    """fragments, count() and furthest_kind."""

    def test_fragments_in_call_order(self) -> None:
        selector = builder.element("a").class_("x").class_("y")
        assert selector.fragments == ("a", ".x", ".y")
        assert len(selector) == 3

    def test_counts(self) -> None:
        selector = builder.element("a").class_("x").class_("y")
        assert selector.count(FragmentKind.ELEMENT) == 1
        assert selector.count(FragmentKind.CLASS) == 2
        assert selector.count(FragmentKind.ATTRIBUTE) == 0

    def test_furthest_kind(self) -> None:
        selector = builder.element("a")
        assert selector.furthest_kind is FragmentKind.ELEMENT
        selector.attr("href")
        assert selector.furthest_kind is FragmentKind.ATTRIBUTE

    def test_furthest_kind_empty(self) -> None:
        assert Selector().furthest_kind is None

    def test_restore(self) -> None:
        selector = Selector.restore(
            ["div", ".x"], {FragmentKind.ELEMENT: 1, FragmentKind.CLASS: 1}
        )
        assert selector.stringify() == "div.x"
        with pytest.raises(ValidationError):
            selector.id("late")
