"""Tests for selector part kinds and combinator tokens."""

import pytest

from cssbuilder.errors import DuplicateSingletonPart, OutOfOrderPart
from cssbuilder.kinds import REQUIRED_ORDER, Combinator, SelectorPartKind


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestKindOrder:
    def test_declared_in_css_order(self):
        assert [k.order for k in SelectorPartKind] == [0, 1, 2, 3, 4, 5]

    def test_comparisons_follow_order(self):
        assert SelectorPartKind.ELEMENT < SelectorPartKind.ID
        assert SelectorPartKind.PSEUDO_ELEMENT > SelectorPartKind.PSEUDO_CLASS
        assert SelectorPartKind.CLASS <= SelectorPartKind.CLASS
        assert SelectorPartKind.ATTRIBUTE >= SelectorPartKind.CLASS

    def test_max_picks_latest_kind(self):
        assert max(SelectorPartKind) is SelectorPartKind.PSEUDO_ELEMENT

    def test_required_order_text(self):
        assert REQUIRED_ORDER == (
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )

    def test_compare_with_other_type_fails(self):
        with pytest.raises(TypeError):
            SelectorPartKind.ID < 1


# ---------------------------------------------------------------------------
# Formatting and cardinality
# ---------------------------------------------------------------------------


class TestKindFormat:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (SelectorPartKind.ELEMENT, "div"),
            (SelectorPartKind.ID, "#div"),
            (SelectorPartKind.CLASS, ".div"),
            (SelectorPartKind.ATTRIBUTE, "[div]"),
            (SelectorPartKind.PSEUDO_CLASS, ":div"),
            (SelectorPartKind.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_format(self, kind, expected):
        assert kind.format("div") == expected

    def test_value_with_braces_is_opaque(self):
        assert SelectorPartKind.ATTRIBUTE.format("data-x='{}'") == "[data-x='{}']"

    def test_singletons(self):
        singles = {k for k in SelectorPartKind if k.singleton}
        assert singles == {SelectorPartKind.ELEMENT, SelectorPartKind.PSEUDO_ELEMENT}


class TestCombinator:
    def test_values(self):
        assert Combinator.DESCENDANT == " "
        assert Combinator.CHILD == ">"
        assert Combinator.ADJACENT_SIBLING == "+"
        assert Combinator.GENERAL_SIBLING == "~"


# ---------------------------------------------------------------------------
# Error messages
# ---------------------------------------------------------------------------


class TestErrorMessages:
    def test_duplicate_names_kind(self):
        exc = DuplicateSingletonPart(SelectorPartKind.ELEMENT)
        assert exc.kind is SelectorPartKind.ELEMENT
        assert "element should not occur more than one time" in str(exc)

    def test_out_of_order_names_required_order(self):
        exc = OutOfOrderPart(SelectorPartKind.ELEMENT, SelectorPartKind.ID)
        assert exc.attempted is SelectorPartKind.ELEMENT
        assert exc.max_seen is SelectorPartKind.ID
        assert REQUIRED_ORDER in str(exc)
