"""Selector vocabulary: part kinds and combinator tokens."""

from __future__ import annotations

from enum import Enum


class SelectorPartKind(Enum):
    """A category of compound-selector fragment.

    Members are declared in the order CSS requires them inside one compound
    selector, and compare by that order:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = (0, "element", "{}", True)
    ID = (1, "id", "#{}", False)
    CLASS = (2, "class", ".{}", False)
    ATTRIBUTE = (3, "attribute", "[{}]", False)
    PSEUDO_CLASS = (4, "pseudo-class", ":{}", False)
    PSEUDO_ELEMENT = (5, "pseudo-element", "::{}", True)

    def __init__(self, order: int, label: str, template: str, singleton: bool):
        self.order = order
        self.label = label
        self.template = template
        self.singleton = singleton

    def format(self, value: str) -> str:
        """Return *value* wrapped in this kind's fragment syntax."""
        return self.template.format(value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SelectorPartKind):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SelectorPartKind):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SelectorPartKind):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SelectorPartKind):
            return NotImplemented
        return self.order >= other.order


# "element, id, class, attribute, pseudo-class, pseudo-element"
REQUIRED_ORDER = ", ".join(kind.label for kind in SelectorPartKind)


class Combinator(str, Enum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


STANDARD_COMBINATORS = frozenset(c.value for c in Combinator)
