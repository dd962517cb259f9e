"""Selector construction error types."""

from __future__ import annotations

from cssbuilder.kinds import REQUIRED_ORDER, SelectorPartKind


class SelectorError(Exception):
    """Base class for misuse of the selector builder."""


class DuplicateSingletonPart(SelectorError):
    """Raised when an element or pseudo-element is applied twice to one chain."""

    def __init__(self, kind: SelectorPartKind):
        self.kind = kind
        super().__init__(
            f"{kind.label} should not occur more than one time inside the selector"
        )


class OutOfOrderPart(SelectorError):
    """Raised when a part is appended after a part of a later kind."""

    def __init__(self, attempted: SelectorPartKind, max_seen: SelectorPartKind):
        self.attempted = attempted
        self.max_seen = max_seen
        super().__init__(
            f"cannot add {attempted.label} after {max_seen.label}: "
            f"selector parts should be arranged in the following order: "
            f"{REQUIRED_ORDER}"
        )


class EmptySelector(SelectorError):
    """Raised when rendering a selector that has no parts."""

    def __init__(self) -> None:
        super().__init__("cannot render an empty selector")


class InvalidCombinator(SelectorError):
    """Raised in strict mode for a token that is not a CSS combinator."""

    def __init__(self, combinator: str):
        self.combinator = combinator
        super().__init__(f"invalid combinator: {combinator!r}")
