"""Fluent CSS selector builder.

Usage::

    css.element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    css.combine(css.element("div").id("main"), "+", css.element("table")).render()
    # 'div#main + table'

``SelectorBuilder`` never holds state: every part operation called on it
starts a new ``CompoundSelector``. Selectors are immutable, so extending a
chain returns a new selector and leaves the receiver as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    DuplicateSingletonPart,
    EmptySelector,
    InvalidCombinator,
    OutOfOrderPart,
)
from cssbuilder.kinds import STANDARD_COMBINATORS, Combinator, SelectorPartKind

__all__ = [
    "Selector",
    "SelectorState",
    "CompoundSelector",
    "CompositeSelector",
    "SelectorBuilder",
]


class Selector(Protocol):
    """Anything that can be rendered to a selector string."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class SelectorState:
    """Accumulated text and kind bookkeeping for one compound selector."""

    rendered: str = ""
    used_kinds: frozenset[SelectorPartKind] = frozenset()
    max_kind_seen: SelectorPartKind | None = None

    def apply(self, kind: SelectorPartKind, value: str) -> SelectorState:
        """Return a new state with *value* appended as a part of *kind*.

        Raises DuplicateSingletonPart or OutOfOrderPart without touching
        ``self``.
        """
        if kind.singleton and kind in self.used_kinds:
            raise DuplicateSingletonPart(kind)
        if self.max_kind_seen is not None and self.max_kind_seen > kind:
            raise OutOfOrderPart(kind, self.max_kind_seen)

        return SelectorState(
            rendered=self.rendered + kind.format(value),
            used_kinds=self.used_kinds | {kind},
            max_kind_seen=kind,
        )


class _PartOperations:
    """Part operations shared by the builder and its chains."""

    config: BuilderConfig

    def _extend(self, kind: SelectorPartKind, value: str) -> CompoundSelector:
        raise NotImplementedError

    def element(self, value: str) -> CompoundSelector:
        return self._extend(SelectorPartKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self._extend(SelectorPartKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self._extend(SelectorPartKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        return self._extend(SelectorPartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self._extend(SelectorPartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self._extend(SelectorPartKind.PSEUDO_ELEMENT, value)


class _Combinable:
    config: BuilderConfig

    def render(self) -> str:
        raise NotImplementedError

    def combine(
        self, combinator: Combinator | str, other: Selector
    ) -> CompositeSelector:
        """Shorthand for ``SelectorBuilder.combine(self, combinator, other)``."""
        return _combine(self, combinator, other, self.config)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class CompoundSelector(_Combinable, _PartOperations):
    """One selector chain with no combinators, e.g. ``div#main.container``."""

    state: SelectorState
    config: BuilderConfig = field(default_factory=BuilderConfig, repr=False)

    def _extend(self, kind: SelectorPartKind, value: str) -> CompoundSelector:
        return replace(self, state=self.state.apply(kind, value))

    def render(self) -> str:
        if not self.state.rendered and not self.state.used_kinds:
            raise EmptySelector()
        return self.state.rendered


@dataclass(frozen=True)
class CompositeSelector(_Combinable):
    """Two rendered selectors joined by a combinator token.

    Operands are rendered when the composite is created; the composite does
    not track later changes to them.
    """

    left: str
    combinator: str
    right: str
    config: BuilderConfig = field(default_factory=BuilderConfig, repr=False)

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"


def _combine(
    left: Selector,
    combinator: Combinator | str,
    right: Selector,
    config: BuilderConfig,
) -> CompositeSelector:
    token = combinator.value if isinstance(combinator, Combinator) else combinator
    log = logging.getLogger(config.logger_name)
    if token not in STANDARD_COMBINATORS:
        if config.strict_combinators:
            raise InvalidCombinator(token)
        log.warning("Accepting non-standard combinator %r", token)

    composite = CompositeSelector(
        left=left.render(),
        combinator=token,
        right=right.render(),
        config=config,
    )
    log.debug("Combined selector: %s", composite)
    return composite


class SelectorBuilder(_PartOperations):
    """Factory for selector chains.

    Each part operation called on the builder starts a new, independent
    ``CompoundSelector``; the builder itself is never modified.
    """

    def __init__(self, config: BuilderConfig | None = None):
        self.config = config or BuilderConfig()
        self._log = logging.getLogger(self.config.logger_name)

    def _extend(self, kind: SelectorPartKind, value: str) -> CompoundSelector:
        chain = CompoundSelector(
            state=SelectorState().apply(kind, value), config=self.config
        )
        self._log.debug("Started selector chain with %s %r", kind.label, value)
        return chain

    def combine(
        self,
        left: Selector,
        combinator: Combinator | str,
        right: Selector,
    ) -> CompositeSelector:
        """Join two selectors with *combinator*.

        Both operands are rendered immediately. The token is inserted verbatim
        unless the builder is configured with ``strict_combinators``.
        """
        return _combine(left, combinator, right, self.config)

    def render(self) -> str:
        """The builder has no parts of its own, so rendering always fails."""
        raise EmptySelector()

    def __repr__(self) -> str:
        return f"SelectorBuilder(config={self.config!r})"
