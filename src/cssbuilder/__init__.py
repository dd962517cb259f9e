"""cssbuilder: fluent, order-checked CSS selector builder."""
from __future__ import annotations

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    DuplicateSingletonPart,
    EmptySelector,
    InvalidCombinator,
    OutOfOrderPart,
    SelectorError,
)
from cssbuilder.kinds import Combinator, SelectorPartKind
from cssbuilder.selector import (
    CompositeSelector,
    CompoundSelector,
    Selector,
    SelectorBuilder,
    SelectorState,
)

__version__ = "0.1.0"

# Default builder; every part operation on it starts a new chain.
css = SelectorBuilder()


def combine(
    left: Selector, combinator: Combinator | str, right: Selector
) -> CompositeSelector:
    """Join two selectors with the default builder."""
    return css.combine(left, combinator, right)


__all__ = [
    # builder
    "css",
    "combine",
    "SelectorBuilder",
    "Selector",
    "SelectorState",
    "CompoundSelector",
    "CompositeSelector",
    # vocabulary
    "SelectorPartKind",
    "Combinator",
    # config
    "BuilderConfig",
    # errors
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    "EmptySelector",
    "InvalidCombinator",
]
