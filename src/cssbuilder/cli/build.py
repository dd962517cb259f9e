"""CLI command: cssbuilder build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.kinds import Combinator
from cssbuilder.selector import CompoundSelector, SelectorBuilder

# CLI kind name -> builder method name
PART_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

COMBINATOR_WORDS = {"descendant": Combinator.DESCENDANT.value}


def _split_token(token: str) -> tuple[str, str] | None:
    """Return ``(kind, value)`` for a part token, or None for a combinator."""
    if "=" not in token:
        return None
    name, value = token.split("=", 1)
    if name not in PART_METHODS:
        raise click.BadParameter(
            f"unknown part kind {name!r} in {token!r}; "
            f"expected one of: {', '.join(PART_METHODS)}",
            param_hint="TOKENS",
        )
    return name, value


def build_selector(tokens: tuple[str, ...], builder: SelectorBuilder) -> str:
    """Fold *tokens* left to right into one rendered selector.

    Part tokens (``kind=value``) extend the current chain. Any other token is
    a combinator that joins everything so far with the next chain.
    """
    result = None
    chain: CompoundSelector | None = None
    pending: str | None = None

    for token in tokens:
        part = _split_token(token)
        if part is None:
            if chain is None:
                raise click.BadParameter(
                    f"combinator {token!r} must follow a selector",
                    param_hint="TOKENS",
                )
            result = chain if result is None else builder.combine(result, pending, chain)
            chain = None
            pending = COMBINATOR_WORDS.get(token, token)
            continue

        name, value = part
        target = builder if chain is None else chain
        chain = getattr(target, PART_METHODS[name])(value)

    if chain is None:
        raise click.BadParameter(
            "selector must end with a part, not a combinator", param_hint="TOKENS"
        )
    if result is None:
        return chain.render()
    return builder.combine(result, pending, chain).render()


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--strict", is_flag=True, help="Reject combinators other than ' ', +, ~ and >"
)
def build(tokens: tuple[str, ...], strict: bool) -> None:
    """Build a selector from TOKENS and print it.

    Each token is either KIND=VALUE (kinds: element, id, class, attr,
    pseudo-class, pseudo-element) or a combinator: +, ~, > or descendant.

    \b
    Example:
        cssbuilder build element=a attr='href$=".png"' pseudo-class=focus
    """
    builder = SelectorBuilder(BuilderConfig(strict_combinators=strict))
    try:
        selector = build_selector(tokens, builder)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector)
