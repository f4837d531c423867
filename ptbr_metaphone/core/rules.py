"""Rule dataclass and the small predicate builders the rule tables use.

WHY: The transcription tables are long and order-sensitive. Writing them
as data (an ordered tuple of Rule values per letter) keeps the priority
visible at a glance and lets tests walk the exact table the engine uses.

HOW: A Rule couples a predicate over RuleContext with what it emits and
how many extra characters it swallows. The builders below return
predicates for the recurring shapes ("next is one of", "next two are").

RULES:
- emit is "" for silent rules, one symbol, or two symbols ("KS")
- consume counts characters absorbed AFTER the current one (0, 1 or 2)
- Predicates must not mutate anything; tables are shared by all callers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from ptbr_metaphone.core.window import RuleContext

Predicate = Callable[[RuleContext], bool]


@dataclass(frozen=True)
class Rule:
    """One row of a transcription table.

    Attributes:
        matches: Predicate deciding whether this row applies.
        emit: Symbols appended to the code ("" when silent).
        consume: Extra characters skipped after the current one.
        name: Short label used in test failure messages.
    """

    matches: Predicate
    emit: str
    consume: int = 0
    name: str = ""


def always(ctx: RuleContext) -> bool:
    return True


def at_start(ctx: RuleContext) -> bool:
    return ctx.window.at_start


def at_end(ctx: RuleContext) -> bool:
    return ctx.window.at_end


def next_is(chars: Iterable[str]) -> Predicate:
    allowed = frozenset(chars)

    def predicate(ctx: RuleContext) -> bool:
        return ctx.window.next.is_(allowed)

    return predicate


def next_pair_is(first: Iterable[str], second: Iterable[str]) -> Predicate:
    """Next character in ``first`` and the one after it in ``second``."""
    first_set = frozenset(first)
    second_set = frozenset(second)

    def predicate(ctx: RuleContext) -> bool:
        window = ctx.window
        return window.next.is_(first_set) and window.next_next.is_(second_set)

    return predicate


def next_is_vowel(ctx: RuleContext) -> bool:
    return ctx.window.next.is_vowel()


def next_is_consonant(ctx: RuleContext) -> bool:
    return ctx.window.next.is_consonant()


def any_of(*predicates: Predicate) -> Predicate:
    def predicate(ctx: RuleContext) -> bool:
        return any(p(ctx) for p in predicates)

    return predicate


def doubled(letter: str, symbol: str) -> tuple:
    """Rows for a letter whose doubled form reads as one sound (bb, dd...)."""
    return (
        Rule(next_is(letter), symbol, consume=1, name="{0}{0}".format(letter)),
        Rule(always, symbol, name=letter),
    )
