"""Transcription engine: the per-letter rule cascade.

WHY: This is the heart of the encoder. Each Portuguese letter maps to a
sound that depends on its neighbors (c before e/i is S, g before e/i is
J, s between vowels is Z, a final n nasalizes to M...). Spelling
variants of the same word converge because the rules throw away what
the ear cannot hear: vowels after the first letter, silent h, doubled
consonants, the u in gue/gui/que/qui.

HOW: A cursor walks the segment once, left to right. At each position
the engine builds a RuleContext (window + absolute position), looks up
the ordered rows for the current letter in TRANSCRIPTION_RULES and runs
the first row that matches. The row's emission is appended and the
cursor advances by 1 plus the row's ``consume`` count, so a digraph like
"lh" is read once and never revisited.

RULES:
- First matching row wins; row order is part of the algorithm
- Letters without a table entry are silent (digits, punctuation, ...)
- transcribe() never raises and may return "" (e.g. "h")
- len(transcribe(s)) <= 2 * len(s): no row emits more than two symbols
- Input must already be lowercase; normalization happens upstream
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ptbr_metaphone.core.rules import (
    Rule,
    always,
    any_of,
    at_end,
    at_start,
    doubled,
    next_is,
    next_is_consonant,
    next_is_vowel,
    next_pair_is,
)
from ptbr_metaphone.core.window import FRONT_VOWELS, RuleContext, make_context
from ptbr_metaphone.core.x_rules import X_RULES

# Canonical symbol for each vowel letter when it is pronounced.
_VOWEL_SYMBOLS = {
    "a": "A", "á": "A", "ã": "A", "à": "A", "â": "A",
    "e": "E", "é": "E", "ê": "E",
    "i": "I", "í": "I", "y": "I",
    "o": "O", "ó": "O", "ô": "O", "õ": "O",
    "u": "U", "ú": "U", "ü": "U",
}


def _word_initial_sound(ctx: RuleContext) -> bool:
    # Vowel at position 0, or right after a leading silent h ("hora").
    window = ctx.window
    return window.at_start or (
        not window.prev_prev.exists and window.prev.value == "h"
    )


def _vowel_rows(symbol: str) -> Tuple[Rule, ...]:
    return (
        Rule(_word_initial_sound, symbol, name="initial vowel"),
        Rule(always, "", name="inner vowel"),
    )


def _s_voiced(ctx: RuleContext) -> bool:
    # casa, exsudar: between vowels s sounds like z
    window = ctx.window
    after_vowel = window.prev.is_vowel() or (
        window.prev_prev.is_("e") and window.prev.is_("x")
    )
    return after_vowel and window.next.is_vowel()


_C_ROWS = (
    Rule(next_is(FRONT_VOWELS), "S", consume=1, name="ce/ci"),
    Rule(next_pair_is("a", "o"), "S", consume=2, name="cao typo for ção"),
    Rule(next_is("h"), "X", consume=1, name="ch"),
    Rule(next_is("kq"), "K", consume=1, name="ck/cq"),
    Rule(next_is("c"), "KS", consume=1, name="cc"),
    Rule(always, "K", name="c"),
)

_G_ROWS = (
    Rule(next_pair_is("u", FRONT_VOWELS), "G", consume=2, name="gue/gui"),
    Rule(next_is(FRONT_VOWELS), "J", consume=1, name="ge/gi"),
    Rule(next_is("g"), "G", consume=1, name="gg"),
    Rule(always, "G", name="g"),
)

_L_ROWS = (
    Rule(next_is("h"), "1", consume=1, name="lh"),
    Rule(next_is_vowel, "L", name="l + vowel"),
    # Brazilian l-vocalization: "alto" reads like "auto".
    Rule(always, "", name="l vocalized"),
)

_N_ROWS = (
    Rule(next_is("h"), "3", consume=1, name="nh"),
    Rule(next_is("n"), "N", consume=1, name="nn"),
    Rule(at_end, "M", name="final n"),
    Rule(always, "N", name="n"),
)

_P_ROWS = (
    Rule(next_is("h"), "F", consume=1, name="ph"),
    Rule(next_is("p"), "P", consume=1, name="pp"),
    Rule(always, "P", name="p"),
)

_Q_ROWS = (
    Rule(next_pair_is("u", FRONT_VOWELS), "K", consume=2, name="que/qui"),
    Rule(always, "K", name="q"),
)

_R_ROWS = (
    Rule(at_start, "2", name="initial r"),
    Rule(next_is("r"), "2", consume=1, name="rr"),
    Rule(at_end, "2", name="final r"),
    Rule(always, "R", name="r"),
)

_S_ROWS = (
    Rule(
        any_of(next_pair_is("c", FRONT_VOWELS), next_is("çs")),
        "S",
        consume=2,
        name="sce/sci/sç/ss",
    ),
    Rule(_s_voiced, "Z", name="intervocalic s"),
    Rule(next_is("h"), "X", consume=1, name="sh"),
    Rule(always, "S", name="s"),
)

_T_ROWS = (
    Rule(next_is("ht"), "T", consume=1, name="th/tt"),
    Rule(always, "T", name="t"),
)

_W_ROWS = (
    Rule(at_start, "U", name="initial w"),
    Rule(always, "", name="inner w"),
)

_Z_ROWS = (
    Rule(any_of(at_end, next_is_consonant), "S", name="z devoiced"),
    # Unreachable while z counts as a consonant above; kept in table order.
    Rule(next_is("z"), "Z", consume=1, name="zz"),
    Rule(always, "Z", name="z"),
)

TRANSCRIPTION_RULES: Dict[str, Tuple[Rule, ...]] = {
    "b": doubled("b", "B"),
    "c": _C_ROWS,
    "ç": (Rule(always, "S", name="ç"),),
    "d": doubled("d", "D"),
    "f": doubled("f", "F"),
    "g": _G_ROWS,
    "h": (Rule(always, "", name="silent h"),),
    "j": (Rule(always, "J", name="j"),),
    "k": doubled("k", "K"),
    "l": _L_ROWS,
    "m": doubled("m", "M"),
    "n": _N_ROWS,
    "p": _P_ROWS,
    "q": _Q_ROWS,
    "r": _R_ROWS,
    "s": _S_ROWS,
    "t": _T_ROWS,
    "v": doubled("v", "V"),
    "w": _W_ROWS,
    "x": X_RULES,
    "z": _Z_ROWS,
}
TRANSCRIPTION_RULES.update(
    {letter: _vowel_rows(symbol) for letter, symbol in _VOWEL_SYMBOLS.items()}
)


def match_rule(ctx: RuleContext) -> Optional[Rule]:
    """Return the first row for ``ctx.char`` that matches, or None."""
    for rule in TRANSCRIPTION_RULES.get(ctx.char, ()):
        if rule.matches(ctx):
            return rule
    return None


def transcribe(segment: str, next_initial: Optional[str] = None) -> str:
    """Encode one hyphen-free, lowercase segment into its phonetic code.

    Args:
        segment: Lowercase characters with no hyphen.
        next_initial: First character of the following hyphen segment, or
                      None when this segment is the last one. Only the
                      "ex-" compound rows of the x cascade read it.

    Returns:
        The phonetic code, possibly empty.
    """
    symbols = []
    index = 0
    while index < len(segment):
        ctx = make_context(segment, index, next_initial)
        rule = match_rule(ctx)
        if rule is not None:
            symbols.append(rule.emit)
            index += rule.consume
        index += 1
    return "".join(symbols)
