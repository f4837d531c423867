"""The ordered exception cascade for the letter x.

WHY: Portuguese x has four readings: /ks/ (táxi, fixo), /s/ (próximo,
texto), /z/ (exame, inexato) and /ʃ/ (xarope, caixa). Which one applies
depends on etymology, which the spelling only hints at through a handful
of prefixes and neighborhoods. The engine encodes those hints as a fixed
cascade evaluated top-down before a general fallback.

HOW: X_RULES is a tuple of Rule rows; the engine runs the first row
whose predicate matches. Several rows read fixed absolute positions
(three or four characters back) through RuleContext.char_at(), which
returns None out of range so short segments simply skip those rows.

RULES:
- Order is linguistic precedence; never reorder rows
- Rows 3 and 4 look across the hyphen at the next segment's initial
- The final row (x before a vowel) emits X
"""

from __future__ import annotations

from ptbr_metaphone.core.rules import Rule, at_end, next_is_consonant, next_pair_is
from ptbr_metaphone.core.window import FRONT_VOWELS, RuleContext, is_vowel

_E = frozenset("eéê")
_I = frozenset("iíy")
_A_O = frozenset("aáâoóô")
_E_U = frozenset("eéêuú")


def _inex_prefix(ctx: RuleContext) -> bool:
    # inexato, inexorável
    window = ctx.window
    return (
        ctx.index == 3
        and ctx.char_at(-3) == "i"
        and window.prev_prev.value == "n"
        and window.prev.is_(_E)
        and window.next.is_vowel()
    )


def _ex_prefix_before_vowel(ctx: RuleContext) -> bool:
    # exame, êxito
    window = ctx.window
    return (
        not window.prev_prev.exists
        and window.prev.is_(_E)
        and window.next.is_vowel()
    )


def _bare_ex(ctx: RuleContext) -> bool:
    window = ctx.window
    return (
        not window.prev_prev.exists
        and window.prev.is_("e")
        and not window.next.exists
    )


def _ex_compound_before_vowel(ctx: RuleContext) -> bool:
    # ex-aluno
    return _bare_ex(ctx) and is_vowel(ctx.next_initial)


def _trouxe(ctx: RuleContext) -> bool:
    return (
        ctx.index >= 4
        and ctx.char_at(-4) == "t"
        and ctx.char_at(-3) == "r"
        and ctx.char_at(-2) == "o"
        and ctx.char_at(-1) == "u"
    )


def _proxim(ctx: RuleContext) -> bool:
    # próximo, aproximar
    window = ctx.window
    return (
        ctx.index >= 3
        and ctx.char_at(-3) == "p"
        and window.prev_prev.value == "r"
        and window.prev.is_(_A_O)
        and window.next_next.exists
        and window.next.value == "i"
        and window.next_next.value == "m"
    )


def _maxim(ctx: RuleContext) -> bool:
    # máximo
    window = ctx.window
    return (
        window.prev_prev.is_("m")
        and window.prev.is_(_A_O)
        and window.next_next.exists
        and window.next.value == "i"
        and window.next_next.value == "m"
    )


def _auxil(ctx: RuleContext) -> bool:
    # auxílio
    window = ctx.window
    return (
        window.prev_prev.is_("a")
        and window.prev.is_("u")
        and window.next.is_(_I)
        and window.next_next.is_("l")
    )


def _flex(ctx: RuleContext) -> bool:
    # flexão, fluxo
    return (
        ctx.index >= 3
        and ctx.char_at(-3) == "f"
        and ctx.char_at(-2) == "l"
        and ctx.char_at(-1) in _E_U
    )


def _nex_fix_sex(ctx: RuleContext) -> bool:
    # anexo, fixo, sexo
    window = ctx.window
    if not window.prev_prev.exists:
        return False
    pair_start = window.prev_prev.value
    return (
        (pair_start == "n" and window.prev.is_(_E))
        or (pair_start == "f" and window.prev.is_(_I))
        or (pair_start == "s" and window.prev.is_(_E))
    )


def _otherwise(ctx: RuleContext) -> bool:
    return True


X_RULES = (
    Rule(_inex_prefix, "Z", consume=1, name="inex-"),
    Rule(_ex_prefix_before_vowel, "Z", consume=1, name="ex- + vowel"),
    Rule(_ex_compound_before_vowel, "Z", name="ex- + hyphen + vowel"),
    Rule(_bare_ex, "S", name="ex- + hyphen"),
    Rule(_trouxe, "S", name="troux-"),
    Rule(_proxim, "S", consume=1, name="prox-im"),
    Rule(_maxim, "S", consume=1, name="max-im"),
    Rule(_auxil, "S", consume=1, name="aux-il"),
    Rule(_flex, "KS", name="flex-"),
    Rule(_nex_fix_sex, "KS", name="nex/fix/sex"),
    Rule(next_pair_is("c", FRONT_VOWELS), "S", consume=2, name="xce/xci"),
    Rule(at_end, "KS", name="final x"),
    Rule(next_is_consonant, "S", name="x + consonant"),
    Rule(_otherwise, "X", name="x + vowel"),
)
