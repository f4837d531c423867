"""Token-stream analysis: tokenizers, the phonetic filter and its factory.

WHY: Search engines index tokens, not raw strings. This package turns
text into tokens and runs encode() over them in replace or inject mode.

HOW: TOKENIZERS maps string keys to tokenizer functions, the same way a
registry dict maps names to pluggable implementations. create_filter()
builds a PhoneticFilter from a validated settings dict; analyze()
composes both.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API bodies)
- Every tokenizer listed here must be importable without side effects
"""

from __future__ import annotations

from ptbr_metaphone.analysis.analyzer import analyze
from ptbr_metaphone.analysis.factory import FILTER_NAME, create_filter
from ptbr_metaphone.analysis.filter import PhoneticFilter
from ptbr_metaphone.analysis.tokenizers import TOKENIZERS
from ptbr_metaphone.analysis.tokens import Token

__all__ = [
    "FILTER_NAME",
    "PhoneticFilter",
    "TOKENIZERS",
    "Token",
    "analyze",
    "create_filter",
]
