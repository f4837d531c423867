"""Tokenize text and run the phonetic filter over it in one call.

WHY: The CLI and the HTTP API both need "text in, token list out"
without repeating the tokenizer lookup and filter construction.

RULES:
- tokenizer is a key into TOKENIZERS; unknown keys raise ValueError
- inject=None uses config.DEFAULT_INJECT
"""

from __future__ import annotations

from typing import List, Optional

from ptbr_metaphone import config
from ptbr_metaphone.analysis.filter import PhoneticFilter
from ptbr_metaphone.analysis.tokenizers import TOKENIZERS
from ptbr_metaphone.analysis.tokens import Token


def analyze(
    text: str,
    tokenizer: Optional[str] = None,
    inject: Optional[bool] = None,
) -> List[Token]:
    """Return the filtered token stream for ``text``.

    Args:
        text: Text to analyze.
        tokenizer: Tokenizer key ("standard" or "keyword"); defaults to
                   config.DEFAULT_TOKENIZER.
        inject: Filter mode; defaults to config.DEFAULT_INJECT.
    """
    key = tokenizer or config.DEFAULT_TOKENIZER
    if key not in TOKENIZERS:
        available = ", ".join(sorted(TOKENIZERS))
        raise ValueError("Unknown tokenizer '{}'. Available: {}".format(key, available))

    if inject is None:
        inject = config.DEFAULT_INJECT

    phonetic_filter = PhoneticFilter(inject=inject)
    return list(phonetic_filter.apply(TOKENIZERS[key](text)))
