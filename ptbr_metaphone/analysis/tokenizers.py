"""Minimal tokenizers feeding the phonetic filter.

WHY: The filter consumes a token stream, so text has to be cut into
words first. Two shapes cover the common uses: "keyword" treats the
whole input as one term (a name field, a single query word) and
"standard" splits running text on anything that is not a letter or a
digit.

HOW: keyword_tokenize() yields one token spanning the input.
standard_tokenize() scans with a Unicode-aware regex so accented letters
and ç stay inside words.

RULES:
- Empty text produces no tokens
- standard splits on whitespace, punctuation, hyphens and underscores
- Token text keeps its original case; the encoder folds case itself
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterator

from ptbr_metaphone.analysis.tokens import Token

# Runs of letters or digits; \w minus the underscore.
_WORD_RE = re.compile(r"[^\W_]+")


def keyword_tokenize(text: str) -> Iterator[Token]:
    """Emit the whole input as a single token."""
    if text:
        yield Token(text=text, start=0, end=len(text))


def standard_tokenize(text: str) -> Iterator[Token]:
    """Emit one token per run of letters or digits."""
    for match in _WORD_RE.finditer(text):
        yield Token(text=match.group(), start=match.start(), end=match.end())


Tokenizer = Callable[[str], Iterator[Token]]

TOKENIZERS: Dict[str, Tokenizer] = {
    "keyword": keyword_tokenize,
    "standard": standard_tokenize,
}
