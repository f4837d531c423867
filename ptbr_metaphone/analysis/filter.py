"""Token filter that rewrites or augments tokens with their phonetic code.

WHY: Indexing the phonetic code next to (or instead of) the word is what
makes "sounds like" search work: "Souza" and "Sousa" both index SZ. The
filter is the glue between a token stream and encode().

HOW: For each incoming token, call encode(). In replace mode the token
text becomes the code. In inject mode the original token is emitted
unchanged and a second token carrying the code follows it with
position_increment=0, so both sit at the same position.

RULES:
- Tokens with empty text pass through untouched
- InvalidInput (blank token) keeps the original token
- An empty code (e.g. "h") keeps the original token
- Offsets of the code token equal those of the original
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, Iterator

from ptbr_metaphone.analysis.tokens import PHONETIC_TYPE, Token
from ptbr_metaphone.core.errors import InvalidInput
from ptbr_metaphone.core.metaphone import encode

logger = logging.getLogger(__name__)


class PhoneticFilter:
    """Apply the Brazilian-Portuguese Metaphone to a token stream.

    Args:
        inject: True to keep the original token and stack the code on it,
                False to replace the token text with the code.
    """

    def __init__(self, inject: bool = True) -> None:
        self.inject = inject

    def __repr__(self) -> str:
        return "PhoneticFilter(inject={})".format(self.inject)

    def apply(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if not token.text:
                yield token
                continue

            try:
                code = encode(token.text)
            except InvalidInput:
                logger.debug("Keeping unencodable token %r", token.text)
                yield token
                continue

            if not code:
                yield token
                continue

            if self.inject:
                yield token
                yield dataclasses.replace(
                    token,
                    text=code,
                    position_increment=0,
                    type=PHONETIC_TYPE,
                )
            else:
                yield dataclasses.replace(token, text=code)

    __call__ = apply
