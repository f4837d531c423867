"""The encode() entry point: normalize → transcribe each segment → join.

WHY: Callers (the token filter, the CLI, the HTTP API, library users)
need one function that turns a raw word into its phonetic key without
knowing about segments, windows or rule tables.

HOW: normalize() validates and splits the word, transcribe() runs the
rule cascade on every non-empty segment with the next segment's
initial, and join_codes() stitches the results back with hyphens.

RULES:
- encode() is pure and thread-safe; no state survives a call
- InvalidInput propagates to the caller unchanged
- Output is independent of the input's letter case
"""

from __future__ import annotations

from typing import List, Optional

from ptbr_metaphone.core.engine import transcribe
from ptbr_metaphone.core.joiner import join_codes
from ptbr_metaphone.core.normalizer import normalize

OUTPUT_ALPHABET = frozenset("ABDEFGIJKLMNOPRSTUVXZ123")
"""Every symbol encode() can emit, hyphen excluded."""


def encode(word: Optional[str]) -> str:
    """Compute the Brazilian-Portuguese Metaphone code for ``word``.

    Args:
        word: A word or hyphenated compound, any letter case.

    Returns:
        The phonetic code, e.g. ``encode("Calcanhar") == "KK32"``.

    Raises:
        InvalidInput: If ``word`` is None, blank, or only hyphens.
    """
    codes: List[Optional[str]] = []
    for segment in normalize(word):
        if segment.is_empty:
            codes.append(None)
        else:
            codes.append(transcribe(segment.text, segment.next_initial))
    return join_codes(codes)
