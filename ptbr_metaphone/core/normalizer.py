"""Input normalization: case-fold, trim, split compounds on hyphens.

WHY: The rule tables only know lowercase letters, and compound words
("guarda-chuva", "bem-te-vi") are encoded one segment at a time. One x
rule also needs to peek at the first letter of the following segment
("ex-aluno" vs "ex-presidente"), so that letter travels with each
segment.

HOW: str.lower() keeps diacritics and the y, then strip() trims the
surrounding whitespace. Splitting on "-" keeps empty pieces as
placeholders so the original hyphen layout is recoverable.

RULES:
- None, blank, or hyphen-only input raises InvalidInput
- Empty segments are kept in the list with text == ""
- next_initial is None for the last segment and before an empty one
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ptbr_metaphone.core.errors import InvalidInput

SEGMENT_SEPARATOR = "-"


@dataclass(frozen=True)
class SegmentInput:
    """One hyphen-delimited piece of the normalized word.

    Attributes:
        text: Lowercase segment text, "" for a placeholder.
        index: Position of this segment in the split list.
        next_initial: First character of the next segment, or None.
    """

    text: str
    index: int
    next_initial: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.text


def normalize(word: Optional[str]) -> List[SegmentInput]:
    """Case-fold, trim and split ``word`` into segments.

    Raises:
        InvalidInput: If ``word`` is None, blank, or only hyphens.
    """
    if word is None:
        raise InvalidInput("Word cannot be null or empty")

    folded = word.lower().strip()
    if not folded:
        raise InvalidInput("Word cannot be null or empty")

    pieces = folded.split(SEGMENT_SEPARATOR)
    if not any(pieces):
        raise InvalidInput("Word has no letters between hyphens: {!r}".format(word))

    segments: List[SegmentInput] = []
    for i, piece in enumerate(pieces):
        next_initial = None
        if i + 1 < len(pieces) and pieces[i + 1]:
            next_initial = pieces[i + 1][0]
        segments.append(SegmentInput(text=piece, index=i, next_initial=next_initial))
    return segments
