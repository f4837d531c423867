"""Token dataclass shared by tokenizers and the phonetic filter.

WHY: Search pipelines pass words around with their character offsets
and a position increment, so a stacked token (same position as the
previous one) can be told apart from the next word.

RULES:
- start/end are character offsets into the analyzed text (end exclusive)
- position_increment is 1 for a new position, 0 for a stacked token
- type is "word" for tokenizer output, "phonetic" for injected codes
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

WORD_TYPE = "word"
PHONETIC_TYPE = "phonetic"


@dataclass(frozen=True)
class Token:
    """A single token in an analysis stream."""

    text: str
    start: int
    end: int
    position_increment: int = 1
    type: str = WORD_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
