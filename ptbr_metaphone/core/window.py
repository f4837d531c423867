"""Lookaround window and rule context for the transcription engine.

WHY: Almost every rule in the cascade asks "what is next?" or "what came
before?". Sentinel characters (a space standing in for "nothing") are an
easy source of bugs, so every neighbor carries an explicit existence
flag alongside its value.

HOW: build_window() slices up to two characters on each side of the
cursor into Neighbor values. RuleContext bundles the window with the
whole segment, the cursor index and the next segment's initial, because
the x rules read fixed absolute offsets and look across a hyphen.

RULES:
- A missing neighbor is Neighbor(exists=False, value=None), never a blank
- char_at() is bounds-checked; out-of-range offsets return None
- The vowel set treats y as a vowel and includes all Portuguese accents
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

VOWELS = frozenset("aeiouáéíóúâêôãõàüy")
"""Letters treated as vowels by every rule that asks "is a vowel"."""

FRONT_VOWELS = frozenset("eéêiíy")
"""Vowels that soften c and g and silence the u in gu/qu."""


def is_vowel(char: Optional[str]) -> bool:
    return char is not None and char in VOWELS


@dataclass(frozen=True)
class Neighbor:
    """One position in the lookaround window."""

    exists: bool
    value: Optional[str] = None

    def is_(self, chars: Iterable[str]) -> bool:
        """True when the neighbor exists and is one of ``chars``."""
        return self.exists and self.value in chars

    def is_vowel(self) -> bool:
        return self.exists and is_vowel(self.value)

    def is_consonant(self) -> bool:
        """True when the neighbor exists and is anything but a vowel."""
        return self.exists and not is_vowel(self.value)


ABSENT = Neighbor(exists=False)


@dataclass(frozen=True)
class Window:
    """The two characters before and the two after the cursor."""

    prev_prev: Neighbor
    prev: Neighbor
    next: Neighbor
    next_next: Neighbor

    @property
    def at_start(self) -> bool:
        return not self.prev.exists

    @property
    def at_end(self) -> bool:
        return not self.next.exists


def _neighbor(segment: str, position: int) -> Neighbor:
    if 0 <= position < len(segment):
        return Neighbor(exists=True, value=segment[position])
    return ABSENT


def build_window(segment: str, index: int) -> Window:
    """Build the lookaround window for ``segment[index]``."""
    return Window(
        prev_prev=_neighbor(segment, index - 2),
        prev=_neighbor(segment, index - 1),
        next=_neighbor(segment, index + 1),
        next_next=_neighbor(segment, index + 2),
    )


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may consult for the character under the cursor.

    Attributes:
        segment: The whole lowercase segment being transcribed.
        index: Cursor position within ``segment``.
        window: Neighbors of the cursor.
        next_initial: First character of the following hyphen segment,
                      or None when there is none.
    """

    segment: str
    index: int
    window: Window
    next_initial: Optional[str] = None

    @property
    def char(self) -> str:
        return self.segment[self.index]

    def char_at(self, offset: int) -> Optional[str]:
        """Character at ``index + offset``, or None when out of range."""
        position = self.index + offset
        if 0 <= position < len(self.segment):
            return self.segment[position]
        return None


def make_context(
    segment: str,
    index: int,
    next_initial: Optional[str] = None,
) -> RuleContext:
    return RuleContext(
        segment=segment,
        index=index,
        window=build_window(segment, index),
        next_initial=next_initial,
    )
