"""Error types raised by the phonetic encoder."""

from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when the word to encode is missing or blank.

    RULES:
    - Raised for None, for strings that are empty after trimming, and for
      strings made only of hyphens (no segment left to encode)
    - Every other input is accepted; unknown characters are skipped
    """
