"""Reassemble per-segment codes into the final compound code.

RULES:
- A None entry marks an empty segment: it adds neither code nor hyphen
- A "" entry is a real segment that encoded to nothing; it still counts,
  so "h-a" joins to "-A"
- Consecutive contributing segments are separated by exactly one "-"
"""

from __future__ import annotations

from typing import Optional, Sequence

from ptbr_metaphone.core.normalizer import SEGMENT_SEPARATOR


def join_codes(codes: Sequence[Optional[str]]) -> str:
    """Join segment codes in order, skipping empty-segment placeholders."""
    return SEGMENT_SEPARATOR.join(code for code in codes if code is not None)
