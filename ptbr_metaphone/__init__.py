"""Brazilian-Portuguese Metaphone: phonetic keys for fuzzy word matching.

WHY: Portuguese spelling has many ways to write the same sound ("cassar"
vs "caçar", "exame" vs "ezame"). Search and deduplication need a key that
collapses those variants so "sounds like" lookups work without a
dictionary.

HOW: Three-stage core: normalize (case-fold, trim, split on hyphens),
transcribe each segment through an ordered rule cascade, join the codes
back with hyphens. An analysis layer applies the encoder to token
streams; a CLI and an HTTP API sit on top.

RULES:
- encode() is the single public entry point of the core
- Output is always uppercase letters plus the digit markers 1, 2, 3
- InvalidInput (a ValueError) is the only error the core raises
"""

from ptbr_metaphone.core.errors import InvalidInput
from ptbr_metaphone.core.metaphone import encode

__version__ = "0.1.0"

__all__ = ["InvalidInput", "encode", "__version__"]
