"""Core encoder: normalizer, transcription engine, segment joiner.

WHY: The core is the stable heart of the package, a pure function from
a word to its phonetic code. The analysis, CLI and HTTP layers only
call encode() and never reach into the rule tables.

HOW: normalizer.py splits and folds, engine.py (with x_rules.py,
rules.py and window.py) transcribes one segment, joiner.py reassembles,
metaphone.py wires the three together.

RULES:
- Rule tables are immutable module-level data
- Nothing in core does I/O or logging
"""
