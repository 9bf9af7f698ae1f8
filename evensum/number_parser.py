"""Parsing utilities for textual integer lists.

This module focuses solely on turning user-supplied text (for example the
``EVEN_SUM_NUMBERS`` environment variable) into an ordered list of integers.

Design rationale
- Parsing is separated from configuration so it can be tested on plain
    strings.
- Separators are lenient (commas, whitespace, or a mix) but tokens are
    strict: anything other than an optionally signed run of ASCII digits
    is rejected rather than silently skipped, so a typo never changes the
    computed sum. Python literal forms such as "1_000" are rejected too.
"""
from __future__ import annotations

import re
from typing import List

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_token(token: str, position: int) -> int:
    # ASCII digits only; int() alone would also take "1_000" and non-ASCII digits
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"token {token!r} at position {position} is not an integer")
    return int(token)


def parse_numbers(text: str) -> List[int]:
    """Parse ``text`` into a list of integers, preserving order.

    Returns ``[]`` for empty or blank text. Positions in error messages are
    1-based token indexes. A single trailing comma is allowed; any other
    empty comma-separated entry (``",1"``, ``"1,,2"``, ``"1,,"``) is
    treated as a missing number and rejected.
    """
    if not text or not text.strip():
        return []

    text = text.rstrip()
    if text.endswith(","):
        text = text[:-1]

    # Commas are significant for detecting empty tokens; whitespace is not.
    numbers: List[int] = []
    position = 0
    for chunk in text.split(","):
        tokens = chunk.split()
        if not tokens:
            raise ValueError(f"missing number at position {position + 1}")
        for token in tokens:
            position += 1
            numbers.append(_parse_token(token, position))
    return numbers
