"""
Checks for characters that the canonical encoding does not escape.

A key or value containing one of these makes the plaintext form ambiguous:
two different trees may render to the same string.
"""

from __future__ import annotations

from typing import List

RESERVED_DELIMITERS = ("=", ", ", "(", ")", "[", "]")


def find_reserved_delimiters(text: str) -> List[str]:
    return [delim for delim in RESERVED_DELIMITERS if delim in text]


def is_unambiguous(text: str) -> bool:
    return not find_reserved_delimiters(text)
