#!/usr/bin/env python3
# flagprompt/interface/matcher.py
from __future__ import annotations


def is_match(input_text: str, candidate: str) -> bool:
    """
    Case-insensitive subsequence test.

    Every character of `input_text` except '-' must appear in `candidate` in
    the same order, not necessarily contiguously. Empty input always matches.
    """
    candidate = candidate.lower()
    cursor = 0

    for char in input_text.lower():
        if char == "-":
            continue
        found = candidate.find(char, cursor)
        if found == -1:
            return False
        cursor = found + 1

    return True
