#!/usr/bin/env python3
# flagprompt/convert/text.py
from __future__ import annotations

"""
Coerce the raw text typed for a flag into a Scalar of the flag's kind.

Numbers are parsed into their domain's wide kind first and then narrowed, so
typing '999999' for an int8 flag surfaces as a RangeOverflowError rather than
being clamped.
"""

from flagprompt.convert.kinds import Domain, Scalar, ScalarKind
from flagprompt.convert.numeric import convert_param
from flagprompt.errors import InvalidLiteralError, RangeOverflowError

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def parse_bool(text: str) -> bool:
    """Parse a yes/no word; anything else raises InvalidLiteralError."""
    lowered = text.strip().lower()
    if lowered in _BOOL_TRUE:
        return True
    if lowered in _BOOL_FALSE:
        return False
    raise InvalidLiteralError(text, str(ScalarKind.BOOL))


def _as_int(text: str, target: ScalarKind) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidLiteralError(text, str(target)) from exc


def _as_float(text: str, target: ScalarKind) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise InvalidLiteralError(text, str(target)) from exc


def coerce_text(text: str, target: ScalarKind) -> Scalar:
    """
    Parse `text` as a literal of `target`.

    Supported coercions:
        - bool   -> '1,true,yes,y,on' / '0,false,no,n,off' (case-insensitive)
        - int*   -> base-10 literal, parsed as int64 then narrowed
        - uint*  -> base-10 literal, parsed as uint64 then narrowed
        - float* -> float literal, parsed as float64 then narrowed
        - string -> original text
    """
    domain = target.domain
    if domain is Domain.BOOLEAN:
        return Scalar(target, parse_bool(text))
    if domain is Domain.TEXT:
        return Scalar(target, text)

    if domain is Domain.FLOATING:
        wide = Scalar(ScalarKind.FLOAT64, _as_float(text, target))
    else:
        number = _as_int(text, target)
        wide_kind = ScalarKind.INT64 if domain is Domain.SIGNED else ScalarKind.UINT64
        if not wide_kind.fits(number):
            raise RangeOverflowError(number, str(target))
        wide = Scalar(wide_kind, number)
    return convert_param(wide, target)
