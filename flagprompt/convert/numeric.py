#!/usr/bin/env python3
# flagprompt/convert/numeric.py
from __future__ import annotations

"""
Overflow-checked numeric conversion.

Each numeric domain gets a widen step (any kind of the domain -> canonical
64-bit value) and a narrow step (canonical value -> exact target kind, range
checked). convert_param routes a Scalar to the matching pair and passes
everything else through untouched.

Responsibilities:
- widen_int / widen_uint / widen_float
- narrow_int / narrow_uint / narrow_float
- convert_param (dispatch entry point)
"""

import logging
from typing import Any

from flagprompt.convert.kinds import Domain, Scalar, ScalarKind
from flagprompt.errors import DomainMismatchError, RangeOverflowError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Widen
# ---------------------------------------------------------------------------


def _widen(src: Scalar, domain: Domain) -> Any:
    if not isinstance(src, Scalar) or src.domain is not domain:
        raise DomainMismatchError(f"val is not {domain.value}: {src!r}")
    return src.value


def widen_int(src: Scalar) -> int:
    """Return the int64 value of a signed scalar (int, int8 .. int64)."""
    return _widen(src, Domain.SIGNED)


def widen_uint(src: Scalar) -> int:
    """Return the uint64 value of an unsigned scalar (uint, uint8 .. uint64)."""
    return _widen(src, Domain.UNSIGNED)


def widen_float(src: Scalar) -> float:
    """Return the float64 value of a floating scalar (float32, float64)."""
    return float(_widen(src, Domain.FLOATING))


# ---------------------------------------------------------------------------
# Narrow
# ---------------------------------------------------------------------------


def _narrow(value: int | float, target: ScalarKind, widest: ScalarKind, domains: tuple[Domain, ...]) -> Scalar:
    if target.domain not in domains:
        raise DomainMismatchError(f"dst is not {widest.domain.value}: {target}")
    if target is not widest and not target.fits(value):
        raise RangeOverflowError(value, str(target))
    return Scalar(target, value)


def narrow_int(value: int, target: ScalarKind) -> Scalar:
    """
    Narrow an int64 value to `target`.

    Signed targets and unsigned targets (cross-signedness) are both accepted;
    int64 itself never fails.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainMismatchError(f"val is not an integer: {value!r}")
    return _narrow(value, target, ScalarKind.INT64, (Domain.SIGNED, Domain.UNSIGNED))


def narrow_uint(value: int, target: ScalarKind) -> Scalar:
    """Narrow a uint64 value to `target` (unsigned, or signed with range check)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainMismatchError(f"val is not an integer: {value!r}")
    return _narrow(value, target, ScalarKind.UINT64, (Domain.UNSIGNED, Domain.SIGNED))


def narrow_float(value: float, target: ScalarKind) -> Scalar:
    """Narrow a float64 value to float32 (magnitude checked) or float64; ints are promoted."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DomainMismatchError(f"val is not a number: {value!r}")
    return _narrow(float(value), target, ScalarKind.FLOAT64, (Domain.FLOATING,))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_ROUTES = {
    Domain.SIGNED: (widen_int, narrow_int),
    Domain.UNSIGNED: (widen_uint, narrow_uint),
    Domain.FLOATING: (widen_float, narrow_float),
}


def convert_param(src: Any, target: ScalarKind) -> Any:
    """
    Convert `src` to the exact `target` kind.

    Numeric scalars are widened then narrowed; a RangeOverflowError or
    DomainMismatchError propagates to the caller. Non-numeric inputs (plain
    objects, bool/string scalars) are returned unchanged.
    """
    if not isinstance(src, Scalar) or src.domain not in _ROUTES:
        return src

    widen, narrow = _ROUTES[src.domain]
    result = narrow(widen(src), target)
    logger.debug("converted %s %s -> %s", src.kind, src.value, result.kind)
    return result
