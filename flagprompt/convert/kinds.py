#!/usr/bin/env python3
# flagprompt/convert/kinds.py
from __future__ import annotations

"""
Closed set of scalar kinds and the tagged Scalar value.

Every suggestion default and every conversion source/target carries an
explicit ScalarKind, so nothing downstream has to guess a kind from the
Python type of a value.

Platform-width kinds (INT/UINT) follow the pointer size of the running
interpreter.
"""

import ctypes
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any

from flagprompt.errors import RangeOverflowError

_PLATFORM_BITS = ctypes.sizeof(ctypes.c_void_p) * 8

FLOAT32_MAX = 3.4028234663852886e38
FLOAT64_MAX = sys.float_info.max


class Domain(Enum):
    """Family a kind belongs to. Only SIGNED/UNSIGNED/FLOATING are numeric."""

    BOOLEAN = "boolean"
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOATING = "floating"
    TEXT = "text"

    @property
    def is_numeric(self) -> bool:
        return self in (Domain.SIGNED, Domain.UNSIGNED, Domain.FLOATING)


class ScalarKind(Enum):
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"

    @property
    def domain(self) -> Domain:
        return _DOMAINS[self]

    @property
    def is_numeric(self) -> bool:
        return self.domain.is_numeric

    @property
    def is_integer(self) -> bool:
        return self.domain in (Domain.SIGNED, Domain.UNSIGNED)

    @property
    def bounds(self) -> tuple[float, float] | None:
        """(min, max) for numeric kinds, None otherwise."""
        return _BOUNDS.get(self)

    def fits(self, value: int | float) -> bool:
        """
        True if `value` is representable by this kind.

        FLOAT32 compares magnitudes, so both signs are checked and infinities
        never fit. FLOAT64 holds any float, NaN fits every floating kind.
        """
        bounds = self.bounds
        if bounds is None:
            return False
        low, high = bounds
        if self.domain is Domain.FLOATING:
            if self is ScalarKind.FLOAT64 or math.isnan(value):
                return True
            return abs(value) <= high
        return low <= value <= high

    def __str__(self) -> str:
        return self.value


def _signed_bounds(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _unsigned_bounds(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


_DOMAINS: dict[ScalarKind, Domain] = {
    ScalarKind.BOOL: Domain.BOOLEAN,
    ScalarKind.INT: Domain.SIGNED,
    ScalarKind.INT8: Domain.SIGNED,
    ScalarKind.INT16: Domain.SIGNED,
    ScalarKind.INT32: Domain.SIGNED,
    ScalarKind.INT64: Domain.SIGNED,
    ScalarKind.UINT: Domain.UNSIGNED,
    ScalarKind.UINT8: Domain.UNSIGNED,
    ScalarKind.UINT16: Domain.UNSIGNED,
    ScalarKind.UINT32: Domain.UNSIGNED,
    ScalarKind.UINT64: Domain.UNSIGNED,
    ScalarKind.FLOAT32: Domain.FLOATING,
    ScalarKind.FLOAT64: Domain.FLOATING,
    ScalarKind.STRING: Domain.TEXT,
}

_BOUNDS: dict[ScalarKind, tuple[float, float]] = {
    ScalarKind.INT: _signed_bounds(_PLATFORM_BITS),
    ScalarKind.INT8: _signed_bounds(8),
    ScalarKind.INT16: _signed_bounds(16),
    ScalarKind.INT32: _signed_bounds(32),
    ScalarKind.INT64: _signed_bounds(64),
    ScalarKind.UINT: _unsigned_bounds(_PLATFORM_BITS),
    ScalarKind.UINT8: _unsigned_bounds(8),
    ScalarKind.UINT16: _unsigned_bounds(16),
    ScalarKind.UINT32: _unsigned_bounds(32),
    ScalarKind.UINT64: _unsigned_bounds(64),
    ScalarKind.FLOAT32: (-FLOAT32_MAX, FLOAT32_MAX),
    ScalarKind.FLOAT64: (-FLOAT64_MAX, FLOAT64_MAX),
}


def _value_matches_kind(kind: ScalarKind, value: Any) -> bool:
    domain = kind.domain
    if domain is Domain.BOOLEAN:
        return isinstance(value, bool)
    if domain in (Domain.SIGNED, Domain.UNSIGNED):
        return isinstance(value, int) and not isinstance(value, bool)
    if domain is Domain.FLOATING:
        return isinstance(value, float)
    return isinstance(value, str)


@dataclass(frozen=True, slots=True)
class Scalar:
    """
    A value tagged with its exact kind.

    Construction checks that the Python type matches the kind and that numeric
    values fit it; FLOAT32 values are rounded to single precision.
    """

    kind: ScalarKind
    value: Any

    def __post_init__(self) -> None:
        if not _value_matches_kind(self.kind, self.value):
            raise TypeError(
                f"{type(self.value).__name__} value {self.value!r} cannot be tagged as {self.kind}")
        if self.kind.is_numeric and not self.kind.fits(self.value):
            raise RangeOverflowError(self.value, str(self.kind))
        if self.kind is ScalarKind.FLOAT32:
            object.__setattr__(self, "value", ctypes.c_float(self.value).value)

    @property
    def domain(self) -> Domain:
        return self.kind.domain

    def __str__(self) -> str:
        return str(self.value)
