#!/usr/bin/env python3
# flagprompt/convert/__init__.py
from __future__ import annotations

"""
Typed scalar values and overflow-checked conversion.

Provides:
- Closed kind enumeration and tagged values (`ScalarKind`, `Domain`, `Scalar`).
- Widen/narrow pairs per numeric domain and the `convert_param` dispatcher.
- `coerce_text` for flag values typed at the prompt.
"""


from .kinds import Domain, Scalar, ScalarKind, FLOAT32_MAX, FLOAT64_MAX
from .numeric import (
    convert_param,
    narrow_float,
    narrow_int,
    narrow_uint,
    widen_float,
    widen_int,
    widen_uint,
)
from .text import coerce_text, parse_bool

__all__ = [
    # kinds
    "Domain",
    "Scalar",
    "ScalarKind",
    "FLOAT32_MAX",
    "FLOAT64_MAX",
    # numeric
    "convert_param",
    "narrow_float",
    "narrow_int",
    "narrow_uint",
    "widen_float",
    "widen_int",
    "widen_uint",
    # text
    "coerce_text",
    "parse_bool",
]
