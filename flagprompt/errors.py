#!/usr/bin/env python3
# flagprompt/errors.py
from __future__ import annotations

"""
Typed errors raised by the conversion layer.

Hierarchy:
    ConversionError
    ├── DomainMismatchError  - source/target kind outside the routine's domain
    ├── RangeOverflowError   - value does not fit the target kind
    └── InvalidLiteralError  - user text could not be parsed for a kind

The suggestion filter never raises any of these.
"""

from typing import Any


class ConversionError(Exception):
    """Base class for every conversion failure."""


class DomainMismatchError(ConversionError, TypeError):
    """A widen/narrow routine received a kind it does not handle (caller bug)."""


class RangeOverflowError(ConversionError, ValueError):
    """
    A value of a valid domain does not fit the requested kind.

    Attributes:
        value: The offending value.
        kind: Name of the target kind (e.g. 'int8').
    """

    def __init__(self, value: Any, kind: str) -> None:
        super().__init__(f"invalid value '{value}' for {kind} param")
        self.value = value
        self.kind = kind


class InvalidLiteralError(ConversionError, ValueError):
    """Raised when typed text is not a literal of the target kind."""

    def __init__(self, text: str, kind: str) -> None:
        super().__init__(f"cannot parse '{text}' as {kind}")
        self.text = text
        self.kind = kind
