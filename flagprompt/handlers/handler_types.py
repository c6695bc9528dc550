#!/usr/bin/env python3
# flagprompt/handlers/handler_types.py
from __future__ import annotations

"""
Handler description data structures and protocols.

This module defines:
- Suggest: one completable flag with a description and a typed default.
- GetSuggestFunc: the pluggable protocol for suggestion filters.
- HandlerInfo: a described command exposing its suggestions under a prefix.
"""

from dataclasses import dataclass, field
from typing import Protocol

from flagprompt.convert import Scalar, ScalarKind, coerce_text


@dataclass(frozen=True, slots=True)
class Suggest:
    """
    A completable flag token.

    Attributes:
        text: Bare flag name (no prefix), or the prefixed name in filter output.
        description: Human-readable help string.
        default: Typed default; a BOOL default marks the flag as boolean.
    """

    text: str
    description: str
    default: Scalar

    @property
    def is_bool(self) -> bool:
        return self.default.kind is ScalarKind.BOOL

    def coerce(self, text: str) -> Scalar:
        """Parse a typed value for this flag into the kind of its default."""
        return coerce_text(text, self.default.kind)


class GetSuggestFunc(Protocol):
    """Protocol for any suggestion filter. Implementations may raise."""

    def __call__(self, handler: HandlerInfo, input_text: str) -> list[Suggest]:  # pragma: no cover - signature only
        ...


@dataclass(frozen=True, slots=True)
class HandlerInfo:
    """
    One invocable command as seen by the completion engine.

    Important fields:
        suggests: Ordered suggestions; output order follows this order.
        suggest_prefix: Literal text preceding a flag name (e.g. '--').
        get_suggests: Alternative filter; None selects the default filter.
    """

    suggests: tuple[Suggest, ...] = ()
    suggest_prefix: str = "--"
    get_suggests: GetSuggestFunc | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.suggest_prefix:
            raise ValueError("suggest_prefix must be a non-empty string")
        object.__setattr__(self, "suggests", tuple(self.suggests))
