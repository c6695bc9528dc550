#!/usr/bin/env python3
# flagprompt/handlers/__init__.py
from __future__ import annotations

"""
Package for handler descriptions consumed by the completion engine.

Re-exports `Suggest`, `HandlerInfo` and the `GetSuggestFunc` protocol.
"""


from .handler_types import GetSuggestFunc, HandlerInfo, Suggest

__all__ = [
    "GetSuggestFunc",
    "HandlerInfo",
    "Suggest",
]
