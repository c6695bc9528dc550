#!/usr/bin/env python3
# flagprompt/interface/__init__.py
from __future__ import annotations

"""
Package for flag completion.

Provides:
- Fuzzy subsequence matching.
- The default suggestion filter and its token helpers.
- A prompt_toolkit completer wired to a handler.
"""


# Matcher FIRST (suggestions depend on it)
from .matcher import is_match

# Suggestion filter
from .suggestions import (
    default_get_handler_suggests,
    get_handler_suggests,
    is_bool_suggest,
    is_input_not_bool_value,
    is_suggest,
    is_typing_value,
    split_input,
)

# prompt_toolkit adapter
from .completer import HandlerCompleter, current_token, make_completer, prompt_options

__all__ = [
    # matcher
    "is_match",
    # suggestions
    "default_get_handler_suggests",
    "get_handler_suggests",
    "is_bool_suggest",
    "is_input_not_bool_value",
    "is_suggest",
    "is_typing_value",
    "split_input",
    # completer
    "HandlerCompleter",
    "current_token",
    "make_completer",
    "prompt_options",
]
