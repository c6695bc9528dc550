#!/usr/bin/env python3
# flagprompt/interface/suggestions.py
from __future__ import annotations

"""
Suggestion filtering for flag completion.

This module decides, for the text typed so far:
- whether the user is choosing a flag (offer fuzzy-matched flags), or
- typing a flag's value (offer nothing).

Tokenization rule:
  - Split on spaces, dropping empty pieces.
  - Empty input or a trailing space appends an empty token: a new flag is
    about to be typed. The last token is always the one being completed.
  - A flag token already holding '=' carries its own value and never leaves
    a value pending for the next token.
"""

import logging
from typing import Sequence

from flagprompt.handlers import HandlerInfo, Suggest
from flagprompt.interface.matcher import is_match

logger = logging.getLogger(__name__)


def split_input(input_text: str) -> list[str]:
    """Return the token stream for `input_text`; the last token is under completion."""
    tokens = [piece for piece in input_text.split(" ") if piece]
    if not input_text or input_text.endswith(" "):
        tokens.append("")
    return tokens


def is_suggest(token: str, suggest_prefix: str) -> bool:
    """True if `token` names a flag (starts with the handler prefix)."""
    return token.startswith(suggest_prefix)


def is_bool_suggest(suggests: Sequence[Suggest], token: str, suggest_prefix: str) -> bool:
    """True if `token` holds an assignment ('--name=') to a boolean flag."""
    for suggest in suggests:
        if f"{suggest_prefix}{suggest.text}=" in token:
            return suggest.is_bool
    return False


def is_input_not_bool_value(tokens: Sequence[str], suggest_prefix: str, suggests: Sequence[Suggest]) -> bool:
    """
    True if the token before the current one names a flag still waiting for its value.

    Unknown flag names are assumed to take a value.
    """
    if len(tokens) < 2:
        return False

    previous = tokens[-2]
    if not is_suggest(previous, suggest_prefix) or "=" in previous:
        return False

    name = previous[len(suggest_prefix):]
    for suggest in suggests:
        if suggest.text == name:
            return not suggest.is_bool
    return True


def is_typing_value(handler: HandlerInfo, tokens: Sequence[str]) -> bool:
    """True when the current token is a flag value rather than a flag name."""
    if len(tokens) <= 1:
        return False
    return (
        is_bool_suggest(handler.suggests, tokens[-1], handler.suggest_prefix)
        or is_input_not_bool_value(tokens, handler.suggest_prefix, handler.suggests)
    )


def default_get_handler_suggests(handler: HandlerInfo, input_text: str) -> list[Suggest]:
    """
    Default suggestion filter.

    Returns prefixed copies of every suggestion whose name fuzzy-matches the
    token under completion, in handler order, or an empty list while a flag
    value is being typed. Never raises.
    """
    tokens = split_input(input_text)

    if is_typing_value(handler, tokens):
        logger.debug("typing a flag value, no suggestions for %r", input_text)
        return []

    current = tokens[-1]
    return [
        Suggest(
            text=handler.suggest_prefix + suggest.text,
            description=suggest.description,
            default=suggest.default,
        )
        for suggest in handler.suggests
        if is_match(current, suggest.text)
    ]


def get_handler_suggests(handler: HandlerInfo, input_text: str) -> list[Suggest]:
    """Run the handler's own filter if it has one, otherwise the default."""
    get_suggests = handler.get_suggests or default_get_handler_suggests
    return get_suggests(handler, input_text)
