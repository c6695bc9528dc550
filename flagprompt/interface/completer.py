#!/usr/bin/env python3
# flagprompt/interface/completer.py
from __future__ import annotations

"""
prompt_toolkit adapter for handler suggestions.

A prompt loop plugs `HandlerCompleter` into `prompt(..., completer=...)`;
each completion replaces exactly the token under completion.
"""

import logging
from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from flagprompt.config import PromptConfig
from flagprompt.handlers import HandlerInfo
from flagprompt.interface.suggestions import get_handler_suggests, split_input

logger = logging.getLogger(__name__)


def current_token(text_before_cursor: str) -> str:
    """Return the token being completed (empty after a trailing space)."""
    return split_input(text_before_cursor)[-1]


class HandlerCompleter(Completer):
    """Live flag completion for one handler."""

    def __init__(self, handler: HandlerInfo) -> None:
        self.handler = handler

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        try:
            suggests = get_handler_suggests(self.handler, text_before_cursor)
        except Exception:
            logger.exception("suggestion filter failed for %r", text_before_cursor)
            return

        replace_len = len(current_token(text_before_cursor))
        for suggest in suggests:
            yield Completion(
                suggest.text,
                start_position=-replace_len,
                display_meta=suggest.description,
            )


def make_completer(handler: HandlerInfo, config: PromptConfig) -> HandlerCompleter | None:
    """Return a completer for `handler`, or None when completion is disabled."""
    if not config.enable_completion:
        return None
    return HandlerCompleter(handler)


def prompt_options(handler: HandlerInfo, config: PromptConfig) -> dict[str, object]:
    """Keyword arguments for prompt_toolkit's `prompt()` wiring in completion."""
    completer = make_completer(handler, config)
    return {
        "completer": completer,
        "complete_while_typing": completer is not None and config.complete_while_typing,
    }
