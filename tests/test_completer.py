"""Tests for the prompt_toolkit adapter (interface/completer.py)."""

from __future__ import annotations

import logging

import pytest
from prompt_toolkit.completion import CompleteEvent, Completion
from prompt_toolkit.document import Document

from flagprompt.config import PromptConfig
from flagprompt.handlers import HandlerInfo, Suggest
from flagprompt.interface.completer import (
    HandlerCompleter,
    current_token,
    make_completer,
    prompt_options,
)


def _complete(handler: HandlerInfo, text: str) -> list[Completion]:
    completer = HandlerCompleter(handler)
    return list(completer.get_completions(Document(text), CompleteEvent()))


def _config(*, enable: bool = True, while_typing: bool = True) -> PromptConfig:
    return PromptConfig(
        enable_completion=enable,
        complete_while_typing=while_typing,
    )


class TestCurrentToken:
    def test_partial_token(self) -> None:
        assert current_token("--count 3 --ve") == "--ve"

    def test_after_space(self) -> None:
        assert current_token("--count 3 ") == ""


class TestHandlerCompleter:
    def test_replaces_current_token(self, handler: HandlerInfo) -> None:
        (completion,) = _complete(handler, "--v")
        assert completion.text == "--verbose"
        assert completion.start_position == -3
        assert completion.display_meta_text == "print more output"

    def test_fresh_token_lists_everything(self, handler: HandlerInfo) -> None:
        completions = _complete(handler, "--verbose ")
        assert [c.text for c in completions] == ["--verbose", "--count"]
        assert all(c.start_position == 0 for c in completions)

    def test_no_completions_while_typing_value(self, handler: HandlerInfo) -> None:
        assert _complete(handler, "--count ") == []

    def test_failing_filter_is_logged(self, verbose: Suggest, caplog: pytest.LogCaptureFixture) -> None:
        def broken(handler: HandlerInfo, input_text: str) -> list[Suggest]:
            raise RuntimeError("backend down")

        handler = HandlerInfo(suggests=(verbose,), get_suggests=broken)
        with caplog.at_level(logging.ERROR, logger="flagprompt.interface.completer"):
            assert _complete(handler, "--v") == []
        assert "suggestion filter failed" in caplog.text

    def test_package_logger_is_silent_by_default(self) -> None:
        package_logger = logging.getLogger("flagprompt")
        assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


class TestFactories:
    def test_make_completer(self, handler: HandlerInfo) -> None:
        completer = make_completer(handler, _config())
        assert isinstance(completer, HandlerCompleter)
        assert completer.handler is handler

    def test_make_completer_disabled(self, handler: HandlerInfo) -> None:
        assert make_completer(handler, _config(enable=False)) is None

    def test_prompt_options(self, handler: HandlerInfo) -> None:
        options = prompt_options(handler, _config(while_typing=False))
        assert isinstance(options["completer"], HandlerCompleter)
        assert options["complete_while_typing"] is False

    def test_prompt_options_disabled(self, handler: HandlerInfo) -> None:
        options = prompt_options(handler, _config(enable=False))
        assert options == {"completer": None, "complete_while_typing": False}
