"""Shared pytest fixtures for the flagprompt test suite.

Guidelines
----------
* Core tests are pure function calls with no I/O.
* Config tests run against ``tmp_path`` and an explicit environ mapping.
"""

from __future__ import annotations

import pytest

from flagprompt.convert import Scalar, ScalarKind
from flagprompt.handlers import HandlerInfo, Suggest


@pytest.fixture
def verbose() -> Suggest:
    return Suggest("verbose", "print more output", Scalar(ScalarKind.BOOL, False))


@pytest.fixture
def count() -> Suggest:
    return Suggest("count", "number of repetitions", Scalar(ScalarKind.INT64, 0))


@pytest.fixture
def handler(verbose: Suggest, count: Suggest) -> HandlerInfo:
    return HandlerInfo(suggests=(verbose, count), suggest_prefix="--")
