#!/usr/bin/env python3
# flagprompt/config.py
from __future__ import annotations

"""
Completion settings.

Precedence (low → high):
  1) Built-in defaults (completion on, complete while typing)
  2) [completion] table of flagprompt.toml in the given directory (CWD by default)
  3) Environment variables FLAGPROMPT_ENABLE_COMPLETION / FLAGPROMPT_COMPLETE_WHILE_TYPING

Both settings are booleans; TOML booleans are taken as-is, strings accept the
same yes/no words as boolean flags.
"""

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from flagprompt.convert import parse_bool
from flagprompt.errors import InvalidLiteralError

ENV_PREFIX = "FLAGPROMPT_"
CONFIG_FILE_NAME = "flagprompt.toml"
CONFIG_TABLE = "completion"


@dataclass(frozen=True)
class PromptConfig:
    enable_completion: bool = True
    complete_while_typing: bool = True


SETTING_NAMES: tuple[str, ...] = tuple(f.name for f in fields(PromptConfig))


def _read_table(path: Path) -> dict[str, Any]:
    """Return the [completion] table of `path`, or {} when the file is absent."""
    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"{path.name} is not valid TOML: {exc}") from exc

    table = document.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{CONFIG_TABLE}] in {path.name} must be a table")
    unknown = sorted(set(table) - set(SETTING_NAMES))
    if unknown:
        raise ValueError(f"Unknown setting(s) in {path.name}: {', '.join(unknown)}")
    return table


def _as_setting(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    try:
        return parse_bool(str(value))
    except InvalidLiteralError as exc:
        raise ValueError(f"{name} expects a boolean, got {value!r}") from exc


def load_config(base: Path | None = None, environ: Mapping[str, str] | None = None) -> PromptConfig:
    """
    Build the completion settings.

    `base` defaults to the CWD and `environ` to os.environ.
    Raises ValueError on malformed files or values.
    """
    raw = _read_table((base or Path.cwd()) / CONFIG_FILE_NAME)

    env = os.environ if environ is None else environ
    for name in SETTING_NAMES:
        env_key = ENV_PREFIX + name.upper()
        if env_key in env:
            raw[name] = env[env_key]

    return PromptConfig(**{name: _as_setting(name, value) for name, value in raw.items()})
