"""Tests for completion settings (config.py).

Every test loads from ``tmp_path`` with an explicit environ mapping, so the
real CWD and process environment never leak in.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from flagprompt.config import CONFIG_FILE_NAME, PromptConfig, load_config


def _write(tmp_path: Path, text: str) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text(text, encoding="utf-8")


class TestDefaults:
    def test_no_file_no_env(self, tmp_path: Path) -> None:
        assert load_config(tmp_path, {}) == PromptConfig(
            enable_completion=True, complete_while_typing=True)


class TestFile:
    def test_completion_table(self, tmp_path: Path) -> None:
        _write(tmp_path, "[completion]\nenable_completion = false\n")
        config = load_config(tmp_path, {})
        assert config.enable_completion is False
        assert config.complete_while_typing is True

    def test_string_values_use_yes_no_words(self, tmp_path: Path) -> None:
        _write(tmp_path, '[completion]\ncomplete_while_typing = "off"\n')
        assert load_config(tmp_path, {}).complete_while_typing is False

    def test_other_tables_are_ignored(self, tmp_path: Path) -> None:
        _write(tmp_path, '[theme]\nname = "dark"\n')
        assert load_config(tmp_path, {}) == PromptConfig()

    def test_unknown_setting(self, tmp_path: Path) -> None:
        _write(tmp_path, "[completion]\nmax_items = 10\n")
        with pytest.raises(ValueError, match="max_items"):
            load_config(tmp_path, {})

    def test_malformed_toml(self, tmp_path: Path) -> None:
        _write(tmp_path, "[completion\n")
        with pytest.raises(ValueError, match="not valid TOML"):
            load_config(tmp_path, {})

    def test_completion_must_be_a_table(self, tmp_path: Path) -> None:
        _write(tmp_path, 'completion = "yes"\n')
        with pytest.raises(ValueError, match="must be a table"):
            load_config(tmp_path, {})


class TestEnvironment:
    def test_env_overrides_file(self, tmp_path: Path) -> None:
        _write(tmp_path, "[completion]\nenable_completion = false\n")
        config = load_config(tmp_path, {"FLAGPROMPT_ENABLE_COMPLETION": "yes"})
        assert config.enable_completion is True

    def test_unprefixed_env_is_ignored(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, {"ENABLE_COMPLETION": "0", "PATH": "/bin"})
        assert config.enable_completion is True

    def test_defaults_to_process_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLAGPROMPT_COMPLETE_WHILE_TYPING", "0")
        assert load_config(tmp_path).complete_while_typing is False

    def test_bad_bool(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="enable_completion expects a boolean"):
            load_config(tmp_path, {"FLAGPROMPT_ENABLE_COMPLETION": "sometimes"})
