"""Tests for journi.conf loading."""

import logging

import pytest

from journi.config import Config, load_config


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str):
        path = tmp_path / "journi.conf"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.conf") == Config()

    def test_defaults(self):
        config = Config()
        assert config.journal_dir == ""
        assert config.file_extension == "txt"
        assert config.use_editor is True

    def test_parses_keys(self, write_config):
        path = write_config(
            "# Journi settings\n"
            "\n"
            "JOURNAL_DIR = ~/Documents/journal\n"
            "FILE_EXTENSION = .md\n"
            "USE_EDITOR = false\n"
        )

        config = load_config(path)

        assert config.journal_dir == "~/Documents/journal"
        assert config.file_extension == "md"
        assert config.use_editor is False

    def test_quoted_value_with_inline_comment(self, write_config):
        path = write_config('journal_dir = "/tmp/my # journal" # where entries live\n')
        assert load_config(path).journal_dir == "/tmp/my # journal"

    def test_single_quoted_value(self, write_config):
        path = write_config("journal_dir = '/srv/journal'\n")
        assert load_config(path).journal_dir == "/srv/journal"

    def test_unquoted_inline_comment(self, write_config):
        path = write_config("journal_dir = /srv/journal   # shared disk\n")
        assert load_config(path).journal_dir == "/srv/journal"

    def test_ignores_unknown_keys_and_junk_lines(self, write_config):
        path = write_config("colour = purple\nthis line has no equals sign\n")
        assert load_config(path) == Config()

    def test_invalid_boolean_keeps_default(self, write_config, caplog):
        path = write_config("use_editor = sometimes\n")

        with caplog.at_level(logging.WARNING, logger="journi.config"):
            config = load_config(path)

        assert config.use_editor is True
        assert "USE_EDITOR" in caplog.text

    @pytest.mark.parametrize("raw,expected", [("yes", True), ("On", True), ("0", False), ("no", False)])
    def test_boolean_spellings(self, write_config, raw, expected):
        path = write_config(f"use_editor = {raw}\n")
        assert load_config(path).use_editor is expected
