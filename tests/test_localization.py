#!/usr/bin/env python3
"""
Tests for the message catalog.
"""

import logging

import pytest
import yaml

from cvar_console.localization import Localization


class TestLocalization:
    """Tests for Localization lookups and formatting."""

    def test_load_bundled_catalog(self):
        loc = Localization.load("en-US")
        assert loc.locale == "en-US"
        assert loc.has("cmd-cvar-desc")

    def test_load_missing_locale(self):
        with pytest.raises(FileNotFoundError):
            Localization.load("xx-XX")

    def test_named_arguments(self):
        loc = Localization.load()
        text = loc.translate("cmd-cvar-parse-error", type="Integer32")
        assert text == "Input value is in incorrect format for type Integer32"

    def test_missing_argument_keeps_placeholder(self):
        loc = Localization({"greet": "Hello {who}"})
        assert loc.translate("greet") == "Hello {who}"

    def test_missing_key_returns_key(self, caplog):
        loc = Localization({})
        with caplog.at_level(logging.WARNING, logger="cvar_console"):
            assert loc.translate("no-such-key") == "no-such-key"
            assert loc.translate("no-such-key") == "no-such-key"
        assert caplog.text.count("no-such-key") == 1

    def test_callable(self):
        loc = Localization({"a": "b"})
        assert loc("a") == "b"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "de-DE.yaml"
        path.write_text(yaml.safe_dump({
            "messages": {"cmd-cvar-value-hidden": "<versteckt>"},
        }))
        loc = Localization.from_yaml(path)
        assert loc.locale == "de-DE"
        assert loc.translate("cmd-cvar-value-hidden") == "<versteckt>"

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        loc = Localization.from_yaml(path)
        assert loc.translate("x") == "x"

    def test_bundled_keys_cover_command(self):
        """Test every key the cvar command uses has a message."""
        loc = Localization.load()
        for key in [
            "cmd-cvar-desc",
            "cmd-cvar-help",
            "cmd-cvar-invalid-args",
            "cmd-cvar-not-registered",
            "cmd-cvar-parse-error",
            "cmd-cvar-compl-list",
            "cmd-cvar-arg-name",
            "cmd-cvar-value-hidden",
            "shell-unknown-command",
            "shell-parse-error",
            "shell-command-failed",
        ]:
            assert loc.has(key), key
