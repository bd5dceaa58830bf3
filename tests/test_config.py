#!/usr/bin/env python3
"""
Tests for configuration management module.
"""

import json
import pytest
from unittest.mock import patch

from cvar_console.config import DEFAULTS, ConfigManager, ConsoleConfig


# ============================================================================
# Config Model Tests
# ============================================================================

class TestConsoleConfig:
    """Tests for ConsoleConfig model."""

    def test_create_empty_config(self):
        """Test creating config with all defaults."""
        cfg = ConsoleConfig()
        assert cfg.locale is None
        assert cfg.log_level is None
        assert cfg.log_file is None
        assert cfg.history_file is None
        assert cfg.redact_reads is None

    def test_get_with_value(self):
        cfg = ConsoleConfig(log_level="DEBUG")
        assert cfg.get("log_level") == "DEBUG"

    def test_get_with_none(self):
        """Test get falls back to DEFAULTS when unset."""
        cfg = ConsoleConfig()
        assert cfg.get("locale") == DEFAULTS["locale"]
        assert cfg.get("redact_reads") is False

    def test_get_unknown_key(self):
        cfg = ConsoleConfig()
        assert cfg.get("unknown_key") is None
        assert cfg.get("unknown_key", "default") == "default"

    def test_ignores_extra_fields(self):
        cfg = ConsoleConfig.model_validate({"_comment": "x", "locale": "en-US"})
        assert cfg.locale == "en-US"


# ============================================================================
# ConfigManager Tests
# ============================================================================

class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.fixture
    def mgr(self, tmp_path):
        """ConfigManager pointed at a temporary directory."""
        config_dir = tmp_path / ".cvar_console"
        config_file = config_dir / "config.json"
        with patch.object(ConfigManager, "CONFIG_DIR", config_dir), \
                patch.object(ConfigManager, "CONFIG_FILE", config_file):
            yield ConfigManager()

    def test_load_nonexistent_config(self, mgr):
        cfg = mgr.load()
        assert cfg.locale is None
        assert not mgr.CONFIG_FILE.exists()

    def test_save_and_load_config(self, mgr):
        mgr.save(ConsoleConfig(log_level="INFO", redact_reads=True))
        assert mgr.CONFIG_FILE.exists()

        cfg = ConfigManager().load()
        assert cfg.log_level == "INFO"
        assert cfg.redact_reads is True

    def test_save_preserves_unknown_keys(self, mgr):
        mgr.CONFIG_DIR.mkdir(parents=True)
        mgr.CONFIG_FILE.write_text(json.dumps({"_comment": "keep me"}))
        mgr.save(ConsoleConfig(locale="en-US"))
        data = json.loads(mgr.CONFIG_FILE.read_text())
        assert data["_comment"] == "keep me"
        assert data["locale"] == "en-US"

    def test_load_invalid_json(self, mgr):
        mgr.CONFIG_DIR.mkdir(parents=True)
        mgr.CONFIG_FILE.write_text("{not json")
        cfg = mgr.load()
        assert cfg.locale is None

    def test_load_invalid_field_type(self, mgr):
        mgr.CONFIG_DIR.mkdir(parents=True)
        mgr.CONFIG_FILE.write_text(json.dumps({"redact_reads": "maybe"}))
        cfg = mgr.load()
        assert cfg.redact_reads is None

    def test_set(self, mgr):
        mgr.set("log_level", "DEBUG")
        assert mgr.get("log_level") == "DEBUG"
        data = json.loads(mgr.CONFIG_FILE.read_text())
        assert data["log_level"] == "DEBUG"

    def test_set_unknown_key(self, mgr):
        with pytest.raises(ValueError, match="Unknown config key"):
            mgr.set("nope", 1)

    def test_list_settings(self, mgr):
        mgr.save(ConsoleConfig(locale=DEFAULTS["locale"], log_level="DEBUG"))
        assert mgr.list_settings() == {"log_level": "DEBUG"}

    def test_reset(self, mgr):
        mgr.save(ConsoleConfig(log_level="DEBUG"))
        mgr.reset()
        assert not mgr.CONFIG_FILE.exists()
        assert mgr.get("log_level") == DEFAULTS["log_level"]
