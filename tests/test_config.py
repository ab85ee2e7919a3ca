# Area: Shared Tests
"""Tests for configuration loading and validation."""

import json

import pytest
from unittest.mock import patch
from xox_coordinator._config import DEFAULTS, ENV_MAPPINGS, load_config, validate_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove XOX_* variables so host settings do not leak in."""
    for key in ENV_MAPPINGS:
        monkeypatch.delenv(key, raising=False)


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        config = load_config(use_dotenv=False)
        assert config == DEFAULTS

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"board_width": 4, "store": "memory"}))
        config = load_config(str(path), use_dotenv=False)
        assert config["board_width"] == 4
        assert config["store"] == "memory"
        assert config["board_height"] == 3

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"board_width": 4}))
        monkeypatch.setenv("XOX_BOARD_WIDTH", "5")
        monkeypatch.setenv("XOX_JOINER_MARK", "Y")
        config = load_config(str(path), use_dotenv=False)
        assert config["board_width"] == 5
        assert config["joiner_mark"] == "Y"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "absent.json"), use_dotenv=False)
        assert config["store"] == "sqlite"

    def test_dotenv_loaded_first(self):
        with patch("xox_coordinator._config.load_dotenv") as mock_load:
            load_config()
            mock_load.assert_called_once()

    def test_dotenv_skipped(self):
        with patch("xox_coordinator._config.load_dotenv") as mock_load:
            load_config(use_dotenv=False)
            mock_load.assert_not_called()

    def test_non_integer_size(self, monkeypatch):
        monkeypatch.setenv("XOX_BOARD_HEIGHT", "tall")
        with pytest.raises(ValueError, match="board_height"):
            load_config(use_dotenv=False)


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_valid(self):
        validate_config(dict(DEFAULTS))

    def test_missing_key(self):
        config = dict(DEFAULTS)
        del config["store"]
        with pytest.raises(ValueError, match="Missing"):
            validate_config(config)

    def test_zero_width(self):
        with pytest.raises(ValueError):
            validate_config({**DEFAULTS, "board_width": 0})

    def test_unknown_store(self):
        with pytest.raises(ValueError, match="Unknown store"):
            validate_config({**DEFAULTS, "store": "redis"})

    @pytest.mark.parametrize("mark", ["", "XX", " "])
    def test_bad_mark(self, mark):
        with pytest.raises(ValueError):
            validate_config({**DEFAULTS, "creator_mark": mark})

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            validate_config({**DEFAULTS, "log_level": "bogus"})

    def test_lowercase_log_level(self):
        validate_config({**DEFAULTS, "log_level": "debug"})
