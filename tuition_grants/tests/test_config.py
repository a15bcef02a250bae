"""Tests for configuration validation."""

import os
import pytest
from unittest.mock import patch

from tuition_grants.config import load_config, validate_config


def _clean_env():
    return {k: v for k, v in os.environ.items() if not k.startswith("TUITION_GRANTS_")}


class TestConfigValidation:
    """Test startup config validation."""

    VALID_ENV = {
        "TUITION_GRANTS_MAX_APPLICATIONS": "10",
        "TUITION_GRANTS_APPLICATION_NUMBER_PREFIX": "GA",
        "TUITION_GRANTS_SHORTFALL_CAP": "75000",
        "TUITION_GRANTS_CLEAR_SCREEN": "false",
        "TUITION_GRANTS_LOG_LEVEL": "debug",
    }

    def test_defaults_without_environment(self):
        """Empty environment → stock console settings."""
        with patch.dict(os.environ, _clean_env(), clear=True):
            config = load_config()

        assert config.max_applications == 5000
        assert config.application_number_offset == 1000
        assert config.application_number_prefix == "UL"
        assert config.shortfall_cap == 50000.0
        assert config.effective_shortfall_cap == 50000.0
        assert config.thresholds_file is None
        assert config.clear_screen is True
        assert config.use_color is True
        assert config.log_level == "WARNING"

    def test_environment_overrides(self):
        env = _clean_env()
        env.update(self.VALID_ENV)
        with patch.dict(os.environ, env, clear=True):
            config = validate_config()

        assert config.max_applications == 10
        assert config.application_number_prefix == "GA"
        assert config.shortfall_cap == 75000.0
        assert config.clear_screen is False
        assert config.log_level == "DEBUG"

    def test_uncapped_shortfall(self):
        env = _clean_env()
        env["TUITION_GRANTS_ENFORCE_SHORTFALL_CAP"] = "false"
        with patch.dict(os.environ, env, clear=True):
            config = validate_config()

        assert config.effective_shortfall_cap is None

    def test_keyword_overrides_win(self):
        env = _clean_env()
        env["TUITION_GRANTS_USE_COLOR"] = "true"
        with patch.dict(os.environ, env, clear=True):
            config = validate_config(use_color=False, thresholds_file="rules.yaml")

        assert config.use_color is False
        assert config.thresholds_file == "rules.yaml"

    def test_invalid_settings_all_reported(self):
        """Every invalid setting is named, not just the first one."""
        env = _clean_env()
        env["TUITION_GRANTS_MAX_APPLICATIONS"] = "0"
        env["TUITION_GRANTS_LOG_LEVEL"] = "LOUD"
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError) as exc_info:
                validate_config()

        err_msg = str(exc_info.value)
        assert "TUITION_GRANTS_MAX_APPLICATIONS" in err_msg
        assert "TUITION_GRANTS_LOG_LEVEL" in err_msg

    def test_non_numeric_setting(self):
        env = _clean_env()
        env["TUITION_GRANTS_SHORTFALL_CAP"] = "lots"
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError, match="TUITION_GRANTS_SHORTFALL_CAP"):
                validate_config()

    def test_negative_cap_rejected(self):
        with pytest.raises(ValueError, match="shortfall_cap must not be negative"):
            validate_config(shortfall_cap=-1)
