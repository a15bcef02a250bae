"""Tests for the console entry point."""

import logging
import os
from unittest.mock import patch

from tuition_grants.config import DEFAULT_THRESHOLDS
from tuition_grants.main import build_parser, main


def _clean_env():
    return {k: v for k, v in os.environ.items() if not k.startswith("TUITION_GRANTS_")}


def test_parser_flags():
    args = build_parser().parse_args(["--thresholds", "rules.yaml", "--no-clear", "--no-color"])

    assert args.thresholds == "rules.yaml"
    assert args.no_clear is True
    assert args.no_color is True
    assert args.log_level is None


def test_main_runs_session_with_flags():
    with patch.dict(os.environ, _clean_env(), clear=True), \
            patch("tuition_grants.main.GrantSession") as session_class:
        exit_code = main(["--no-clear", "--no-color"])

    assert exit_code == 0
    config = session_class.call_args.args[0]
    assert config.clear_screen is False
    assert config.use_color is False
    assert session_class.call_args.kwargs["thresholds"] is DEFAULT_THRESHOLDS
    session_class.return_value.run.assert_called_once()


def test_main_loads_thresholds_file(tmp_path):
    rules = tmp_path / "rules.yaml"
    rules.write_text("min_gpa: 2.7\nversion: stricter\n")

    with patch.dict(os.environ, _clean_env(), clear=True), \
            patch("tuition_grants.main.GrantSession") as session_class:
        exit_code = main(["--thresholds", str(rules)])

    assert exit_code == 0
    thresholds = session_class.call_args.kwargs["thresholds"]
    assert thresholds.min_gpa == 2.7
    assert thresholds.version == "stricter"


def test_main_missing_thresholds_file(tmp_path):
    with patch.dict(os.environ, _clean_env(), clear=True), \
            patch("tuition_grants.main.GrantSession") as session_class:
        exit_code = main(["--thresholds", str(tmp_path / "missing.yaml")])

    assert exit_code == 2
    session_class.assert_not_called()


def test_main_invalid_config():
    with patch.dict(os.environ, _clean_env(), clear=True), \
            patch("tuition_grants.main.GrantSession") as session_class:
        exit_code = main(["--log-level", "LOUD"])

    assert exit_code == 2
    session_class.assert_not_called()


def test_main_logs_loaded_thresholds_at_debug(caplog):
    with patch.dict(os.environ, _clean_env(), clear=True), \
            patch("tuition_grants.main.GrantSession"), \
            caplog.at_level(logging.DEBUG):
        exit_code = main(["--log-level", "DEBUG"])

    assert exit_code == 0
    assert "thresholds_loaded" in caplog.text
    assert "'min_gpa': 2.5" in caplog.text
