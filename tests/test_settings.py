"""Tests for settings loading and logging configuration."""

from __future__ import annotations

import json
import logging
from datetime import date

import pytest

from finance_tools import config
from finance_tools.lib.analytics import recent_average_spend
from finance_tools.settings import get_config_value, load_config


def test_tools_config_has_window() -> None:
    assert load_config('tools')['projection']['recent_window_days'] == 30


def test_get_config_value_defaults() -> None:
    assert get_config_value('tools', 'projection', 'recent_window_days') == 30
    assert get_config_value('tools', 'projection', 'missing', default=7) == 7
    assert get_config_value('nope', 'anything', default='x') == 'x'
    assert get_config_value('tools', 'projection', 'recent_window_days', 'deeper', default=0) == 0


def test_load_config_missing_file() -> None:
    with pytest.raises(FileNotFoundError):
        load_config('does_not_exist')


def test_config_dir_env_override(tmp_path, monkeypatch) -> None:
    (tmp_path / 'tools.json').write_text(
        json.dumps({'projection': {'recent_window_days': 1}}), encoding='utf-8'
    )
    monkeypatch.setenv('FINTOOLS_CONFIG_DIR', str(tmp_path))

    assert config.get_config_dir() == tmp_path.resolve()
    records = [
        {'amount': 10, 'date': '2024-03-31'},
        {'amount': 30, 'date': '2024-03-20'},
    ]
    assert recent_average_spend(records, today=date(2024, 3, 31)) == pytest.approx(10)


def test_configure_logging_sets_package_level(monkeypatch) -> None:
    package_logger = logging.getLogger('finance_tools')
    original = package_logger.level
    try:
        config.configure_logging('debug')
        assert package_logger.level == logging.DEBUG

        monkeypatch.setenv('FINTOOLS_LOG_LEVEL', 'ERROR')
        config.configure_logging()
        assert package_logger.level == logging.ERROR

        config.configure_logging('not-a-level')
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(original)


def test_malformed_settings_file_raises(tmp_path, monkeypatch) -> None:
    (tmp_path / 'tools.json').write_text('{not json', encoding='utf-8')
    monkeypatch.setenv('FINTOOLS_CONFIG_DIR', str(tmp_path))

    with pytest.raises(json.JSONDecodeError):
        get_config_value('tools', 'projection', 'recent_window_days', default=30)
