from __future__ import annotations

import logging
from pathlib import Path

import pytest

from digraph_core.config import (
    AppSettings,
    ConfigError,
    clear_settings_cache,
    configure_logging,
    get_settings,
)


def test_defaults() -> None:
    settings = get_settings()

    assert settings.logging.level == "INFO"
    assert settings.analysis.compare_labels is True


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()

    first = get_settings()
    clear_settings_cache()
    assert get_settings() is not first


def test_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIGRAPH_CORE_LOGGING__LEVEL", "WARNING")

    settings = get_settings(logging={"level": "DEBUG"})

    assert settings.logging.level == "DEBUG"


def test_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DIGRAPH_CORE_ANALYSIS__COMPARE_LABELS", "false")
    monkeypatch.setenv("DIGRAPH_CORE_LOGGING__LEVEL", "ERROR")

    settings = get_settings()

    assert settings.analysis.compare_labels is False
    assert settings.logging.level == "ERROR"


def test_toml_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "settings.toml"
    cfg.write_text('[analysis]\ncompare_labels = false\n\n[logging]\nlevel = "DEBUG"\n', encoding="utf-8")

    settings = get_settings(config_file=cfg)

    assert settings.analysis.compare_labels is False
    assert settings.logging.level == "DEBUG"


def test_config_toml_in_cwd_is_picked_up(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.toml").write_text('[logging]\nlevel = "CRITICAL"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert get_settings().logging.level == "CRITICAL"


def test_env_beats_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "config.toml"
    cfg.write_text('[logging]\nlevel = "CRITICAL"\n', encoding="utf-8")
    monkeypatch.setenv("DIGRAPH_CORE_LOGGING__LEVEL", "WARNING")

    assert get_settings(config_file=cfg).logging.level == "WARNING"


def test_missing_and_unsupported_config_files(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        get_settings(config_file=tmp_path / "nope.toml")

    ini = tmp_path / "config.ini"
    ini.write_text("[logging]\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        get_settings(config_file=ini)


def test_invalid_level_rejected() -> None:
    with pytest.raises(ValueError):
        AppSettings(logging={"level": "LOUD"})


def test_configure_logging_applies_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    settings = get_settings(logging={"level": "WARNING", "format": "%(message)s"})
    configure_logging(settings)

    assert captured == {"level": "WARNING", "format": "%(message)s", "force": True}


def test_configure_logging_defaults_to_cached_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setenv("DIGRAPH_CORE_LOGGING__LEVEL", "ERROR")

    configure_logging()

    assert captured["level"] == "ERROR"
