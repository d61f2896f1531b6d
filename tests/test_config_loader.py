import pytest
from pydantic import ValidationError

from contracts_api.utils.config_loader import load_app_config


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    cfg = load_app_config(tmp_path / "missing.yml")
    assert cfg.business.deposit_cap_ratio == 0.25
    assert cfg.reporting.best_clients_default_limit == 2
    assert cfg.database.url.startswith("sqlite")


def test_yaml_values_and_env_override(tmp_path, monkeypatch):
    path = tmp_path / "app_config.yml"
    path.write_text(
        "database:\n  url: sqlite:///from-file.db\nbusiness:\n  deposit_cap_ratio: 0.5\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db/contracts")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    cfg = load_app_config(path)
    assert cfg.database.url == "postgresql+psycopg://u:p@db/contracts"
    assert cfg.business.deposit_cap_ratio == 0.5
    assert cfg.logging.level == "DEBUG"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "other.yml"
    path.write_text("reporting:\n  best_clients_default_limit: 5\n", encoding="utf-8")
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))
    assert load_app_config().reporting.best_clients_default_limit == 5


def test_invalid_config_raises(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("business:\n  deposit_cap_ratio: 3\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_app_config(path)


def test_log_level_env_is_normalised(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = load_app_config(tmp_path / "missing.yml")
    assert cfg.logging.level == "DEBUG"


def test_unknown_log_level_env_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        load_app_config(tmp_path / "missing.yml")


def test_best_clients_max_limit_from_yaml(tmp_path, monkeypatch):
    path = tmp_path / "app_config.yml"
    path.write_text("reporting:\n  best_clients_max_limit: 50\n", encoding="utf-8")
    assert load_app_config(path).reporting.best_clients_max_limit == 50
