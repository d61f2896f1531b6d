"""
Configuration loader for the contracts API
"""

import os
import yaml
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
import logging

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    """Relational store connection settings"""

    url: str = "sqlite:///./contracts.sqlite3"
    pool_size: int = Field(default=5, ge=1, le=100)
    max_overflow: int = Field(default=10, ge=0, le=100)
    create_tables: bool = True


class BusinessConfig(BaseModel):
    """Balance rules"""

    deposit_cap_ratio: float = Field(default=0.25, gt=0.0, le=1.0)


class ReportingConfig(BaseModel):
    """Admin report defaults"""

    best_clients_default_limit: int = Field(default=2, ge=1, le=1000)
    best_clients_max_limit: int = Field(default=1000, ge=1, le=100000)


class LoggingConfig(BaseModel):
    level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class AppConfig(BaseModel):
    """Complete API configuration"""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    business: BusinessConfig = Field(default_factory=BusinessConfig)
    reporting: ReportingConfig = Field(default_factory=ReportingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _default_config_path() -> Path:
    env_path = os.getenv("APP_CONFIG_PATH")
    if env_path:
        return Path(env_path)
    return Path(__file__).parent.parent.parent / "config" / "app_config.yml"


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate API configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to $APP_CONFIG_PATH or config/app_config.yml

    Returns:
        Validated AppConfig, with DATABASE_URL and LOG_LEVEL applied on top

    Raises:
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = _default_config_path()

    data = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.warning("Config file not found: %s; using defaults", config_path)

    # environment overrides go through the same validation as the file
    if os.getenv("DATABASE_URL"):
        data["database"] = dict(data.get("database") or {})
        data["database"]["url"] = os.environ["DATABASE_URL"]
    if os.getenv("LOG_LEVEL"):
        data["logging"] = dict(data.get("logging") or {})
        data["logging"]["level"] = os.environ["LOG_LEVEL"]

    try:
        config = AppConfig(**data)
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise

    logger.info(f"Successfully loaded config from {config_path}")
    return config
