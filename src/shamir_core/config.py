"""Configuration loading utilities for shamir-core."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .paths import local_config_path, runtime_config_dir

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class SharingConfig(BaseModel):
    threshold: int = Field(default=3, gt=1, description="Default number of shares needed to restore")
    shares: int = Field(default=5, gt=1, description="Default number of shares to create")

    @model_validator(mode="after")
    def _check_threshold(self) -> "SharingConfig":
        if self.threshold > self.shares:
            raise ValueError(f"threshold ({self.threshold}) must not exceed shares ({self.shares})")
        return self


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sharing: SharingConfig = Field(default_factory=SharingConfig)


DEFAULT_CONFIG = AppConfig()
CONFIG_FILENAME = "config.yaml"


def default_config_path() -> Path:
    """Per-user location written by ``init-config`` and searched last."""
    return runtime_config_dir() / CONFIG_FILENAME


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield default_config_path()


def find_config(explicit: Optional[Path] = None) -> Optional[Path]:
    return next((candidate for candidate in config_search_paths(explicit) if candidate.is_file()), None)


def _read_config(source: Path) -> AppConfig:
    try:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Unreadable YAML in {source}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration in {source}: top level must be a mapping")
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration in {source}: {exc}") from exc


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load the first configuration file found, falling back to the defaults."""
    source = find_config(path)
    if source is None:
        return DEFAULT_CONFIG.model_copy(deep=True)
    return _read_config(source)


def dump_default_config(target: Path) -> None:
    """Write the default settings to ``target`` as YAML, creating parent directories."""
    target.parent.mkdir(parents=True, exist_ok=True)
    document = yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), sort_keys=False)
    target.write_text(document, encoding="utf-8")
