"""Configuration loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import project_config_path, runtime_config_dir
from .scanner.engine import ScannerConfig

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class ScanConfig(BaseModel):
    max_scan_chars: Optional[int] = Field(
        default=1_000_000,
        ge=1,
        description="Input is truncated to this many characters before scanning",
    )
    max_items_per_run: Optional[int] = Field(
        default=500,
        ge=1,
        description="Items beyond this ceiling are skipped in a batch",
    )
    pattern_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-pattern regex timeout in seconds",
    )
    include_special_categories: bool = Field(default=True)
    enabled: List[str] = Field(default_factory=list, description="Pattern names or PREFIX* selectors")
    disabled: List[str] = Field(default_factory=list)

    def scanner_config(self) -> ScannerConfig:
        return ScannerConfig(
            enabled=list(self.enabled) or None,
            disabled=list(self.disabled) or None,
            max_scan_chars=self.max_scan_chars,
            max_items_per_run=self.max_items_per_run,
            include_special_categories=self.include_special_categories,
            pattern_timeout=self.pattern_timeout,
        )


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield project_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ValueError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            try:
                with candidate.open("r", encoding="utf-8") as handle:
                    data = yaml.safe_load(handle) or {}
                return AppConfig.model_validate(data)
            except yaml.YAMLError as exc:
                raise ValueError(f"Malformed YAML in {candidate}: {exc}") from exc
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
