"""Configuration loading utilities for keycodec."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import local_config_path, runtime_config_dir


class CodecConfig(BaseModel):
    line_length: int = Field(default=64, gt=0, le=76, description="Base64 characters per PEM line")
    strip_public_wrapper: bool = Field(
        default=True,
        description="Strip the SubjectPublicKeyInfo wrapper when decoding public keys",
    )

    @field_validator("line_length")
    @classmethod
    def _validate_line_length(cls, value: int) -> int:
        if value % 4:
            raise ValueError("line_length must be a multiple of 4")
        return value


class KeyGenConfig(BaseModel):
    algorithm: str = Field(default="rsa2048", description="Default key pair algorithm")
    public_exponent: int = Field(default=65537, ge=3)

    @field_validator("public_exponent")
    @classmethod
    def _validate_exponent(cls, value: int) -> int:
        if value % 2 == 0:
            raise ValueError("public_exponent must be odd")
        return value


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    codec: CodecConfig = Field(default_factory=CodecConfig)
    keys: KeyGenConfig = Field(default_factory=KeyGenConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "CodecConfig",
    "KeyGenConfig",
    "LoggingConfig",
    "DEFAULT_CONFIG",
    "config_search_paths",
    "load_config",
    "dump_default_config",
]
