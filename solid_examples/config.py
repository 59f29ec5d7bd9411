"""Configuration loading for solid-examples.

Reads an optional TOML config file from the working directory to control
which principles run, how long the simulated services wait, and which
registry keys the dependency-inversion demo wires together.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILENAMES = ("solid-examples.toml",)
LATENCY_SCALE_ENV = "SOLID_EXAMPLES_LATENCY_SCALE"

PRINCIPLE_CODES = ("srp", "ocp", "lsp", "isp", "dip")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ConfigError(ValueError):
    """Config file could not be read or failed validation."""


class DemoSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principles: list[str] = Field(default_factory=lambda: list(PRINCIPLE_CODES))

    @field_validator("principles")
    @classmethod
    def validate_principles(cls, v: list[str]) -> list[str]:
        unknown = [code for code in v if code not in PRINCIPLE_CODES]
        if unknown:
            raise ValueError(f"Unknown principles: {unknown}. Choose from {list(PRINCIPLE_CODES)}")
        return v


class ServiceSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    latency_scale: float = Field(default=1.0, ge=0)
    database: str = "mongo-db"
    email: str = "mock-email"
    payment: str = "mock-payment"


class RegistrySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strict: bool = False


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class SolidExamplesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    demo: DemoSettings = Field(default_factory=DemoSettings)
    services: ServiceSettings = Field(default_factory=ServiceSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    path: Path | None = None


def load_config(base_dir: Path) -> SolidExamplesConfig:
    """Load config from the first matching file in ``base_dir``.

    The latency scale may be overridden through SOLID_EXAMPLES_LATENCY_SCALE.
    """
    config = SolidExamplesConfig()
    for filename in CONFIG_FILENAMES:
        candidate = base_dir / filename
        if not candidate.exists():
            continue
        try:
            with candidate.open("rb") as f:
                data = tomllib.load(f)
            config = SolidExamplesConfig.model_validate({**data, "path": candidate})
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {candidate}: {exc}") from exc
        except ValidationError as exc:
            raise ConfigError(f"Invalid config in {candidate}:\n{exc}") from exc
        break

    return _apply_env_overrides(config)


def _apply_env_overrides(config: SolidExamplesConfig) -> SolidExamplesConfig:
    raw = os.environ.get(LATENCY_SCALE_ENV)
    if raw is None or not raw.strip():
        return config
    try:
        scale = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{LATENCY_SCALE_ENV} must be a number; got {raw!r}") from exc
    if scale < 0:
        raise ConfigError(f"{LATENCY_SCALE_ENV} must be >= 0; got {scale}")
    services = config.services.model_copy(update={"latency_scale": scale})
    return config.model_copy(update={"services": services})
