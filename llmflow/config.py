from __future__ import annotations

import os
from pathlib import Path
from typing import Any, ClassVar, Literal

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from llmflow.core.node import DEFAULT_NODE_NAME, Node
from llmflow.core.retry import MAX_RETRIES, MAX_WAIT_SECONDS


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# env name -> (section, key) in the config mapping
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "LLMFLOW_LOG_LEVEL": ("logging", "level"),
    "LLMFLOW_LOG_FORMAT": ("logging", "format"),
}


class LoggingSettings(BaseModel):

    level: LogLevel = Field(default="INFO")
    format: Literal["console", "json"] = Field(default="console")

    @field_validator("level", "format", mode="before")
    @classmethod
    def _normalize_case(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, str):
            return value
        value = value.strip()
        return value.upper() if info.field_name == "level" else value.lower()


class NodeSettings(BaseModel):
    """Defaults for nodes built from config; bounds match the node limits."""

    name: str = Field(default=DEFAULT_NODE_NAME, min_length=1)
    max_retries: int = Field(default=0, ge=0, le=MAX_RETRIES)
    wait: int = Field(default=0, ge=0, le=MAX_WAIT_SECONDS)  # seconds between retries

    def build(self, name: str | None = None) -> Node:
        """Build a node through the validating builders; `name` overrides the configured one."""
        return (
            Node.create(self.name if name is None else name)
            .with_retries(self.max_retries)
            .with_wait(self.wait)
        )


def default_config_paths() -> list[Path]:
    return [Path("llmflow.yaml"), Path.home() / ".config" / "llmflow" / "config.yaml"]


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse a YAML config file; syntax errors and non-mapping roots raise ValueError."""
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Malformed YAML at {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError(f"YAML at {path} must define a mapping at the root")
    return loaded


def apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of `raw` with LLMFLOW_* env values placed into their sections."""
    merged = dict(raw)
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if not value:
            continue
        current = merged.get(section) or {}
        # a non-mapping section is left for pydantic to reject
        if isinstance(current, dict):
            merged[section] = {**current, key: value}
    return merged


class FlowConfig(BaseSettings):
    """
    llmflow settings.

    Source of truth:
      1) YAML file (structured config)
      2) LLMFLOW_* env values listed in ENV_OVERRIDES, applied on top
         of the YAML mapping before validation
    """

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="",  # no automatic prefixing
        extra="ignore",
        case_sensitive=False,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    node: NodeSettings = Field(default_factory=NodeSettings)

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> FlowConfig:
        """
        Load config from YAML, then overlay env values.
        Without `path` the first existing file of default_config_paths() is used.

        Raises:
            ValueError: unreadable YAML or invalid values
                (pydantic.ValidationError is a ValueError).
        """
        candidates = [path] if path is not None else default_config_paths()
        source = next((p for p in candidates if p.exists()), None)
        raw = read_config_file(source) if source is not None else {}
        return cls.model_validate(apply_env_overrides(raw))


__all__ = [
    "ENV_OVERRIDES",
    "FlowConfig",
    "LogLevel",
    "LoggingSettings",
    "NodeSettings",
    "apply_env_overrides",
    "default_config_paths",
    "read_config_file",
]
