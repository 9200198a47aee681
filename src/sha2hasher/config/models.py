"""Pydantic models describing sha2hasher configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sha2hasher.hashing.stream import DEFAULT_CHUNK_SIZE
from sha2hasher.hashing.variants import HashVariant


class HashingConfig(BaseModel):
    """Algorithm, execution mode and read-buffer tuning."""

    model_config = ConfigDict(extra="forbid")

    algorithm: HashVariant = HashVariant.SHA256
    mode: Literal["blocking", "async"] = "blocking"
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> HashVariant:
        return HashVariant.parse(value)


class SidecarConfig(BaseModel):
    """Checksum files written next to each hashed file."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    extension: Optional[str] = None

    @field_validator("extension")
    @classmethod
    def _leading_dot(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("extension must not be empty")
        return value if value.startswith(".") else f".{value}"

    def extension_for(self, variant: HashVariant) -> str:
        """Return the configured extension or ``.<algorithm>`` (e.g. ``.sha256``)."""
        return self.extension or f".{variant.value}"


class LoggingConfig(BaseModel):
    """Log level and optional log file."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class HasherSettings(BaseModel):
    """Root configuration object for sha2hasher."""

    model_config = ConfigDict(extra="forbid")

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    sidecar: SidecarConfig = Field(default_factory=SidecarConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "HasherSettings",
    "HashingConfig",
    "LoggingConfig",
    "SidecarConfig",
]
