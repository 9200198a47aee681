"""Config loading entry points for sha2hasher."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml
from pydantic import ValidationError

from .models import HasherSettings

DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("default.yaml")

CONFIG_ENV_VAR = "SHA2HASHER_CONFIG"
ENV_OVERRIDES: Mapping[str, str] = {
    "SHA2HASHER_ALGORITHM": "hashing.algorithm",
    "SHA2HASHER_MODE": "hashing.mode",
    "SHA2HASHER_CHUNK_SIZE": "hashing.chunk_size",
}


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> HasherSettings:
    """Load the configuration applying file, environment and explicit overrides.

    Precedence, lowest first: packaged defaults, ``path`` (or the file named by
    ``SHA2HASHER_CONFIG``), ``SHA2HASHER_*`` variables, ``overrides``.
    """

    default_data = _read_settings_file(DEFAULT_CONFIG_PATH)

    config_path = path
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR]).expanduser()

    config_data: dict[str, Any] = {}
    if config_path is not None:
        config_data = _read_settings_file(config_path)

    merged = _layer(
        default_data,
        config_data,
        _nest_dotted(_env_overrides()),
        _nest_dotted(overrides or {}),
    )

    try:
        return HasherSettings.model_validate(merged)
    except ValidationError as exc:
        source = config_path or DEFAULT_CONFIG_PATH
        raise ConfigError(f"Invalid configuration ({source}): {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    defaults = _read_settings_file(DEFAULT_CONFIG_PATH)
    if dest.suffix.lower() == ".json":
        text = json.dumps(defaults, indent=2)
    else:
        text = yaml.safe_dump(defaults, sort_keys=False)
    dest.write_text(text, encoding="utf-8")


def _env_overrides() -> dict[str, str]:
    result: dict[str, str] = {}
    for env_name, dotted in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value and value.strip():
            result[dotted] = value.strip()
    return result


_PARSERS: Mapping[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": tomllib.loads,
    ".json": json.loads,
}


def _read_settings_file(path: Path) -> dict[str, Any]:
    """Parse a YAML/TOML/JSON settings file whose top level must be a table."""

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigError(f"Unsupported config format for {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file {path} does not exist.") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read {path}: {exc}") from exc

    try:
        payload = parser(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"{path} must contain a table of settings, not {type(payload).__name__}.")
    return dict(payload)


def _layer(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Stack settings tables, later layers winning key by key at every depth."""

    result: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = result.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = _layer(current, value)
            else:
                result[key] = value
    return result


def _nest_dotted(flat: Mapping[str, Any]) -> dict[str, Any]:
    """Turn ``{"hashing.chunk_size": 4}`` into ``{"hashing": {"chunk_size": 4}}``."""

    nested: dict[str, Any] = {}
    for key, value in flat.items():
        *sections, leaf = str(key).split(".")
        entry: dict[str, Any] = {leaf: value}
        for section in reversed(sections):
            entry = {section: entry}
        nested = _layer(nested, entry)
    return nested


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "dump_example_config",
]
