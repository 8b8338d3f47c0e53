from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ConfigDefaults

"""Config loader for conversion defaults.

Responsibilities:
- Resolve the YAML defaults file (--config > $EXCEL_JSON_CONFIG > config/excel_json.yml)
- Validate it against config_schema.json (additionalProperties: false)
- Return ConfigDefaults; built-in defaults when no file is configured
"""

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "load_config",
    "resolve_config_path",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/excel_json.yml")
CONFIG_ENV_VAR = "EXCEL_JSON_CONFIG"


class ConfigError(Exception):
    pass


def resolve_config_path(explicit: str | None = None) -> Path | None:
    """Find the config file to load.

    A path named explicitly (CLI or environment) is returned as-is so that a
    missing file surfaces as ConfigError. The implicit default path is only
    used when present; otherwise None (built-in defaults).
    """
    if explicit:
        return Path(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing/invalid, or the data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path | None) -> ConfigDefaults:
    if path is None:
        return ConfigDefaults()
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    base = ConfigDefaults()
    return ConfigDefaults(
        pretty=data.get("pretty", base.pretty),
        all_sheets=data.get("all_sheets", base.all_sheets),
        header=data.get("header", base.header),
        add_id=data.get("add_id", base.add_id),
        camel_case=data.get("camel_case", base.camel_case),
        na_strings=tuple(data.get("na_strings", base.na_strings)),
    )
