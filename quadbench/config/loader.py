# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: reads YAML from disk and produces a validated, frozen
QuadBenchConfig.

The pipeline is linear:
  1. Read the file as text
  2. Parse as YAML into a plain dict
  3. Hand the dict to pydantic for schema validation
  4. Return the frozen config object

Any failure stops here with a clear error. There is no fallback to defaults for
a broken file; defaults only apply when no file is given at all.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quadbench.config.exceptions import ConfigLoadError, ConfigValidationError
from quadbench.config.schema import QuadBenchConfig

DEFAULT_CONFIG_VERSION = "1.0.0"


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Read a YAML file and return the parsed dict.

    Raises:
        ConfigLoadError: If the file doesn't exist, isn't readable, or isn't a YAML mapping.
    """
    if not config_path.exists():
        raise ConfigLoadError(f"Config file not found: {config_path}", config_path)

    if not config_path.is_file():
        raise ConfigLoadError(f"Config path is not a file: {config_path}", config_path)

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}", config_path) from err

    try:
        parsed = yaml.safe_load(raw_text)
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}", config_path) from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file must contain a YAML mapping (dict), got {type(parsed).__name__}",
            config_path,
        )

    return parsed


def load_config(config_path: Path) -> QuadBenchConfig:
    """
    Load, validate, and freeze a config file.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations (missing fields, wrong types, unknown keys).
    """
    raw_data = _read_yaml_file(config_path)

    try:
        config = QuadBenchConfig.model_validate(raw_data)
    except ValidationError as err:
        fields = tuple(".".join(str(part) for part in error["loc"]) for error in err.errors())
        raise ConfigValidationError(
            f"Config validation failed for {config_path}:\n{err}",
            config_path,
            fields=fields,
        ) from err

    return config


def default_config() -> QuadBenchConfig:
    """The config used when no file is given: the reference sweep."""
    return QuadBenchConfig.model_validate({"global": {"config_version": DEFAULT_CONFIG_VERSION}})
