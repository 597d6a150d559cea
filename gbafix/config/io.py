"""Config I/O utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pydantic
import yaml

from ..exceptions import ConfigurationError, ValidationError
from .models import FixerConfig
from .schema import validate_config_schema

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


def read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(config_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"couldn't read config {path}: {exc}", file_path=str(path)) from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"couldn't parse config {path}: {exc}", file_path=str(path)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(f"config {path} must contain a mapping", file_path=str(path))
    return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> FixerConfig:
    """Load and validate a config file; no path means defaults."""
    if config_path is None:
        return FixerConfig()

    data = read_config_file(config_path)
    ok, error = validate_config_schema(data)
    if not ok:
        raise ValidationError(f"config {config_path} is invalid: {error}", file_path=str(config_path))

    try:
        config = FixerConfig(**data)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        field_name = ".".join(str(p) for p in first.get("loc", ()))
        raise ValidationError(
            f"config {config_path} is invalid: {first.get('msg')}",
            field_name=field_name or None,
            file_path=str(config_path),
        ) from exc

    logger.debug("Loaded config from %s", config_path)
    return config
