"""Configuration loading and models."""

from .io import load_config, read_config_file
from .models import FixerConfig
from .schema import validate_config_schema

__all__ = ["FixerConfig", "load_config", "read_config_file", "validate_config_schema"]
