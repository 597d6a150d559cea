"""Config schema validation helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import jsonschema

SCHEMA_PATH = Path(__file__).resolve().parent / "config-schema.json"


def load_schema(schema_path: Optional[Path] = None) -> Dict[str, Any]:
    path = schema_path or SCHEMA_PATH
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_config_schema(config_data: Dict[str, Any], schema_path: Optional[Path] = None) -> Tuple[bool, Optional[str]]:
    schema = load_schema(schema_path)
    try:
        jsonschema.validate(instance=config_data, schema=schema)
        return True, None
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path)
        if location:
            return False, f"{location}: {exc.message}"
        return False, exc.message
