from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FixerConfig(BaseModel):
    """Settings for one invocation; command line flags override these."""

    model_config = ConfigDict(extra="forbid")

    verbose: bool = False
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[str] = None
    dry_run: bool = False
    allowed_extensions: List[str] = Field(default_factory=lambda: [".gba"])
    default_patches: List[str] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("at least one extension is required")
        return normalized

    def merged(self, **overrides: Any) -> "FixerConfig":
        """Copy with every non-None override applied."""
        updates: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=updates)
