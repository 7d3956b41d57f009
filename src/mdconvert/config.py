"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDCONVERT_"


class Settings(BaseModel):
    app_name:       str  = "mdconvert"
    db_url:         str  = "sqlite:///mdconvert.db"
    output_dir:     str  = Field(default="dist",     description="Directory for rendered .html files")
    output_format:  str  = Field(default="html", pattern="^(html|document)$", description="html fragment or full document")
    document_title: str  = Field(default="Document", description="<title> used when output_format is document")
    shield_fences:  bool = Field(default=False, description="Keep fenced code out of header/inline/list rewriting")
    record_history: bool = Field(default=True,  description="Store each conversion in the database")
    max_history:    int  = Field(default=100, ge=0, description="Max stored conversions; 0 = unlimited")
    log_level:      str  = Field(default="WARNING", pattern="(?i)^(debug|info|warning|error|critical)$", description="stdlib logging level name")
    log_format:     str  = Field(default="console", pattern="^(console|json)$", description="console or json")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDCONVERT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
