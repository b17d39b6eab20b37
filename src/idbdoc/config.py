"""Renderer configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "IDBDOC_"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    title:           str  = Field(default="Code Class IndexedDB", description="Document <title>")
    stylesheet:      str  = Field(default="index.css", description="Stylesheet href; empty to omit")
    script:          str  = Field(
        default="https://cdn.jsdelivr.net/npm/idb@2.1.3/lib/idb.min.js",
        description="Script src; empty to omit",
    )
    language:        str  = Field(default="en", description="<html lang> attribute")
    parser_config:   str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    allow_html:      bool = Field(default=False, description="Pass raw HTML in the markdown through")
    highlight_class: str  = Field(default="highlight", pattern=r"^[A-Za-z_][\w-]*$",
                                  description="Class added to highlighted <pre> blocks")
    pygments_style:  str  = Field(default="default", description="Pygments style for the css command")
    indent:          int  = Field(default=2, ge=0, description="Spaces per nesting level")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then IDBDOC_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        val = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if val is not None:
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
