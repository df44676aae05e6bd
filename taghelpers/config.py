"""Configuration for the tag helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .io_utils import warn
from .tag_helper import TagStyle


class HelperConfig(BaseModel):
    """Settings shared by the asset helpers, template globals and CLI."""

    javascripts_dir: str = Field(
        "/javascripts",
        alias="javascriptsDir",
        description="Public path prefix for local script sources.",
    )
    javascript_extension: str = Field(
        ".js",
        alias="javascriptExtension",
        description="Suffix appended to local script names.",
    )
    tag_style: Literal["xhtml", "html4"] = Field(
        "xhtml",
        alias="tagStyle",
        description="Closing style for empty elements rendered from templates.",
    )
    escape: bool = Field(
        True, description="Escape attribute values and content by default."
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def style(self) -> TagStyle:
        return TagStyle(self.tag_style)


DEFAULT_CONFIG = HelperConfig()


def load_config(path: Path | None) -> HelperConfig:
    """Load a YAML config file, falling back to defaults when it is absent."""

    if path is None:
        return DEFAULT_CONFIG
    if not path.exists():
        warn(f"[config] {path} not found; using defaults")
        return DEFAULT_CONFIG

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of settings.")
    try:
        return HelperConfig.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid config in {path}: {exc}") from exc


__all__ = ["DEFAULT_CONFIG", "HelperConfig", "load_config"]
