# === FILE: robots_rules/config.py ===
"""
Configuration for a robots_rules session.
Uses Pydantic for the schema and validation; files may be YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from robots_rules.crawler.fetcher import DEFAULT_TIMEOUT


class RobotsConfig(BaseModel):
    """Options of one crawler identity."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field("RobotsRules/0.1", min_length=1, description="User-Agent matched against robots.txt groups.")
    skip_delay: bool = Field(False, description="Do not sleep for Crawl-delay inside allowed().")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="robots.txt fetch timeout (seconds).")

    @field_validator("user_agent", mode="before")
    def _strip_agent(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> RobotsConfig:
    """
    Read a YAML or JSON file and return a validated RobotsConfig.
    None gives the defaults; a missing file raises FileNotFoundError.
    """
    if path is None:
        return RobotsConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return RobotsConfig(**data)
