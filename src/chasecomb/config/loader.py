"""Load enumeration config from YAML or JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .schema import EnumerationConfig

try:
    import yaml
except ModuleNotFoundError:  # pragma: no cover - exercised in runtime environments only
    yaml = None


ELEMENT_SOURCES = ("elements", "n")


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or parsed."""


def load_config(path: str | Path, overrides: Mapping[str, Any] | None = None) -> EnumerationConfig:
    """Load config file from YAML/JSON, apply overrides and validate with Pydantic."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        data = _load_yaml(config_path)
    elif suffix == ".json":
        data = _load_json(config_path)
    else:
        raise ConfigLoadError(
            f"Unsupported config format '{suffix}'. Use .yaml/.yml or .json."
        )

    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a JSON/YAML object.")

    overrides = dict(overrides or {})
    # an override naming one element source replaces the source set in the file
    if "elements" in overrides or "n" in overrides:
        data = {key: value for key, value in data.items() if key not in ELEMENT_SOURCES}

    merged = {**data, **overrides}
    return EnumerationConfig.model_validate(merged)


def _load_yaml(path: Path) -> Any:
    if yaml is None:
        raise ConfigLoadError("PyYAML is required to load YAML config files.")

    with path.open("r", encoding="utf-8") as file:
        parsed = yaml.safe_load(file)

    return {} if parsed is None else parsed


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        try:
            parsed = json.load(file)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(f"Invalid JSON in {path}: {exc.msg}") from exc

    return {} if parsed is None else parsed
