"""
YAML configuration for the export CLI.

The extraction core takes no configuration; this module only serves the
command line runner.  Every key is optional:

    out_dir: exports
    log_level: INFO
    strip_images: true
    selectors:
      scope: "#transaction_grid_wrapper"
      detail_panels: [".accordion-panel"]
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

import soupsieve
import yaml  # type: ignore

from .errors import ConfigError
from .extract.selectors import DEFAULT_SELECTORS, Selectors

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class ExportConfig:
    out_dir: str = "."
    log_level: str = "INFO"
    strip_images: bool = True
    selectors: Selectors = DEFAULT_SELECTORS


def _check_selector(key: str, value: object) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"Selector '{key}' must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ConfigError(f"Selector '{key}' must not be empty")
    try:
        soupsieve.compile(value)
    except soupsieve.SelectorSyntaxError as exc:
        raise ConfigError(f"Invalid CSS selector for '{key}': {value!r} ({exc})") from exc
    return value


def _selectors_from(raw: Dict[str, object]) -> Selectors:
    if not isinstance(raw, dict):
        raise ConfigError("'selectors' must be a mapping")
    unknown = sorted(set(raw) - set(Selectors.field_names()))
    if unknown:
        raise ConfigError("Unknown selector keys: " + ", ".join(unknown))
    overrides = {}
    for key, value in raw.items():
        if key == "detail_panels":
            panels = [value] if isinstance(value, str) else value
            if not isinstance(panels, list):
                raise ConfigError("Selector 'detail_panels' must be a string or a list of strings")
            overrides[key] = tuple(_check_selector(key, panel) for panel in panels)
        else:
            overrides[key] = _check_selector(key, value)
    return replace(DEFAULT_SELECTORS, **overrides)


def load_config(config_path: Optional[str]) -> ExportConfig:
    """Load an `ExportConfig` from ``config_path`` (defaults when ``None``).

    Raises:
        ConfigError: on malformed YAML, an unknown log level, or a selector
            that is not valid CSS.
    """
    if not config_path:
        return ExportConfig()
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")
    cfg = ExportConfig()
    if "out_dir" in data:
        cfg = replace(cfg, out_dir=str(data["out_dir"]))
    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log_level {data['log_level']!r}; expected one of {', '.join(LOG_LEVELS)}")
        cfg = replace(cfg, log_level=level)
    if "strip_images" in data:
        cfg = replace(cfg, strip_images=bool(data["strip_images"]))
    if "selectors" in data:
        cfg = replace(cfg, selectors=_selectors_from(data["selectors"]))
    return cfg
