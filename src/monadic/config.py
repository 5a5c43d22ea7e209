"""Configuration utilities for the :mod:`monadic` demo runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

import yaml


@dataclass
class DemoConfig:
    """Initial values fed to the reference pipelines."""

    debug_inputs: List[Any] = field(default_factory=lambda: [3])
    multi_inputs: List[Any] = field(default_factory=lambda: [12])


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    demo: DemoConfig
    logging: LoggingConfig


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_app_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from ``path``.

    Demo inputs are passed through as YAML parsed them.
    """

    raw = load_yaml(path)
    demo = raw.get("demo") or {}
    logging_cfg = raw.get("logging") or {}

    defaults = DemoConfig()
    return AppConfig(
        demo=DemoConfig(
            debug_inputs=list(demo.get("debug_inputs", defaults.debug_inputs)),
            multi_inputs=list(demo.get("multi_inputs", defaults.multi_inputs)),
        ),
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
    )


__all__ = [
    "DemoConfig",
    "LoggingConfig",
    "AppConfig",
    "load_yaml",
    "load_app_config",
]
