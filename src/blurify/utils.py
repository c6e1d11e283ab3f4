"""
Settings loading for blur configuration.
"""
from __future__ import annotations

import os
from typing import Any, Dict

import yaml

from .errors import ConfigurationError
from .options import BlurOptions


def load_settings(path: str) -> Dict[str, Any]:
    """Load a YAML configuration file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid settings file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must define a dictionary at the top level")

    return data


def load_options(path: str) -> BlurOptions:
    """Read ``BlurOptions`` from the ``blur`` section of a settings file."""
    return BlurOptions.from_settings(load_settings(path))
