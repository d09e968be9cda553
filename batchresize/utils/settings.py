from copy import deepcopy
from pathlib import Path
from typing import Optional

import yaml

from batchresize.pipeline.errors import ConfigError

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_CONFIG_PATH = _PROJECT_ROOT / "config.yaml"

DEFAULTS = {
    "paths": {
        "input": "input_images",
        "output": "output_images",
    },
    "resize": {
        "width": None,
        "height": None,
        "workers": None,
        "jpeg_quality": 75,
        "fail_on_error": False,
    },
}


def get_default_config_path() -> Path:
    return _CONFIG_PATH


def _merge(base: dict, override: dict) -> dict:
    merged = deepcopy(base)
    for key, value in override.items():
        if value is None:
            # null keeps the default
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[Path] = None) -> dict:
    """
    Load config.yaml merged over DEFAULTS.

    With no argument the project config.yaml is used if present, otherwise
    DEFAULTS alone. An explicit path that does not exist is an error.
    """
    if config_path is None:
        path = _CONFIG_PATH
        if not path.exists():
            return deepcopy(DEFAULTS)
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at top level")
    for section in ("paths", "resize"):
        if data.get(section) is not None and not isinstance(data[section], dict):
            raise ConfigError(f"Config section '{section}' in {path} must be a mapping")

    return _merge(DEFAULTS, data)
