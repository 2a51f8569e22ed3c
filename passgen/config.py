# passgen/config.py
"""
Generator settings for the command line.
Settings are read from JSON in %APPDATA%/passgen/config.json (Windows) or ~/.passgen/config.json (fallback),
or from the file given with --config.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "symbols": False,
    "numbers": True,
    "exclude_similar": False,
    "min_length": 8,
    "max_length": 128,
    "verbose": False,
}

INT_KEYS = ("length", "min_length", "max_length")
BOOL_KEYS = ("symbols", "numbers", "exclude_similar", "verbose")


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passgen")
    return os.path.join(os.path.expanduser("~"), ".passgen")


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def _read_json(p: str) -> Dict[str, Any]:
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{p} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{p} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{p} must contain a JSON object")
    return data


def validate(data: Dict[str, Any], source: str = "config") -> Dict[str, Any]:
    """
    Normalize keys (dashes become underscores) and check value types.
    Unknown keys are dropped with a warning.
    """
    out: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).replace("-", "_")
        if key not in DEFAULTS:
            logger.warning("%s: ignoring unknown setting %r", source, raw_key)
            continue
        # bool is a subclass of int
        if key in INT_KEYS and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"{source}: {raw_key!r} must be an integer, got {value!r}")
        if key in BOOL_KEYS and not isinstance(value, bool):
            raise ConfigError(f"{source}: {raw_key!r} must be true or false, got {value!r}")
        out[key] = value
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Return DEFAULTS merged with the settings file.

    An explicit `path` must exist. Without one, the default location is used
    when present and skipped otherwise.
    """
    out = DEFAULTS.copy()
    if path is None:
        p = config_path()
        if not os.path.exists(p):
            logger.debug("no config file at %s, using defaults", p)
            return out
    else:
        p = os.path.expanduser(path)
        if not os.path.exists(p):
            raise ConfigError(f"config file not found: {p}")

    logger.debug("loading config from %s", p)
    out.update(validate(_read_json(p), source=p))
    return out
