"""Configuration for tolerances and display of :class:`~arcus.arc.Arc`.

Settings live in a small JSON file.  Missing sections or keys fall back to
the defaults below, so a file only needs to name what it changes::

    {"isclose": {"eps_multiple": 4}, "display": {"unit": "deg", "digits": 3}}

The file is taken from an explicit path, else from ``$ARCUS_CONFIG``.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

_logger = logging.getLogger(__name__)

ENV_VAR = "ARCUS_CONFIG"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "isclose": {
        "eps_multiple": 10,
    },
    "display": {
        "unit": "rad",
        "digits": None,
    },
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_VALIDATORS = {
    ("isclose", "eps_multiple"): lambda v: _is_number(v) and v >= 0,
    ("display", "unit"): lambda v: v in ("rad", "deg"),
    ("display", "digits"): lambda v: v is None or (isinstance(v, int) and not isinstance(v, bool) and v >= 0),
}


def _check_values(config: Dict[str, Dict[str, Any]], source: Any) -> None:
    """Reset settings that cannot be used back to their defaults."""
    for (section, key), valid in _VALIDATORS.items():
        value = config[section].get(key)
        if not valid(value):
            _logger.warning("Invalid %s.%s=%r in %s, using %r", section, key, value, source, DEFAULTS[section][key])
            config[section][key] = DEFAULTS[section][key]


class ArcusConfig:
    """Sectioned settings merged over :data:`DEFAULTS`."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or os.getenv(ENV_VAR)
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Dict[str, Any]]:
        config = copy.deepcopy(DEFAULTS)
        if not self.config_file:
            return config
        path = Path(self.config_file)
        if not path.exists():
            _logger.warning("Config file %s not found, using defaults", path)
            return config
        try:
            loaded = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _logger.warning("Could not load config file %s: %s", path, e)
            return config
        if not isinstance(loaded, dict):
            _logger.warning("Config file %s does not hold a JSON object, using defaults", path)
            return config
        for section, values in loaded.items():
            if isinstance(values, dict):
                config.setdefault(section, {}).update(values)
        _check_values(config, path)
        _logger.debug("Loaded config from %s", path)
        return config

    def get(self, section: str, key: str, default=None):
        """Get a configuration value."""
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value, rejecting ones that cannot be used."""
        valid = _VALIDATORS.get((section, key))
        if valid is not None and not valid(value):
            raise ValueError(f"invalid value for {section}.{key}: {value!r}")
        self.config.setdefault(section, {})[key] = value

    def save_config(self, path: Optional[str] = None) -> None:
        target = path or self.config_file
        if not target:
            raise ValueError("no config file to save to")
        Path(target).write_text(json.dumps(self.config, indent=2), encoding="utf-8")


_config: Optional[ArcusConfig] = None


def get_config() -> ArcusConfig:
    """Return the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = ArcusConfig()
    return _config


def reload_config(config_file: Optional[str] = None) -> ArcusConfig:
    """Replace the process-wide configuration."""
    global _config
    _config = ArcusConfig(config_file)
    return _config


__all__ = ["ArcusConfig", "DEFAULTS", "ENV_VAR", "get_config", "reload_config"]
