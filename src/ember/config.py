# src/ember/config.py
"""Persistent runtime configuration for Ember.

Settings are read from ``~/.ember/config.json`` when it exists and then
overridden by environment variables:

- ``EMBER_DEBUG``: ``none``, ``minimal`` or ``debug`` (``1``/``true`` mean ``debug``)
- ``EMBER_MAX_DEPTH``: deepest chain of nested function calls allowed while evaluating
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEBUG_LEVELS = ("none", "minimal", "debug")

_DEFAULTS: Dict[str, Any] = {
    "debug_level": "none",
    "max_depth": 1000,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def default_config_path() -> Path:
    return Path.home() / ".ember" / "config.json"


class EmberConfig:
    def __init__(self, path: Optional[Path] = None, load: bool = True):
        self.path = Path(path) if path is not None else default_config_path()
        self._data: Dict[str, Any] = dict(_DEFAULTS)
        if load:
            self._load_file()
            self._apply_environment()

    # ---- loading -----------------------------------------------------------

    def _load_file(self):
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, e)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected a JSON object", self.path)
            return
        for key, value in data.items():
            if key in _DEFAULTS:
                self._set(key, value)
            else:
                logger.debug("Unknown config key %r in %s", key, self.path)

    def _apply_environment(self):
        debug = os.environ.get("EMBER_DEBUG")
        if debug is not None:
            self._set("debug_level", debug)
        depth = os.environ.get("EMBER_MAX_DEPTH")
        if depth is not None:
            self._set("max_depth", depth)

    def _set(self, key, value):
        try:
            if key == "debug_level":
                self.debug_level = value
            elif key == "max_depth":
                self.max_depth = value
        except (TypeError, ValueError) as e:
            logger.warning("Ignoring config value %s=%r: %s", key, value, e)

    # ---- properties --------------------------------------------------------

    @property
    def debug_level(self) -> str:
        return self._data["debug_level"]

    @debug_level.setter
    def debug_level(self, value):
        if isinstance(value, bool):
            value = "debug" if value else "none"
        level = str(value).strip().lower()
        if level in _TRUTHY:
            level = "debug"
        elif level in _FALSY:
            level = "none"
        if level not in DEBUG_LEVELS:
            raise ValueError(f"debug level must be one of {', '.join(DEBUG_LEVELS)}")
        self._data["debug_level"] = level

    @property
    def max_depth(self) -> int:
        return self._data["max_depth"]

    @max_depth.setter
    def max_depth(self, value):
        depth = int(value)
        if depth < 100:
            raise ValueError("max_depth must be at least 100")
        self._data["max_depth"] = depth

    @property
    def enable_debug_logs(self) -> bool:
        return self.debug_level != "none"

    def should_log(self, level: str = "debug") -> bool:
        """minimal messages log at level minimal or debug; debug messages only at debug."""
        current = DEBUG_LEVELS.index(self.debug_level)
        try:
            wanted = DEBUG_LEVELS.index(level)
        except ValueError:
            wanted = DEBUG_LEVELS.index("debug")
        return current > 0 and wanted <= current

    # ---- persistence -------------------------------------------------------

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2) + "\n", encoding="utf-8")
        logger.info("Config saved to %s", self.path)


config = EmberConfig()
