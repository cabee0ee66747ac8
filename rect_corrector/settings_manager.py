from __future__ import annotations

import json
import math
import os
from typing import Any

from .logger import get_logger

_logger = get_logger("settings")


class SettingsManager:
    """JSON-backed constants used by the layout element corrections."""

    def __init__(self, settings_path: str):
        self.settings_path = settings_path
        self._settings: dict[str, Any] = {}
        self.load()

    DEFAULTS: dict[str, Any] = {
        "minimum_bound_relative_size": 0.05,
        "clipping_size_lower_bound": 0,
    }

    def load(self) -> None:
        try:
            if os.path.exists(self.settings_path):
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        self._settings = data
                        _logger.debug("settings loaded: %s", self.settings_path)
                        return
                    _logger.warning("settings ignored, not a JSON object: %s", self.settings_path)
        except (OSError, ValueError) as e:
            _logger.warning("settings load failed: %s", e)
        self._settings = {}

    def save(self) -> None:
        try:
            directory = os.path.dirname(self.settings_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
            _logger.debug("settings saved: %s", self.settings_path)
        except OSError as e:
            _logger.error("settings save failed: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._settings:
            return self._settings[key]
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def has(self, key: str) -> bool:
        return key in self._settings

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        self.save()

    @property
    def data(self) -> dict[str, Any]:
        return self._settings

    @property
    def minimum_bound_relative_size(self) -> float:
        """Smallest layout extent, as a fraction of the output (0 < v < 1)."""
        default = float(self.DEFAULTS["minimum_bound_relative_size"])
        val = self.get("minimum_bound_relative_size")
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            _logger.warning("minimum_bound_relative_size is not a number: %r", val)
            return default
        v = float(val)
        if not math.isfinite(v) or not 0.0 < v < 1.0:
            _logger.warning("minimum_bound_relative_size out of range: %r", val)
            return default
        return v

    @property
    def clipping_size_lower_bound(self) -> int:
        """Smallest clipping width/height in pixels."""
        default = int(self.DEFAULTS["clipping_size_lower_bound"])
        val = self.get("clipping_size_lower_bound")
        if isinstance(val, bool) or not isinstance(val, int) or val < 0:
            _logger.warning("clipping_size_lower_bound must be a non-negative int: %r", val)
            return default
        return val
