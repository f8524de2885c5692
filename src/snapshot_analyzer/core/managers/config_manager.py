# src/snapshot_analyzer/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from snapshot_analyzer.core.utils.path_utils import PathUtils
from snapshot_analyzer.model import AnalyzerSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    A singleton class to manage the application's configuration.
    It loads settings.json once and hands out typed AnalyzerSettings.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the file."""
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'analysis.max_depth'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def analyzer_settings(self) -> AnalyzerSettings:
        """AnalyzerSettings from the `analysis` section, model defaults for missing keys."""
        section = self.get_nested("analysis", {})
        if not isinstance(section, dict):
            return AnalyzerSettings()
        return AnalyzerSettings(**{k: v for k, v in section.items() if k in AnalyzerSettings.model_fields})

    def reset(self):
        """Resets the in-memory configuration from the settings.json file."""
        try:
            config_path = PathUtils.get_settings_path()
            if not config_path.exists():
                logger.warning("settings.json not found at %s. Using empty config.", config_path)
                self._config = {}
                return
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.info("Configuration has been (re)loaded from settings.json.")
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e)
            self._config = {}


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
