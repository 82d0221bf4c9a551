"""
Configuration Manager

Loads a JSON configuration file, expands environment references and keeps
the result available for layout construction.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from .environment import EnvironmentHandler

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads one configuration file and hands out its sections"""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager

        Args:
            config_path: Path to configuration file (optional)
        """
        EnvironmentHandler.load_dotenv()
        self._config_path = EnvironmentHandler.resolve_config_path(config_path)
        self._config: Dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Read the file (when present) and apply environment processing"""
        config_dict: Dict[str, Any] = {}

        if os.path.exists(self._config_path):
            with open(self._config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
            logger.debug(f"Loaded config from: {self._config_path}")
        else:
            logger.debug(f"Config file not found: {self._config_path}. Using empty config.")

        if not isinstance(config_dict, dict):
            raise ValueError(f"Config file {self._config_path} must contain a JSON object")

        self._config = EnvironmentHandler.process_config_dict(config_dict)
        logger.debug(f"Configuration loaded with {len(self._config)} top-level keys")

    def get_section(self, section_name: str, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Get a specific configuration section

        Args:
            section_name: Name of the configuration section
            default: Default value if section doesn't exist

        Returns:
            Configuration section dictionary
        """
        return self._config.get(section_name, default or {})

    @property
    def config_path(self) -> str:
        """Get the resolved configuration file path"""
        return self._config_path
