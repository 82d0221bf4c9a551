"""
Layout configuration.

LayoutConfig holds the options; load_layout_config() reads them from the
"layout" section of a JSON config file:

    {
      "layout": {"wrapData": true, "includeMeta": "${LOG_META:-false}"}
    }
"""

import logging
from typing import Optional

from jsonmaplayout.exceptions import LayoutConfigError

from .environment import EnvironmentHandler
from .manager import ConfigManager
from .models import DEFAULT_CHARSET, DEFAULT_FOOTER, DEFAULT_HEADER, LayoutConfig
from .validator import ConfigValidator

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigManager",
    "ConfigValidator",
    "DEFAULT_CHARSET",
    "DEFAULT_FOOTER",
    "DEFAULT_HEADER",
    "EnvironmentHandler",
    "LayoutConfig",
    "load_layout_config",
]


def load_layout_config(config_path: Optional[str] = None, section: str = "layout") -> LayoutConfig:
    """Return the layout options stored under section in the config file.

    A missing file or section yields the defaults.

    Raises:
        LayoutConfigError: If the section holds unknown keys or invalid values
    """
    manager = ConfigManager(config_path)
    values = manager.get_section(section)
    if not isinstance(values, dict):
        raise LayoutConfigError(section, f"must be a JSON object, got {type(values).__name__}")
    logger.debug(f"Layout options from {manager.config_path}[{section}]: {values}")
    return LayoutConfig.from_dict(values, path=section)
