"""
Configuration Validator

Fail-fast checks for layout options. Errors name the dotted path of the
offending key.
"""

import codecs
import logging
from typing import Any, Dict, Set

from jsonmaplayout.exceptions import LayoutConfigError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


class ConfigValidator:
    """Layout configuration validation with clear error messages"""

    @staticmethod
    def validate_bool(value: Any, key_path: str) -> bool:
        """Coerce a flag value to bool.

        Accepts booleans, 0/1 and the usual true/false/yes/no/on/off strings.

        Raises:
            LayoutConfigError: If value cannot be read as a boolean
        """
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise LayoutConfigError(key_path, f"must be a boolean, got {value!r}")

    @staticmethod
    def validate_text(value: Any, key_path: str) -> str:
        if not isinstance(value, str):
            raise LayoutConfigError(key_path, f"must be a string, got {type(value).__name__}")
        return value

    @staticmethod
    def validate_charset(value: Any, key_path: str = "charset") -> str:
        """Check that value names a codec Python knows.

        Returns the name as given so the content type echoes the configuration.
        """
        name = ConfigValidator.validate_text(value, key_path)
        try:
            codecs.lookup(name)
        except LookupError:
            raise LayoutConfigError(key_path, f"names an unknown charset: {name!r}")
        return name

    @staticmethod
    def validate_known_keys(config: Dict[str, Any], known: Set[str], path: str) -> None:
        unknown = sorted(k for k in config if k not in known)
        if unknown:
            raise LayoutConfigError(f"{path}.{unknown[0]}", f"is not a layout option (known: {', '.join(sorted(known))})")

