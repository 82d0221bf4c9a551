"""
Environment Variable Handler

Loads .env files and expands environment references inside configuration
values before they reach the layout.
"""

import json
import logging
import os
import re
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "JSONMAPLAYOUT_CONFIG"
DEFAULT_CONFIG_FILE = "logging.json"
ENV_PREFIX = "JSONMAPLAYOUT"

# Environment variable pattern for ${VAR} and ${VAR:-default}
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-(.*?))?\}")


class EnvironmentHandler:
    """Environment variable handling and expansion"""

    @staticmethod
    def load_dotenv() -> None:
        """Load a .env file from the working directory, if one exists"""
        if load_dotenv(find_dotenv(usecwd=True)):  # Does not override existing env by default
            logger.debug("Loaded .env file")

    @staticmethod
    def expand_env_string(s: str) -> Any:
        """Expand ${VAR} and ${VAR:-default} in a string.

        If the entire string is a single placeholder, attempt to auto-cast
        to int/float/bool/null or JSON (for objects/arrays).

        Args:
            s: String to expand

        Returns:
            Expanded value with appropriate type casting
        """
        if not isinstance(s, str):
            return s

        whole_match = re.fullmatch(_ENV_PATTERN, s)

        def repl(m: re.Match) -> str:
            return os.environ.get(m.group(1), m.group(2) or "")

        expanded = _ENV_PATTERN.sub(repl, s)

        if whole_match:
            v = expanded.strip()
            if v.lower() in {"true", "false"}:
                return v.lower() == "true"
            if v.lower() in {"null", "none"}:
                return None
            try:
                if v.isdigit() or (v.startswith("-") and v[1:].isdigit()):
                    return int(v)
                return float(v)
            except ValueError:
                pass
            if (v.startswith("{") and v.endswith("}")) or (v.startswith("[") and v.endswith("]")):
                try:
                    return json.loads(v)
                except ValueError:
                    logger.debug(f"Placeholder value is not valid JSON, keeping text: {v!r}")
        return expanded

    @classmethod
    def expand_env_in_obj(cls, obj: Any) -> Any:
        """Recursively expand environment variables in strings within dict/list structures.

        Args:
            obj: Object to expand (dict, list, str, or other)

        Returns:
            Object with environment variables expanded
        """
        if isinstance(obj, dict):
            return {k: cls.expand_env_in_obj(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [cls.expand_env_in_obj(v) for v in obj]
        if isinstance(obj, str):
            return cls.expand_env_string(obj)
        return obj

    @staticmethod
    def override_leaf_keys(d: Dict[str, Any], prefix: Optional[str] = ENV_PREFIX) -> Dict[str, Any]:
        """Recursively override leaf keys in d with env vars of form PREFIX_SECTION_KEY.

        For example JSONMAPLAYOUT_LAYOUT_COMPLETE overrides {"layout": {"complete": ...}}.
        """
        out = {}
        for k, v in d.items():
            env_key = f"{prefix}_{k}" if prefix else k
            if isinstance(v, dict):
                out[k] = EnvironmentHandler.override_leaf_keys(v, env_key.upper())
            else:
                env_val = os.environ.get(env_key.upper())
                out[k] = env_val if env_val is not None else v
        return out

    @classmethod
    def process_config_dict(cls, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Expand ${VAR} placeholders, then apply leaf-key env overrides."""
        return cls.override_leaf_keys(cls.expand_env_in_obj(config_dict))

    @staticmethod
    def resolve_config_path(path_candidate: Optional[str] = None) -> str:
        """Find a config file: argument > JSONMAPLAYOUT_CONFIG > logging.json.

        Falls back to the file's basename in the working directory. Returns an
        absolute path even when the file does not exist.
        """
        candidate = path_candidate or os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_FILE)
        primary = os.path.expanduser(os.path.expandvars(candidate))

        if os.path.exists(primary):
            return os.path.abspath(primary)

        current_path = os.path.join(os.getcwd(), os.path.basename(primary))
        if os.path.exists(current_path):
            return os.path.abspath(current_path)

        logger.debug(f"No config file at {primary} or {current_path}")
        return os.path.abspath(primary)
