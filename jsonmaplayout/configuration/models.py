"""
Layout options record.

LayoutConfig is fixed when a layout is built. Mappings coming from config
files may spell the flags either in snake_case or in the camelCase used by
XML-style logging configurations (wrapData, includeMeta, includeMessage).
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from .validator import ConfigValidator

DEFAULT_HEADER = "["
DEFAULT_FOOTER = "]"
DEFAULT_CHARSET = "UTF-8"

_FLAGS = ("wrap_data", "include_meta", "include_message", "complete")
_TEXTS = ("header", "footer")

_ALIASES = {
    "wrapData": "wrap_data",
    "includeMeta": "include_meta",
    "includeMessage": "include_message",
}


@dataclass(frozen=True)
class LayoutConfig:
    """Options controlling which event fields JsonMapLayout emits."""

    wrap_data: bool = False
    include_meta: bool = False
    include_message: bool = False
    complete: bool = False
    header: str = DEFAULT_HEADER
    footer: str = DEFAULT_FOOTER
    charset: str = DEFAULT_CHARSET

    def __post_init__(self):
        # Coerce and validate in place; frozen, so go through object.__setattr__
        for name in _FLAGS:
            object.__setattr__(self, name, ConfigValidator.validate_bool(getattr(self, name), name))
        for name in _TEXTS:
            ConfigValidator.validate_text(getattr(self, name), name)
        ConfigValidator.validate_charset(self.charset, "charset")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any], path: str = "layout") -> "LayoutConfig":
        """Build options from a config mapping.

        Args:
            d: Mapping of option names (snake_case or camelCase) to values
            path: Dotted path used in error messages

        Raises:
            LayoutConfigError: On unknown keys or invalid values
        """
        normalized = {_ALIASES.get(k, k): v for k, v in (d or {}).items()}
        ConfigValidator.validate_known_keys(normalized, {f.name for f in fields(cls)}, path)
        # None means "not set" so the default applies
        return cls(**{k: v for k, v in normalized.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def merged_with(self, overrides: Optional[Mapping[str, Any]] = None) -> "LayoutConfig":
        """Return a copy with the non-None overrides applied."""
        if not overrides:
            return self
        normalized = {_ALIASES.get(k, k): v for k, v in overrides.items() if v is not None}
        ConfigValidator.validate_known_keys(normalized, {f.name for f in fields(self)}, "layout")
        return replace(self, **normalized)
