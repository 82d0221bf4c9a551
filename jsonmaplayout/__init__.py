from jsonmaplayout.configuration import LayoutConfig, load_layout_config
from jsonmaplayout.context import ContextFilter, install_context_filter
from jsonmaplayout.events import LogEvent, SourceLocation
from jsonmaplayout.exceptions import LayoutConfigError
from jsonmaplayout.layout import JsonMapLayout
from jsonmaplayout.logging_utils import install_json_layout, logger_for
from jsonmaplayout.markers import Marker, marker_for
from jsonmaplayout.messages import MapMessage, SimpleMapMessage, TextMessage

__version__ = "0.1.0"

__all__ = [
    "ContextFilter",
    "JsonMapLayout",
    "LayoutConfig",
    "LayoutConfigError",
    "LogEvent",
    "MapMessage",
    "Marker",
    "SimpleMapMessage",
    "SourceLocation",
    "TextMessage",
    "install_context_filter",
    "install_json_layout",
    "load_layout_config",
    "logger_for",
    "marker_for",
]
