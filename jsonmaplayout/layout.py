"""
Layout that formats log events as one JSON object per line.

The parameters of a MapMessage are written as top-level keys, or nested under
"data" when wrap_data is set. Metadata and the rendered message text are
opt-in.

Usage:
    from jsonmaplayout.layout import JsonMapLayout
    handler.setFormatter(JsonMapLayout(wrap_data=True, include_meta=True))

or through logging.config.dictConfig:

    "formatters": {
        "json": {"()": "jsonmaplayout.JsonMapLayout", "wrapData": True, "complete": True}
    }

With complete=True every event after the first is prefixed with a comma, so
header + lines + footer forms a single JSON array.
"""
from __future__ import annotations

import dataclasses
import json
import logging
import math
import threading
import traceback
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, Optional, Union

from jsonmaplayout.configuration import LayoutConfig
from jsonmaplayout.events import LogEvent
from jsonmaplayout.markers import Marker
from jsonmaplayout.messages import MapMessage

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip("\n")


def _json_default(o: Any) -> Any:
    """Render values json cannot encode natively."""
    if isinstance(o, Marker):
        return o.name
    if isinstance(o, MapMessage):
        return dict(o.items())
    if isinstance(o, BaseException):
        return _format_exception(o)
    if dataclasses.is_dataclass(o) and not isinstance(o, type):
        return {f.name: getattr(o, f.name) for f in dataclasses.fields(o)}
    if isinstance(o, (set, frozenset)):
        return list(o)
    if isinstance(o, (datetime, date, time)):
        return o.isoformat()
    if isinstance(o, Enum):
        return o.value
    return str(o)


def _replace_non_finite(value: Any, _path: Optional[set] = None) -> Any:
    """Copy value with non-finite floats replaced by None.

    Containers already on the current path are returned as is, so cycles are
    left for the encoder to report.
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return value
    path = _path if _path is not None else set()
    if id(value) in path:
        return value
    path.add(id(value))
    try:
        if isinstance(value, dict):
            return {k: _replace_non_finite(v, path) for k, v in value.items()}
        return [_replace_non_finite(v, path) for v in value]
    finally:
        path.discard(id(value))


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return ""


def _render_message(message: Any) -> str:
    if message is None:
        return ""
    render = getattr(message, "get_formatted_message", None)
    try:
        return render() if callable(render) else str(message)
    except Exception:
        logger.debug("Message rendering failed; emitting empty text", exc_info=True)
        return ""


class JsonMapLayout(logging.Formatter):
    """Formats events as single-line JSON objects.

    Args:
        config: LayoutConfig or mapping of options; keyword options override it.
        **options: wrap_data, include_meta, include_message, complete, header,
            footer, charset (camelCase spellings accepted).

    Raises:
        LayoutConfigError: On unknown or invalid options.
    """

    def __init__(self, config: Optional[Union[LayoutConfig, Dict[str, Any]]] = None, **options: Any) -> None:
        super().__init__()
        base = config if isinstance(config, LayoutConfig) else LayoutConfig.from_dict(config or {})
        self._options = base.merged_with(options)
        self._event_count = 0
        self._lock = threading.Lock()
        self._degraded = False

    # ---- Properties ---------------------------------------------------------

    @property
    def options(self) -> LayoutConfig:
        return self._options

    @property
    def header(self) -> str:
        return self._options.header

    @property
    def footer(self) -> str:
        return self._options.footer

    @property
    def charset(self) -> str:
        return self._options.charset

    @property
    def event_count(self) -> int:
        return self._event_count

    @property
    def content_type(self) -> str:
        return f"{CONTENT_TYPE}; charset={self._options.charset}"

    def get_content_type(self) -> str:
        return self.content_type

    # ---- Formatting ---------------------------------------------------------

    def format(self, record: logging.LogRecord) -> str:
        """Render a stdlib LogRecord; the record is only read."""
        return self.to_serializable(LogEvent.from_record(record))

    def to_serializable(self, event: LogEvent) -> str:
        """Render event as JSON text and count it.

        The comma decision and the counter update happen under one lock, but
        encoding does not. Line order matches counter order only when callers
        serialize format and write, as logging.Handler.handle() does with its
        handler lock.
        """
        opts = self._options
        json_data: Dict[str, Any] = {}
        message = event.message

        if isinstance(message, MapMessage):
            if opts.wrap_data:
                json_data["data"] = dict(message.items())
            else:
                for key, value in message.items():
                    json_data[key] = value

        if opts.include_message:
            json_data["message"] = _render_message(message)

        if opts.include_meta:
            json_data["context"] = dict(event.context_data or {})
            json_data["logger"] = event.logger_name
            json_data["level"] = event.level
            json_data["timeMillis"] = event.time_millis
            json_data["thread"] = event.thread_name
            json_data["marker"] = event.marker
            json_data["source"] = event.source
            json_data["exception"] = event.thrown

            if event.marker is not None:
                marker = event.marker
                json_data["marker"] = marker.name if isinstance(marker, Marker) else _safe_str(marker)

        text = self._encode(json_data)

        with self._lock:
            prefix = "," if opts.complete and self._event_count > 0 else ""
            self._event_count += 1
        return prefix + text

    # ---- Encoding -----------------------------------------------------------

    @staticmethod
    def _dumps(obj: Any) -> str:
        return json.dumps(obj, ensure_ascii=False, separators=(",", ":"), allow_nan=False, default=_json_default)

    def _encode(self, json_data: Dict[str, Any]) -> str:
        try:
            return self._dumps(json_data)
        except Exception as e:
            error = e

        # NaN and infinities are written as null
        finite = _replace_non_finite(json_data)
        try:
            return self._dumps(finite)
        except Exception:
            self._report_degraded(error)

        # Encode field by field; stringify whatever still fails
        sanitized: Dict[str, Any] = {}
        for key, value in finite.items():
            try:
                self._dumps(value)
                sanitized[key] = value
            except Exception:
                sanitized[key] = _safe_str(value)
        try:
            return self._dumps(sanitized)
        except Exception as e:
            self._report_degraded(e)
            return self._dumps({k: _safe_str(v) for k, v in sanitized.items()})

    def _report_degraded(self, error: Exception) -> None:
        if not self._degraded:
            self._degraded = True
            logger.warning(f"Could not encode log event as JSON, stringifying offending fields: {error!r}")
        else:
            logger.debug(f"Could not encode log event as JSON: {error!r}")
