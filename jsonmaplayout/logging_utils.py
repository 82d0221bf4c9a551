"""
Helpers for wiring the JSON layout into stdlib logging.

Usage:
    from jsonmaplayout.logging_utils import install_json_layout, logger_for
    install_json_layout({"wrapData": True}, level=logging.INFO)
    log = logger_for(MyService)
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Dict, Optional, Sequence, TextIO, Union

from jsonmaplayout.configuration import LayoutConfig
from jsonmaplayout.context import ensure_filter
from jsonmaplayout.layout import JsonMapLayout


def logger_for(target: Any) -> logging.Logger:
    """Return the logger for a name, a class, or an instance's class."""
    if isinstance(target, str):
        return logging.getLogger(target)
    cls = target if isinstance(target, type) else type(target)
    return logging.getLogger(f"{cls.__module__}.{cls.__qualname__}")


def log_lazy(log: logging.Logger, level: int, msg: str, args_fn: Callable[[], Sequence[Any]]) -> None:
    """Log msg with args computed only when level is enabled."""
    if log.isEnabledFor(level):
        log.log(level, msg, *args_fn(), stacklevel=2)


def install_json_layout(
        config: Optional[Union[LayoutConfig, Dict[str, Any]]] = None,
        *,
        level: Optional[int] = None,
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
) -> logging.Handler:
    """Attach a StreamHandler using JsonMapLayout to logger (root by default).

    Calling again on the same logger returns the handler installed first.
    The handler also carries a ContextFilter so records pick up the
    current context map.
    """
    target = logger or logging.getLogger()
    if level is not None:
        target.setLevel(level)
    for h in target.handlers:
        if isinstance(h.formatter, JsonMapLayout):
            return h
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonMapLayout(config))
    ensure_filter(handler)
    target.addHandler(handler)
    return handler
