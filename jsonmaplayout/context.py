"""
Implicit key/value context attached to every log event.

The context lives in a contextvar, so each thread and asyncio task sees its
own map. ContextFilter copies the current map onto ``record.context`` when a
record is created; the layout emits it under "context" when metadata is on.

Usage:
    from jsonmaplayout import context
    context.put("request_id", "r-42")
    with context.scoped_context(user_id="alice"):
        logger.info("handled")
"""
from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any, Dict, Iterator, Mapping, Optional

_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "jsonmaplayout_context", default={}
)


def get_context() -> Dict[str, Any]:
    """Shallow copy of the current context map."""
    return dict(_context.get() or {})


def get(key: str, default: Any = None) -> Any:
    return (_context.get() or {}).get(key, default)


def put(key: str, value: Any) -> None:
    current = get_context()
    current[key] = value
    _context.set(current)


def put_all(values: Mapping[str, Any]) -> None:
    current = get_context()
    current.update(values)
    _context.set(current)


def remove(key: str) -> None:
    current = get_context()
    if key in current:
        del current[key]
        _context.set(current)


def clear() -> None:
    _context.set({})


@contextlib.contextmanager
def scoped_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Merge values into the context for the duration of the block."""
    token = _context.set({**get_context(), **values})
    try:
        yield get_context()
    finally:
        _context.reset(token)


class ContextFilter(logging.Filter):
    """Snapshot the current context onto LogRecord.context. Never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            record.context = get_context()
        except Exception:
            # do not fail logging; just omit context
            record.context = {}
        return True


def install_context_filter(level: Optional[int] = None) -> None:
    """Install ContextFilter on the root logger and all existing handlers.

    Optionally set a default level (when provided) on the root logger.
    """
    root = logging.getLogger()
    if level is not None:
        root.setLevel(level)
    ensure_filter(root)
    for h in root.handlers:
        ensure_filter(h)


def ensure_filter(target) -> None:
    if not any(isinstance(f, ContextFilter) for f in getattr(target, "filters", [])):
        target.addFilter(ContextFilter())
