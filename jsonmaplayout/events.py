"""
Read-only view of a log event as seen by the layout.

LogEvent.from_record() adapts a stdlib LogRecord; tests and embedding code
can also build a LogEvent directly and hand it to JsonMapLayout.to_serializable().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from jsonmaplayout.context import get_context
from jsonmaplayout.markers import Marker
from jsonmaplayout.messages import MapMessage, Message, SimpleMapMessage, TextMessage


@dataclass(frozen=True)
class SourceLocation:
    """Where the logging call was made."""
    module: Optional[str] = None
    function: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.module}.{self.function}({self.file}:{self.line})"


@dataclass(frozen=True)
class LogEvent:
    message: Message = field(default_factory=TextMessage)
    context_data: Dict[str, Any] = field(default_factory=dict)
    logger_name: str = ""
    level: str = "INFO"
    time_millis: int = 0
    thread_name: Optional[str] = None
    marker: Optional[Marker] = None
    source: Optional[SourceLocation] = None
    thrown: Optional[BaseException] = None

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEvent":
        """Build an event from a LogRecord without modifying the record.

        A MapMessage msg is kept as is and a plain mapping msg is wrapped in a
        SimpleMapMessage; anything else becomes a TextMessage of the record's
        rendered message.
        """
        return cls(
            message=message_of(record),
            context_data=_context_of(record),
            logger_name=record.name,
            level=record.levelname,
            time_millis=int(record.created * 1000),
            thread_name=record.threadName,
            marker=getattr(record, "marker", None),
            source=_source_of(record),
            thrown=record.exc_info[1] if record.exc_info else None,
        )


def message_of(record: logging.LogRecord) -> Message:
    msg = record.msg
    if isinstance(msg, MapMessage):
        return msg
    if isinstance(msg, Mapping) and not record.args:
        return SimpleMapMessage({str(k): v for k, v in msg.items()})
    return TextMessage(record.getMessage())


def _context_of(record: logging.LogRecord) -> Dict[str, Any]:
    ctx = getattr(record, "context", None)
    if isinstance(ctx, Mapping):
        return dict(ctx)
    # No ContextFilter on the path; fall back to the emitting thread's context
    return get_context()


def _source_of(record: logging.LogRecord) -> Optional[SourceLocation]:
    if not record.pathname:
        return None
    return SourceLocation(
        module=record.module,
        function=record.funcName,
        file=record.pathname,
        line=record.lineno,
    )
