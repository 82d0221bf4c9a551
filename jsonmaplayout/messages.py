"""
Message variants carried by log events.

A log call either carries free text (TextMessage) or a key/value bag
(MapMessage). The layout only switches behavior on the map kind; every
message can render itself as human-readable text.

Usage:
    from jsonmaplayout.messages import SimpleMapMessage
    logger.info(SimpleMapMessage({"user": "alice", "status": 200}))
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Generic, Iterator, Mapping, Optional, TypeVar, Union
from xml.sax.saxutils import escape, quoteattr

T = TypeVar("T")

# Output formats understood by MapMessage.as_string()
FORMAT_JSON = "JSON"
FORMAT_JAVA = "JAVA"
FORMAT_XML = "XML"
_FORMATS = {FORMAT_JSON, FORMAT_JAVA, FORMAT_XML}


@dataclass(frozen=True)
class TextMessage:
    """Plain text message; its rendering is the text itself."""
    text: str = ""

    def get_formatted_message(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class MapMessage(Generic[T]):
    """Ordered mapping of string keys to values of type T.

    Iteration follows insertion order. Keys must be strings.
    """

    def __init__(self, data: Optional[Mapping[str, T]] = None, *, initial_capacity: Optional[int] = None):
        if initial_capacity is not None and initial_capacity < 0:
            raise ValueError(f"initial_capacity must be >= 0, got {initial_capacity}")
        self._data: Dict[str, T] = {}
        if data:
            self.put_all(data)

    # ---- Construction -------------------------------------------------------

    def new_instance(self, data: Mapping[str, T]) -> "MapMessage[T]":
        """Return a new, independent message of the same class built from data."""
        return type(self)(data)

    # ---- Read access --------------------------------------------------------

    @property
    def data(self) -> Mapping[str, T]:
        """Read-only view of the payload."""
        return MappingProxyType(self._data)

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        return self._data.get(key, default)

    def items(self):
        return self._data.items()

    def is_empty(self) -> bool:
        return not self._data

    def __getitem__(self, key: str) -> T:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # ---- Mutation -----------------------------------------------------------

    def put(self, key: str, value: T) -> None:
        if not isinstance(key, str):
            raise TypeError(f"MapMessage keys must be str, got {type(key).__name__}")
        self._data[key] = value

    def put_all(self, data: Mapping[str, T]) -> None:
        for key, value in data.items():
            self.put(key, value)

    def add(self, key: str, value: T) -> "MapMessage[T]":
        """Fluent put."""
        self.put(key, value)
        return self

    def remove(self, key: str) -> Optional[T]:
        return self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    # ---- Rendering ----------------------------------------------------------

    def get_formatted_message(self) -> str:
        return self.as_string()

    def as_string(self, fmt: Optional[str] = None) -> str:
        """Render the payload.

        Args:
            fmt: None for ``key="value"`` pairs, or one of JSON, JAVA, XML
                (case-insensitive). Unknown formats fall back to the default.
        """
        kind = fmt.upper() if isinstance(fmt, str) else None
        if kind not in _FORMATS:
            return " ".join(f'{k}="{v}"' for k, v in self._data.items())
        if kind == FORMAT_JSON:
            return json.dumps(self._data, ensure_ascii=False, separators=(",", ":"), default=str)
        if kind == FORMAT_JAVA:
            inner = ", ".join(f'{k}="{v}"' for k, v in self._data.items())
            return "{" + inner + "}"
        lines = ["<Map>"]
        for k, v in self._data.items():
            lines.append(f"  <Entry key={quoteattr(k)}>{escape(str(v))}</Entry>")
        lines.append("</Map>")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapMessage):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    __hash__ = None  # mutable


class SimpleMapMessage(MapMessage[T]):
    """Named key/value bag for structured log calls."""


Message = Union[TextMessage, MapMessage]


def is_map_message(message: Any) -> bool:
    return isinstance(message, MapMessage)
