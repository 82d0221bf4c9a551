"""
Named markers that tag log events for filtering or correlation.

Attach a marker to a call with ``extra``:
    logger.info("login", extra={"marker": marker_for("AUDIT")})
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Marker:
    name: str
    parents: Tuple["Marker", ...] = ()

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Marker name must be a non-empty string")

    def is_instance_of(self, other) -> bool:
        """True if this marker or any of its ancestors matches other (a Marker or a name)."""
        name = other.name if isinstance(other, Marker) else other
        if self.name == name:
            return True
        return any(p.is_instance_of(name) for p in self.parents)

    def __str__(self) -> str:
        return self.name


_registry: Dict[str, Marker] = {}
_registry_lock = threading.Lock()


def marker_for(name: str, *parents: Marker) -> Marker:
    """Return the shared marker for name, creating it on first use.

    Parents are only applied when the marker is first created.
    """
    with _registry_lock:
        marker = _registry.get(name)
        if marker is None:
            marker = Marker(name, tuple(parents))
            _registry[name] = marker
        return marker
