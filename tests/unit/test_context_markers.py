"""
Unit tests for the logging context map, ContextFilter and markers.
"""
import logging

import pytest

from jsonmaplayout import context
from jsonmaplayout.context import ContextFilter, install_context_filter
from jsonmaplayout.markers import Marker, marker_for


class TestContextMap:
    def test_put_get_remove(self):
        context.put("a", 1)
        context.put_all({"b": 2, "c": 3})
        context.remove("b")
        context.remove("never-set")
        assert context.get("a") == 1
        assert context.get("b", "gone") == "gone"
        assert context.get_context() == {"a": 1, "c": 3}

    def test_snapshot_is_a_copy(self):
        context.put("a", 1)
        snapshot = context.get_context()
        snapshot["a"] = 2
        assert context.get("a") == 1

    def test_scoped_context_restores(self):
        context.put("a", 1)
        with context.scoped_context(b=2) as current:
            assert current == {"a": 1, "b": 2}
            assert context.get_context() == {"a": 1, "b": 2}
        assert context.get_context() == {"a": 1}

    def test_clear(self):
        context.put("a", 1)
        context.clear()
        assert context.get_context() == {}


class TestContextFilter:
    def test_snapshots_onto_record(self, make_record):
        context.put("request_id", "r-1")
        record = make_record("x")

        assert ContextFilter().filter(record) is True
        context.put("request_id", "r-2")
        assert record.context == {"request_id": "r-1"}

    def test_install_is_idempotent(self):
        root = logging.getLogger()
        try:
            install_context_filter()
            install_context_filter()
            assert sum(isinstance(f, ContextFilter) for f in root.filters) == 1
        finally:
            for f in [f for f in root.filters if isinstance(f, ContextFilter)]:
                root.removeFilter(f)
            for h in root.handlers:
                for f in [f for f in h.filters if isinstance(f, ContextFilter)]:
                    h.removeFilter(f)


class TestMarkers:
    def test_registry_returns_same_instance(self):
        assert marker_for("REGISTRY_TEST") is marker_for("REGISTRY_TEST")

    def test_parents(self):
        security = marker_for("SECURITY_TEST")
        login = Marker("LOGIN_TEST", (security,))
        assert login.is_instance_of(security)
        assert login.is_instance_of("LOGIN_TEST")
        assert not security.is_instance_of(login)

    def test_str_is_name(self):
        assert str(Marker("AUDIT")) == "AUDIT"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Marker("")
