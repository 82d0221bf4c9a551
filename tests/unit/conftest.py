"""
Unit test-specific fixtures that isolate tests from the developer's environment.
These fixtures are ONLY imported for tests under tests/unit/.
"""
import os

import pytest


@pytest.fixture(autouse=True)
def unit_isolation(tmp_path, monkeypatch):
    """Run each test in an empty working directory without JSONMAPLAYOUT_* variables,
    so no stray logging.json or .env file leaks into configuration tests.
    """
    for name in list(os.environ):
        if name.startswith("JSONMAPLAYOUT"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
