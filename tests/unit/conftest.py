"""Fixtures for example-based tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep a developer's ~/.cronrange and CRONRANGE_* variables out of the tests."""
    for key in ("CRONRANGE_TIMEZONE", "CRONRANGE_STRICT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CRONRANGE_HOME", str(tmp_path / "home"))
