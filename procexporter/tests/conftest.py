# tests/conftest.py
import psutil
import pytest


@pytest.fixture
def fake_procs(monkeypatch):
    """Install a fake process table; returns the list to fill."""
    table: list = []
    monkeypatch.setattr(psutil, "process_iter", lambda *a, **kw: iter(table))
    return table
