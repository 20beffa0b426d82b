"""Shared fixtures for the inspector wrapper tests."""

import subprocess
from typing import Optional

import pytest

from mcp_inspector_tools import inspector


@pytest.fixture(autouse=True)
def _clean_inspector_env(monkeypatch):
    """Keep user configuration out of the tests."""

    for name in ("MCP_INSPECTOR_RUNNER", "MCP_INSPECTOR_PACKAGE", "MCP_INSPECTOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class FakeRun:
    """Stand-in for subprocess.run that records every launch."""

    def __init__(self, returncode: int = 0, error: Optional[Exception] = None) -> None:
        self.returncode = returncode
        self.error = error
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((list(cmd), kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.fixture
def fake_run(monkeypatch):
    """Replace process launching and PATH lookup with fakes."""

    runner = FakeRun()
    monkeypatch.setattr(inspector.subprocess, "run", runner)
    monkeypatch.setattr(inspector.shutil, "which", lambda name: f"/usr/bin/{name}")
    return runner
