import json

import pytest
from rich.console import Console

from react_orchestrator import display


@pytest.fixture(autouse=True)
def quiet_display(monkeypatch):
    """Keep rich output out of the test log."""
    monkeypatch.setattr(display, "console", Console(quiet=True))


@pytest.fixture
def decision():
    def _make(tool: str, args: str, thought: str = "thinking") -> str:
        return json.dumps({"thought": thought, "action": {"tool": tool, "args": args}})

    return _make
