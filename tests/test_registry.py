from unittest.mock import MagicMock

import pytest

from react_orchestrator.errors import ToolNotFoundError, WorkerNotFoundError
from react_orchestrator.models import AgentDescriptor
from react_orchestrator.registry import CapabilityRegistry, WorkerDirectory
from react_orchestrator.tools import CalculatorTool, FileReaderTool


def _named(name: str, description: str = "") -> MagicMock:
    item = MagicMock()
    item.name = name
    item.description = description
    return item


# ---------------------------------------------------------------------------
# CapabilityRegistry
# ---------------------------------------------------------------------------


def test_registry_resolves_by_name():
    calculator = CalculatorTool()
    registry = CapabilityRegistry([calculator, FileReaderTool()])

    assert registry.resolve("Calculator") is calculator
    assert registry.names() == ["Calculator", "FileReader"]
    assert len(registry) == 2
    assert "FileReader" in registry


def test_registry_missing_tool():
    registry = CapabilityRegistry([CalculatorTool()])
    with pytest.raises(ToolNotFoundError) as excinfo:
        registry.resolve("Shell")
    assert excinfo.value.tool == "Shell"


def test_registry_rejects_duplicates():
    with pytest.raises(ValueError, match="more than once"):
        CapabilityRegistry([CalculatorTool(), CalculatorTool()])


def test_registry_reserves_finish():
    with pytest.raises(ValueError, match="reserved"):
        CapabilityRegistry([_named("Finish")])


def test_registry_is_read_only():
    registry = CapabilityRegistry([CalculatorTool()])
    with pytest.raises(TypeError):
        registry["Other"] = FileReaderTool()
    with pytest.raises(TypeError):
        registry._tools["Other"] = FileReaderTool()


def test_registry_catalog_in_registration_order():
    registry = CapabilityRegistry([_named("B", "second"), _named("A", "first")])
    assert registry.catalog() == "- B: second\n- A: first"


def test_registry_snapshot_is_independent_of_source_list():
    tools = [CalculatorTool()]
    registry = CapabilityRegistry(tools)
    tools.append(FileReaderTool())
    assert registry.names() == ["Calculator"]


# ---------------------------------------------------------------------------
# WorkerDirectory
# ---------------------------------------------------------------------------


def test_directory_descriptors():
    directory = WorkerDirectory([_named("W1", "desc1"), _named("W2", "desc2")])
    assert directory.descriptors() == [
        AgentDescriptor(name="W1", description="desc1"),
        AgentDescriptor(name="W2", description="desc2"),
    ]


def test_directory_missing_worker():
    directory = WorkerDirectory([_named("W1")])
    with pytest.raises(WorkerNotFoundError, match="W9") as excinfo:
        directory.resolve("W9")
    assert excinfo.value.worker == "W9"


def test_directory_rejects_duplicates():
    with pytest.raises(ValueError):
        WorkerDirectory([_named("W1"), _named("W1")])
