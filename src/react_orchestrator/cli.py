# cli.py
# Entry point. Config and wiring only; no orchestration logic lives here.
#
# The capability registries and worker directory are built once here, before
# any run, and handed to the agents by constructor.

from enum import Enum
from typing import Optional

import typer
from pydantic import ValidationError

from react_orchestrator import display
from react_orchestrator.config import Settings
from react_orchestrator.errors import OrchestrationError
from react_orchestrator.harness import ReActAgent
from react_orchestrator.llm import (
    ARITHMETIC_FALLBACK,
    ARITHMETIC_SCRIPT,
    ModelBackend,
    OpenAIBackend,
    ScriptedBackend,
)
from react_orchestrator.orchestrator import DelegateOrchestrator, Orchestrator, PlanExecuteOrchestrator
from react_orchestrator.planner import Planner
from react_orchestrator.registry import CapabilityRegistry, WorkerDirectory
from react_orchestrator.supervisor import SupervisorAgent
from react_orchestrator.tools import (
    CodeWriterTool,
    DirectoryListerTool,
    FileReaderTool,
    SystemTool,
    WebScraperTool,
    WebSearchTool,
    default_tools,
)

app = typer.Typer(help="Think-act-observe agent orchestration.")


class Mode(str, Enum):
    plan = "plan"
    delegate = "delegate"


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


def build_workers(backend: ModelBackend, max_iterations: int | None) -> WorkerDirectory:
    """General executor plus two specialists with narrower tool sets."""
    return WorkerDirectory(
        [
            ReActAgent(
                backend,
                CapabilityRegistry(default_tools()),
                name="Executor",
                max_iterations=max_iterations,
            ),
            ReActAgent(
                backend,
                CapabilityRegistry(
                    [CodeWriterTool(), FileReaderTool(), DirectoryListerTool(), SystemTool()]
                ),
                name="FileSystemAgent",
                description="Reads, writes and lists files, and runs shell commands.",
                max_iterations=max_iterations,
            ),
            ReActAgent(
                backend,
                CapabilityRegistry([WebSearchTool(), WebScraperTool()]),
                name="WebAgent",
                description="Searches the web and reads web pages.",
                max_iterations=max_iterations,
            ),
        ]
    )


def build_orchestrator(mode: Mode, backend: ModelBackend, max_iterations: int | None) -> Orchestrator:
    if mode is Mode.plan:
        executor = ReActAgent(
            backend, CapabilityRegistry(default_tools()), max_iterations=max_iterations
        )
        return PlanExecuteOrchestrator(Planner(backend), executor)
    return DelegateOrchestrator(SupervisorAgent(backend, build_workers(backend, max_iterations)))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def run(
    task: str = typer.Argument(..., help="The task for the agents to perform."),
    mode: Mode = typer.Option(Mode.plan, "--mode", "-m", help="plan: plan then execute; delegate: supervisor routing."),
    mock: bool = typer.Option(False, "--mock", help="Use the scripted backend instead of a live model."),
    max_iterations: Optional[int] = typer.Option(
        None, "--max-iterations", min=0, help="Per-agent iteration ceiling. 0 disables it."
    ),
):
    """Run TASK through the orchestrator and print the final answer."""
    try:
        settings = Settings.from_env()
        if max_iterations is not None:
            settings = settings.model_copy(update={"max_iterations": max_iterations or None})

        if mock:
            backend: ModelBackend = ScriptedBackend(ARITHMETIC_SCRIPT, fallback=ARITHMETIC_FALLBACK)
            model = "scripted"
        else:
            backend = OpenAIBackend(
                settings.model,
                api_key=settings.api_key,
                base_url=settings.base_url,
                temperature=settings.temperature,
            )
            model = settings.model

        orchestrator = build_orchestrator(mode, backend, settings.max_iterations)
        display.banner(orchestrator.mode, model)
        orchestrator.run(task)
    except (OrchestrationError, ValidationError) as exc:
        display.halt(f"{type(exc).__name__}: {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def tools():
    """List the built-in tools."""
    registry = CapabilityRegistry(default_tools())
    display.tools_table((name, registry.resolve(name).description) for name in registry.names())


if __name__ == "__main__":
    app()
