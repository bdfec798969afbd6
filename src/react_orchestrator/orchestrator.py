# orchestrator.py
# Top-level drivers.
#
#   PlanExecuteOrchestrator: plan once, run every step through one executing
#       agent in order, join the results.
#   DelegateOrchestrator: hand the whole task to a supervisor.
#
# Both are fail-fast: the first error ends the run and nothing partial is
# returned.

from abc import ABC, abstractmethod

from react_orchestrator import display
from react_orchestrator.agent import Agent
from react_orchestrator.planner import Planner


class Orchestrator(ABC):
    """Runs one task end to end and returns the final answer."""

    mode: str = ""

    def run(self, task: str) -> str:
        display.task_received(task)
        result = self._run(task)
        display.final_result(result)
        return result

    @abstractmethod
    def _run(self, task: str) -> str:
        """Composition-specific body of `run`."""


class PlanExecuteOrchestrator(Orchestrator):
    """
    Sequential plan-then-execute composition.

    Steps run strictly in plan order, one at a time. Each step reaches the
    executor exactly as the planner wrote the line, so a plan of
    "1. step A" / "2. step B" runs "1. step A" then "2. step B" with the
    numbering kept. A failing step's error propagates unchanged; later steps
    never run and earlier results are discarded.
    """

    mode = "plan-execute"

    def __init__(self, planner: Planner, executor: Agent, separator: str = "\n") -> None:
        self._planner = planner
        self._executor = executor
        self._separator = separator

    def _run(self, task: str) -> str:
        plan = self._planner.plan(task)
        total = len(plan)
        results: list[str] = []

        for index, step in enumerate(plan.steps, start=1):
            display.step_start(index, total, step)
            try:
                result = self._executor.run(step)
            except Exception as exc:
                display.halt(f"Step {index}/{total} failed: {exc}")
                raise
            display.step_result(index, result)
            results.append(result)

        return self._separator.join(results)


class DelegateOrchestrator(Orchestrator):
    """Hierarchical composition: the supervisor's routing is the whole run."""

    mode = "delegate"

    def __init__(self, supervisor: Agent) -> None:
        self._supervisor = supervisor

    def _run(self, task: str) -> str:
        return self._supervisor.run(task)
