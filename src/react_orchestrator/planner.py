# planner.py
# One-shot planner: asks the model for a numbered step list.

from react_orchestrator import display
from react_orchestrator.decoder import decode_plan
from react_orchestrator.llm import ModelBackend
from react_orchestrator.models import Plan

PLANNER_PROMPT = """\
You are a planner agent. Your job is to create a step-by-step plan to \
accomplish the following task: {task}

Respond with a numbered list of steps, one step per line, and nothing else.\
"""


class Planner:
    """Turns a task into an ordered Plan with a single model call."""

    name = "Planner"
    description = "Breaks a task down into an ordered list of steps."

    def __init__(self, backend: ModelBackend) -> None:
        self._backend = backend

    def plan(self, task: str) -> Plan:
        prompt = PLANNER_PROMPT.format(task=task)
        display.prompt_sent(1, prompt)
        plan = decode_plan(self._backend.call(prompt))
        display.plan_parsed(plan)
        return plan

    def run(self, task: str) -> str:
        return "\n".join(self.plan(task).steps)
