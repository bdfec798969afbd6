# agent.py
# The agent capability every runnable, routable unit satisfies.

from typing import Protocol, runtime_checkable


@runtime_checkable
class Agent(Protocol):
    """
    Runs a task to completion and returns the final answer.

    `name` and `description` are what a supervisor advertises to the model
    when choosing a worker. `run` raises an OrchestrationError on failure.
    """

    name: str
    description: str

    def run(self, task: str) -> str: ...
