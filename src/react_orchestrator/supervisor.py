# supervisor.py
# Single-hop router over a directory of worker agents.
#
# One model call picks a worker and rewrites the task for it; the worker's
# result (or failure) is returned as-is. No re-routing, no fallback worker.

from react_orchestrator import display
from react_orchestrator.decoder import decode_routing
from react_orchestrator.errors import WorkerNotFoundError
from react_orchestrator.llm import ModelBackend
from react_orchestrator.registry import WorkerDirectory

SUPERVISOR_PROMPT = """\
You are a supervisor agent. Your job is to route a task to the correct worker agent.

The available workers are:
{workers}

The task is: {task}

Respond with ONLY a JSON object containing the name of the `worker` to use and \
the `task` to give them. The task can be the original task, or a more specific \
version of it:

{{
  "worker": "FileSystemAgent",
  "task": "Read the content of the file src/main.py"
}}\
"""


class SupervisorAgent:
    """
    Routes each task to exactly one worker from a WorkerDirectory.

    The supervisor is itself an agent, so it can be listed as a worker of
    another supervisor.
    """

    def __init__(
        self,
        backend: ModelBackend,
        workers: WorkerDirectory,
        name: str = "Supervisor",
        description: str = "Routes a task to the worker agent best suited to complete it.",
    ) -> None:
        self.name = name
        self.description = description
        self._backend = backend
        self._workers = workers

    def prompt(self, task: str) -> str:
        listing = "\n".join(f"- {d.name}: {d.description}" for d in self._workers.descriptors())
        return SUPERVISOR_PROMPT.format(workers=listing, task=task)

    def run(self, task: str) -> str:
        display.agent_start(self.name, task)
        display.workers_listed(self._workers.descriptors())

        prompt = self.prompt(task)
        display.prompt_sent(1, prompt)
        decision = decode_routing(self._backend.call(prompt))

        try:
            worker = self._workers.resolve(decision.worker)
        except WorkerNotFoundError:
            display.worker_not_found(decision.worker)
            raise

        display.routing_decision(decision.worker, decision.task)
        return worker.run(decision.task)
