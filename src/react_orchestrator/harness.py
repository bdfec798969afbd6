# harness.py
# Think-act-observe engine.
#
# The harness is the kernel. The model is a passive responder; this class
# owns all control flow, dispatch and state. The model only ever proposes an
# action; the harness resolves it against the capability registry, executes
# it and feeds the observation back.
#
# Control flow per iteration:
#   prompt → model → decode Thought+Action
#   → Finish?  return args verbatim
#   → resolve tool → execute → append to transcript → prompt again
#
# All terminal output is delegated to display.py. No formatting here.

from react_orchestrator import display
from react_orchestrator.decoder import decode_decision
from react_orchestrator.errors import MaxIterationsExceeded, ToolExecutionError, ToolNotFoundError
from react_orchestrator.llm import ModelBackend
from react_orchestrator.models import FINISH_TOOL, Transcript, TranscriptEntry
from react_orchestrator.registry import CapabilityRegistry

# ---------------------------------------------------------------------------
# System Prompt
# ---------------------------------------------------------------------------

REACT_PROMPT = """\
You are a helpful assistant operating in ReAct (Reason + Act) mode.

Task: {task}

You have the following tools available:
{tools}

Respond with ONLY a JSON object containing your `thought` and the `action` you \
want to take. The `action` has a `tool` and a string `args`:

{{
  "thought": "I should write the code to a file.",
  "action": {{
    "tool": "CodeWriter",
    "args": "./src/main.py \\"print('hello world')\\""
  }}
}}

After each action you will see its Observation. When the task is complete, \
use the `{finish}` tool with the final answer as `args`.\
"""


class ReActAgent:
    """
    Iterative reason/act agent over a fixed capability registry.

    Each call to `run` starts a fresh transcript. The loop ends only on a
    Finish action, a fatal error, or (when `max_iterations` is set) after
    that many model responses without a Finish.

    Example:
        agent = ReActAgent(backend, CapabilityRegistry([CalculatorTool()]))
        answer = agent.run("What is 4 * (3 + 5)?")
    """

    def __init__(
        self,
        backend: ModelBackend,
        tools: CapabilityRegistry,
        name: str = "Executor",
        description: str = "General-purpose agent that solves tasks step by step with tools.",
        max_iterations: int | None = None,
    ) -> None:
        if max_iterations is not None and max_iterations < 1:
            raise ValueError("max_iterations must be at least 1, or None for no limit.")
        self.name = name
        self.description = description
        self._backend = backend
        self._tools = tools
        self._max_iterations = max_iterations

    # ------------------------------------------------------------------
    # Prompting
    # ------------------------------------------------------------------

    def initial_prompt(self, task: str) -> str:
        return REACT_PROMPT.format(task=task, tools=self._tools.catalog(), finish=FINISH_TOOL)

    @staticmethod
    def _extend(initial: str, transcript: Transcript) -> str:
        if not len(transcript):
            return initial
        return f"{initial}\n{transcript.render()}"

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, tool_name: str, args: str) -> str:
        try:
            tool = self._tools.resolve(tool_name)
        except ToolNotFoundError:
            display.tool_not_found(tool_name)
            raise

        try:
            observation = tool.execute(args)
        except Exception as exc:
            display.tool_failed(tool_name, str(exc))
            raise ToolExecutionError(tool_name, args, str(exc)) from exc
        return str(observation)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def run(self, task: str) -> str:
        """
        Drive the loop until a Finish action and return its args unchanged.

        Raises TransportError, ParseError, ToolNotFoundError,
        ToolExecutionError or MaxIterationsExceeded. A failed tool is never
        folded back into the transcript; it ends the run.
        """
        display.agent_start(self.name, task)

        initial = self.initial_prompt(task)
        transcript = Transcript()
        iteration = 0

        while True:
            iteration += 1
            prompt = self._extend(initial, transcript)
            display.prompt_sent(iteration, prompt)

            decision = decode_decision(self._backend.call(prompt))
            display.react_thought(decision.thought)
            display.react_action(decision.action.tool, decision.action.args)

            if decision.is_finish:
                return decision.action.args

            if self._max_iterations is not None and iteration >= self._max_iterations:
                display.halt(f"{self.name}: iteration ceiling ({self._max_iterations}) reached.")
                raise MaxIterationsExceeded(self._max_iterations)

            observation = self._dispatch(decision.action.tool, decision.action.args)
            display.react_observation(observation)

            transcript.append(
                TranscriptEntry(
                    thought=decision.thought,
                    action=decision.action,
                    observation=observation,
                )
            )
