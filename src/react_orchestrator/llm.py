# llm.py
# Model backend contract and implementations.
#
# A backend has exactly one operation: prompt in, response text out.
# Transport and authentication failures surface as TransportError and are
# never retried here.

import json
import os
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dotenv import load_dotenv
from openai import OpenAI, OpenAIError

from react_orchestrator.errors import TransportError

load_dotenv()

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


@runtime_checkable
class ModelBackend(Protocol):
    """Anything that can turn a prompt string into a response string."""

    def call(self, prompt: str) -> str: ...


# ---------------------------------------------------------------------------
# OpenAI-compatible backend
# ---------------------------------------------------------------------------


class OpenAIBackend:
    """
    Chat-completion backend for any OpenAI-compatible endpoint.

    Defaults to OpenRouter. The prompt is sent as a single user message and
    the stripped content of the first choice is returned.

    Example:
        backend = OpenAIBackend("anthropic/claude-3.5-haiku")
        text = backend.call("Say hi.")
    """

    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        base_url: str = OPENROUTER_BASE_URL,
        temperature: float = 0.1,
    ) -> None:
        self._model = model
        self._temperature = temperature
        try:
            self._client = OpenAI(
                base_url=base_url,
                api_key=api_key or os.getenv("OPENROUTER_API_KEY"),
            )
        except OpenAIError as exc:
            raise TransportError(f"Could not create client for {base_url}: {exc}") from exc

    def call(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
            )
        except OpenAIError as exc:
            raise TransportError(f"Model call to '{self._model}' failed: {exc}") from exc

        if not response.choices or response.choices[0].message.content is None:
            raise TransportError(f"Model '{self._model}' returned no content.")
        return response.choices[0].message.content.strip()


# ---------------------------------------------------------------------------
# Scripted backend
# ---------------------------------------------------------------------------


class ScriptedBackend:
    """
    Deterministic backend driven by (needle, response) rules.

    The first rule whose needle appears in the prompt wins, so rules keyed on
    later observations must come before rules keyed on the task itself.
    Every prompt received is kept in `prompts`, in call order.
    """

    def __init__(self, rules: Iterable[tuple[str, str]], fallback: str | None = None) -> None:
        self._rules = tuple(rules)
        self._fallback = fallback
        self.prompts: list[str] = []

    def call(self, prompt: str) -> str:
        self.prompts.append(prompt)
        for needle, response in self._rules:
            if needle in prompt:
                return response
        if self._fallback is None:
            raise TransportError("Scripted backend has no response for this prompt.")
        return self._fallback


def _decision(thought: str, tool: str, args: str) -> str:
    return json.dumps({"thought": thought, "action": {"tool": tool, "args": args}}, indent=2)


ARITHMETIC_TASK = "What is 4 * (3 + 5)?"

ARITHMETIC_ROUTING = json.dumps({"worker": "Executor", "task": ARITHMETIC_TASK}, indent=2)

ARITHMETIC_SCRIPT: tuple[tuple[str, str], ...] = (
    (
        "Observation: 32",
        _decision("I have the final answer, which is 32.", "Finish", "32"),
    ),
    (
        "Observation: 8",
        _decision("The parenthesis is 8. Now multiply 4 by 8.", "Calculator", "4 * 8"),
    ),
    ("step-by-step plan", ARITHMETIC_TASK),
    ("route a task to the correct worker", ARITHMETIC_ROUTING),
    (
        f"Task: {ARITHMETIC_TASK}",
        _decision("Evaluate the parenthesis first: 3 + 5.", "Calculator", "3 + 5"),
    ),
)

ARITHMETIC_FALLBACK = _decision(
    "I am in an unknown state. Finishing to avoid a loop.",
    "Finish",
    "Error: unknown state in scripted backend.",
)
