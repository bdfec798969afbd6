# models.py
# Data contracts for the orchestration engine.
# No business logic lives here: pure schema, validation and the transcript.

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

FINISH_TOOL = "Finish"


class Action(BaseModel):
    """A request to invoke one named tool with an opaque argument string."""

    model_config = ConfigDict(frozen=True)

    tool: str = Field(..., description="Tool identifier, or 'Finish' to end the run.")
    args: str = Field(..., description="Tool-specific argument string.")


class Decision(BaseModel):
    """One Thought+Action emitted by the model for a single iteration."""

    model_config = ConfigDict(frozen=True)

    thought: str = Field(..., description="Free-text reasoning. Never parsed for control flow.")
    action: Action

    @property
    def is_finish(self) -> bool:
        return self.action.tool == FINISH_TOOL


class RoutingDecision(BaseModel):
    """The supervisor's choice of worker and the sub-task handed to it."""

    model_config = ConfigDict(frozen=True)

    worker: str
    task: str


class Plan(BaseModel):
    """Ordered sub-tasks produced by the planner for one task."""

    steps: list[str] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.steps)


class AgentDescriptor(BaseModel):
    """Name and capability blurb used to advertise a routable worker."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str

    @classmethod
    def of(cls, agent: Any) -> "AgentDescriptor":
        return cls(name=agent.name, description=agent.description)


class TranscriptEntry(BaseModel):
    """One completed (Thought, Action, Observation) triple."""

    model_config = ConfigDict(frozen=True)

    thought: str
    action: Action
    observation: str

    def render(self) -> str:
        return (
            f"Thought: {self.thought}\n"
            f"Action: {self.action.model_dump_json()}\n"
            f"Observation: {self.observation}"
        )


class Transcript:
    """
    Append-only record of one run's iterations.

    Entries are never removed or reordered; `entries` hands out a tuple so
    callers cannot mutate the backing list.
    """

    def __init__(self) -> None:
        self._entries: list[TranscriptEntry] = []

    def append(self, entry: TranscriptEntry) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> tuple[TranscriptEntry, ...]:
        return tuple(self._entries)

    def render(self) -> str:
        return "\n".join(entry.render() for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(tuple(self._entries))
