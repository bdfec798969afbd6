# registry.py
# Capability registry (tools) and worker directory (agents).
#
# Both are built once, before any run, and are read-only afterwards: the
# backing dict is only ever exposed through a MappingProxyType and there is
# no register/deregister API. Runs may share them without locking.

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from react_orchestrator.agent import Agent
from react_orchestrator.errors import ToolNotFoundError, WorkerNotFoundError
from react_orchestrator.models import FINISH_TOOL, AgentDescriptor
from react_orchestrator.tools import Tool


def _index(items: Iterable, kind: str) -> MappingProxyType:
    index: dict = {}
    for item in items:
        if item.name in index:
            raise ValueError(f"{kind} '{item.name}' is registered more than once.")
        index[item.name] = item
    return MappingProxyType(index)


class CapabilityRegistry(Mapping[str, Tool]):
    """Immutable tool-name → tool mapping handed to a ReActAgent."""

    def __init__(self, tools: Iterable[Tool]) -> None:
        tools = list(tools)
        for tool in tools:
            if tool.name == FINISH_TOOL:
                raise ValueError(f"'{FINISH_TOOL}' is reserved and cannot name a tool.")
        self._tools: Mapping[str, Tool] = _index(tools, "Tool")

    def resolve(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def catalog(self) -> str:
        """One `- name: description` line per tool, in registration order."""
        return "\n".join(f"- {tool.name}: {tool.description}" for tool in self._tools.values())

    def __getitem__(self, name: str) -> Tool:
        return self._tools[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)


class WorkerDirectory(Mapping[str, Agent]):
    """Immutable agent-name → agent mapping handed to a SupervisorAgent."""

    def __init__(self, agents: Iterable[Agent]) -> None:
        self._agents: Mapping[str, Agent] = _index(agents, "Worker")

    def resolve(self, name: str) -> Agent:
        try:
            return self._agents[name]
        except KeyError:
            raise WorkerNotFoundError(name) from None

    def descriptors(self) -> list[AgentDescriptor]:
        return [AgentDescriptor.of(agent) for agent in self._agents.values()]

    def __getitem__(self, name: str) -> Agent:
        return self._agents[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._agents)

    def __len__(self) -> int:
        return len(self._agents)
