# decoder.py
# Response decoder. The only place raw model text is turned into structure.
#
# Three schemas:
#   decode_decision  → Decision         (think-act-observe loop)
#   decode_routing   → RoutingDecision  (supervisor)
#   decode_plan      → Plan             (planner, free text, one step per line)
#
# Structured decoding is strict: anything that fails validation raises
# ParseError. There is no repair pass.

import re

from pydantic import BaseModel, ValidationError

from react_orchestrator.errors import ParseError
from react_orchestrator.models import Decision, Plan, RoutingDecision

_FENCE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def _unwrap(response: str) -> str:
    """Strip surrounding whitespace and one enclosing markdown code fence."""
    text = response.strip()
    match = _FENCE.match(text)
    if match:
        text = match.group(1).strip()
    return text


def _decode(response: str, schema: type[BaseModel], label: str) -> BaseModel:
    payload = _unwrap(response)
    if not payload:
        raise ParseError(f"Empty {label} response.", response)
    try:
        return schema.model_validate_json(payload)
    except ValidationError as exc:
        raise ParseError(f"{label} response is invalid: {exc}", response) from exc


def decode_decision(response: str) -> Decision:
    """
    Parse a Thought+Action object:

        {"thought": "...", "action": {"tool": "...", "args": "..."}}

    Raises ParseError on malformed JSON or a missing/mistyped field.
    """
    return _decode(response, Decision, "Thought+Action")


def decode_routing(response: str) -> RoutingDecision:
    """Parse a {"worker": ..., "task": ...} object. Raises ParseError on any mismatch."""
    return _decode(response, RoutingDecision, "Routing")


def decode_plan(response: str) -> Plan:
    # Permissive on purpose: every non-blank line is a step, kept as written.
    steps = [line.strip() for line in response.splitlines() if line.strip()]
    return Plan(steps=steps)
