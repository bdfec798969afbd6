import pytest
from pydantic import ValidationError

from react_orchestrator.models import Action, Decision, Transcript, TranscriptEntry


def _entry(n: int) -> TranscriptEntry:
    return TranscriptEntry(
        thought=f"thought {n}",
        action=Action(tool="Echo", args=f"arg {n}"),
        observation=f"obs {n}",
    )


def test_transcript_appends_in_order():
    transcript = Transcript()
    for n in range(3):
        transcript.append(_entry(n))

    assert len(transcript) == 3
    assert [e.observation for e in transcript] == ["obs 0", "obs 1", "obs 2"]
    assert transcript.entries[-1] == _entry(2)


def test_transcript_entries_cannot_be_mutated_through_accessor():
    transcript = Transcript()
    transcript.append(_entry(0))

    entries = transcript.entries
    assert isinstance(entries, tuple)
    with pytest.raises(ValidationError):
        entries[0].observation = "rewritten"


def test_transcript_render():
    transcript = Transcript()
    transcript.append(_entry(1))

    assert transcript.render() == (
        "Thought: thought 1\n"
        'Action: {"tool":"Echo","args":"arg 1"}\n'
        "Observation: obs 1"
    )


def test_empty_transcript():
    transcript = Transcript()
    assert transcript.render() == ""
    assert transcript.entries == ()


def test_decision_is_frozen():
    decision = Decision(thought="t", action=Action(tool="Finish", args="x"))
    with pytest.raises(ValidationError):
        decision.thought = "changed"
