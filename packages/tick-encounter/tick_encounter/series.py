"""Fold one organism through a sequence of encounters."""
from __future__ import annotations

from tick_encounter.rules import EncounterResult, encounter
from tick_encounter.types import Organism


def encounter_trace(first: Organism, *rest: Organism) -> list[EncounterResult]:
    """Meet every organism in *rest*, left to right, and record each result.

    Only the first organism's state carries over between steps. The other
    participant's new state and any offspring are kept in the trace but
    never fed back into the fold.
    """
    trace: list[EncounterResult] = []
    state = first
    for other in rest:
        result = encounter(state, other)
        trace.append(result)
        state = result.first
    return trace


def encounter_series(first: Organism, *rest: Organism) -> Organism:
    """Return the final state of *first* after meeting each of *rest* in order."""
    trace = encounter_trace(first, *rest)
    if not trace:
        return first.clone()
    return trace[-1].first
