"""Encounter rule engine.

An encounter is resolved in two steps. ``classify`` walks the ordered
decision tree and names the rule that applies to the pair; ``encounter``
looks that rule up in ``_RESOLVERS`` and builds the new states. Rules are
checked in this order:

1. A dead participant means nothing happens.
2. Same species and same diet category breed an offspring.
3. Pairs where nobody can eat the other are left alone.
4. Two meat-eaters fight; the stronger kills the weaker and gains half its
   vitality, a tie kills both.
5. A plant is eaten whole by a plant-eater.
6. A meat-eater preys on a non-meat-eater only when strictly stronger.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, NamedTuple

from tick_encounter.types import Organism, check_pair
from tick_encounter.vitality import safe_add


class Outcome(Enum):
    """Which encounter rule applies to a pair."""

    DEAD_PARTICIPANT = "dead_participant"
    OFFSPRING = "offspring"
    NO_INTERACTION = "no_interaction"
    MUTUAL_KILL = "mutual_kill"
    FIRST_OVERPOWERS = "first_overpowers"
    SECOND_OVERPOWERS = "second_overpowers"
    FIRST_GRAZES = "first_grazes"
    SECOND_GRAZES = "second_grazes"
    FIRST_PREYS = "first_preys"
    SECOND_PREYS = "second_preys"
    PREY_ESCAPES = "prey_escapes"


class EncounterResult(NamedTuple):
    """States of both participants after an encounter, plus any offspring."""

    first: Organism
    second: Organism
    offspring: Organism | None = None


def _is_eligible(a: Organism, b: Organism) -> bool:
    if a.is_plant:
        return b.eats_plants
    if b.is_plant:
        return a.eats_plants
    return a.eats_meat or b.eats_meat


def classify(a: Organism, b: Organism) -> Outcome:
    """Name the rule that resolves an encounter between *a* and *b*.

    Raises PlantPairError if both are plants.
    """
    check_pair(a, b)

    if a.is_dead() or b.is_dead():
        return Outcome.DEAD_PARTICIPANT
    if a.same_kind(b):
        return Outcome.OFFSPRING
    if not _is_eligible(a, b):
        return Outcome.NO_INTERACTION

    # Past the gate, a plant always faces a plant-eater.
    if a.is_plant:
        return Outcome.SECOND_GRAZES
    if b.is_plant:
        return Outcome.FIRST_GRAZES

    if a.eats_meat and b.eats_meat:
        if a.vitality == b.vitality:
            return Outcome.MUTUAL_KILL
        if a.vitality < b.vitality:
            return Outcome.SECOND_OVERPOWERS
        return Outcome.FIRST_OVERPOWERS

    if a.eats_meat:
        if a.vitality <= b.vitality:
            return Outcome.PREY_ESCAPES
        return Outcome.FIRST_PREYS
    if b.vitality <= a.vitality:
        return Outcome.PREY_ESCAPES
    return Outcome.SECOND_PREYS


def _unchanged(a: Organism, b: Organism) -> EncounterResult:
    return EncounterResult(a.clone(), b.clone())


def _breed(a: Organism, b: Organism) -> EncounterResult:
    child = a.clone(safe_add(a.vitality, b.vitality) // 2)
    return EncounterResult(a.clone(), b.clone(), child)


def _mutual_kill(a: Organism, b: Organism) -> EncounterResult:
    return EncounterResult(a.clone(0), b.clone(0))


def _first_eats_half(a: Organism, b: Organism) -> EncounterResult:
    return EncounterResult(a.clone(safe_add(a.vitality, b.vitality // 2)), b.clone(0))


def _second_eats_half(a: Organism, b: Organism) -> EncounterResult:
    return EncounterResult(a.clone(0), b.clone(safe_add(b.vitality, a.vitality // 2)))


def _first_eats_whole(a: Organism, b: Organism) -> EncounterResult:
    return EncounterResult(a.clone(safe_add(a.vitality, b.vitality)), b.clone(0))


def _second_eats_whole(a: Organism, b: Organism) -> EncounterResult:
    return EncounterResult(a.clone(0), b.clone(safe_add(b.vitality, a.vitality)))


_RESOLVERS: dict[Outcome, Callable[[Organism, Organism], EncounterResult]] = {
    Outcome.DEAD_PARTICIPANT: _unchanged,
    Outcome.OFFSPRING: _breed,
    Outcome.NO_INTERACTION: _unchanged,
    Outcome.MUTUAL_KILL: _mutual_kill,
    Outcome.FIRST_OVERPOWERS: _first_eats_half,
    Outcome.SECOND_OVERPOWERS: _second_eats_half,
    Outcome.FIRST_GRAZES: _first_eats_whole,
    Outcome.SECOND_GRAZES: _second_eats_whole,
    Outcome.FIRST_PREYS: _first_eats_half,
    Outcome.SECOND_PREYS: _second_eats_half,
    Outcome.PREY_ESCAPES: _unchanged,
}


def encounter(a: Organism, b: Organism) -> EncounterResult:
    """Resolve one encounter between *a* and *b*.

    Pure: neither input is touched, and the result holds fresh clones.
    Raises PlantPairError for two plants and VitalityOverflowError when a
    vitality gain does not fit; no partial result is produced in either case.
    """
    return _RESOLVERS[classify(a, b)](a, b)
