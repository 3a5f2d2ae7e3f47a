"""tick-encounter — Predation, grazing and breeding rules between organisms."""
from tick_encounter.rules import EncounterResult, Outcome, classify, encounter
from tick_encounter.series import encounter_series, encounter_trace
from tick_encounter.types import (
    MAX_VITALITY,
    DietCategory,
    Organism,
    PlantPairError,
    VitalityOverflowError,
    carnivore,
    check_pair,
    herbivore,
    omnivore,
    plant,
)
from tick_encounter.vitality import safe_add

__all__ = [
    "MAX_VITALITY",
    "DietCategory",
    "EncounterResult",
    "Organism",
    "Outcome",
    "PlantPairError",
    "VitalityOverflowError",
    "carnivore",
    "check_pair",
    "classify",
    "encounter",
    "encounter_series",
    "encounter_trace",
    "herbivore",
    "omnivore",
    "plant",
    "safe_add",
]
