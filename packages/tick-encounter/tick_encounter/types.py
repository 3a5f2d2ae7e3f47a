"""Core data types for organism encounters."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

MAX_VITALITY = 2**64 - 1


class DietCategory(Enum):
    """What an organism is able to eat. Fixed for the organism's lifetime."""

    CARNIVORE = "carnivore"
    OMNIVORE = "omnivore"
    HERBIVORE = "herbivore"
    PLANT = "plant"

    @property
    def eats_meat(self) -> bool:
        return self in (DietCategory.CARNIVORE, DietCategory.OMNIVORE)

    @property
    def eats_plants(self) -> bool:
        return self in (DietCategory.OMNIVORE, DietCategory.HERBIVORE)

    @property
    def is_plant(self) -> bool:
        return self is DietCategory.PLANT

    @classmethod
    def from_traits(cls, eats_meat: bool, eats_plants: bool) -> DietCategory:
        """Map the two capability flags to their category."""
        if eats_meat:
            return cls.OMNIVORE if eats_plants else cls.CARNIVORE
        return cls.HERBIVORE if eats_plants else cls.PLANT


class VitalityOverflowError(OverflowError):
    """Raised when a vitality sum does not fit the representable range."""

    def __init__(self, a: int, b: int, limit: int) -> None:
        self.a = a
        self.b = b
        self.limit = limit
        super().__init__(f"vitality {a} + {b} exceeds {limit}")


class PlantPairError(TypeError):
    """Raised when two plants are asked to meet."""

    def __init__(self, first: Organism, second: Organism) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"plants cannot encounter each other: {first.species!r}, {second.species!r}"
        )


@dataclass(frozen=True)
class Organism:
    """Immutable organism value.

    Attributes:
        species: Any equality-comparable species identifier.
        vitality: Life force in [0, MAX_VITALITY]. 0 means dead.
        diet: Diet category; never changes across clones.
    """

    species: Any
    vitality: int
    diet: DietCategory

    def __post_init__(self) -> None:
        if not isinstance(self.diet, DietCategory):
            raise TypeError(f"diet must be a DietCategory, got {self.diet!r}")
        if isinstance(self.vitality, bool) or not isinstance(self.vitality, int):
            raise TypeError(f"vitality must be an int, got {self.vitality!r}")
        if self.vitality < 0:
            raise ValueError(f"vitality must be >= 0, got {self.vitality}")
        if self.vitality > MAX_VITALITY:
            raise ValueError(
                f"vitality must be <= {MAX_VITALITY}, got {self.vitality}"
            )

    @property
    def eats_meat(self) -> bool:
        return self.diet.eats_meat

    @property
    def eats_plants(self) -> bool:
        return self.diet.eats_plants

    @property
    def is_plant(self) -> bool:
        return self.diet.is_plant

    def clone(self, vitality: int | None = None) -> Organism:
        """Copy this organism, optionally with a new vitality."""
        if vitality is None:
            return replace(self)
        return replace(self, vitality=vitality)

    def is_dead(self) -> bool:
        return self.vitality == 0

    def same_kind(self, other: Organism) -> bool:
        """True if both share a diet category and an equal species."""
        return self.diet is other.diet and self.species == other.species


def carnivore(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, DietCategory.CARNIVORE)


def omnivore(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, DietCategory.OMNIVORE)


def herbivore(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, DietCategory.HERBIVORE)


def plant(species: Any, vitality: int) -> Organism:
    return Organism(species, vitality, DietCategory.PLANT)


def check_pair(first: Organism, second: Organism) -> None:
    """Reject the one pairing that has no encounter rules. Raises PlantPairError."""
    if first.is_plant and second.is_plant:
        raise PlantPairError(first, second)
