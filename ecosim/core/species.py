"""
Species parameter tables

Each concrete species is a tag (Species / PlantSpecies) carrying a frozen
parameter record. Behavior code dispatches on the record, not on classes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from ecosim.config import SimulationConfig


class Role(Enum):
    """Trophic role of an animal species"""
    PREY = "prey"
    PREDATOR = "predator"


class PlantSpecies(Enum):
    BERRY_SHRUB = "BerryShrub"
    TREE = "Tree"

    def __str__(self) -> str:
        return self.value


class Species(Enum):
    ARMADILLO = "Armadillo"
    GIRAFFE = "Giraffe"
    OCELOT = "Ocelot"
    SNAKE = "Snake"
    LION = "Lion"

    def __str__(self) -> str:
        return self.value

    @property
    def params(self) -> 'SpeciesParams':
        return SPECIES_PARAMS[self]

    @property
    def role(self) -> Role:
        return SPECIES_PARAMS[self].role


@dataclass(frozen=True)
class SpeciesParams:
    """Per-species constants. Fields that do not apply to a role stay None."""
    role: Role
    breeding_age: int
    max_age: int
    breeding_probability: float
    max_litter_size: int
    color: Tuple[int, int, int]
    # Prey only
    night_move_probability: Optional[float] = None
    diet: FrozenSet[PlantSpecies] = frozenset()
    # Predator only
    prey: Optional[Species] = None
    day_hunt_probability: Optional[float] = None
    night_hunt_probability: Optional[float] = None


@dataclass(frozen=True)
class PlantParams:
    max_phase: int
    color: Tuple[int, int, int]


SPECIES_PARAMS = {
    Species.ARMADILLO: SpeciesParams(
        role=Role.PREY,
        breeding_age=10,
        max_age=30,
        breeding_probability=0.7,
        max_litter_size=5,
        color=(255, 200, 0),  # orange
        night_move_probability=0.5,
        diet=frozenset({PlantSpecies.BERRY_SHRUB}),
    ),
    Species.GIRAFFE: SpeciesParams(
        role=Role.PREY,
        breeding_age=15,
        max_age=175,
        breeding_probability=0.7,
        max_litter_size=3,
        color=(0, 255, 255),  # cyan
        night_move_probability=0.6,
        diet=frozenset({PlantSpecies.TREE}),
    ),
    # Nocturnal but somewhat active during the day
    Species.OCELOT: SpeciesParams(
        role=Role.PREDATOR,
        breeding_age=15,
        max_age=150,
        breeding_probability=0.3,
        max_litter_size=5,
        color=(0, 0, 255),  # blue
        prey=Species.ARMADILLO,
        day_hunt_probability=0.5,
        night_hunt_probability=0.75,
    ),
    # Mostly diurnal
    Species.SNAKE: SpeciesParams(
        role=Role.PREDATOR,
        breeding_age=15,
        max_age=250,
        breeding_probability=0.3,
        max_litter_size=30,
        color=(255, 0, 0),  # red
        prey=Species.ARMADILLO,
        day_hunt_probability=0.9,
        night_hunt_probability=0.25,
    ),
    # Primarily nocturnal, little hunting during the day
    Species.LION: SpeciesParams(
        role=Role.PREDATOR,
        breeding_age=15,
        max_age=180,
        breeding_probability=0.4,
        max_litter_size=2,
        color=(255, 0, 255),  # magenta
        prey=Species.GIRAFFE,
        day_hunt_probability=0.25,
        night_hunt_probability=0.9,
    ),
}

PLANT_PARAMS = {
    PlantSpecies.BERRY_SHRUB: PlantParams(max_phase=2, color=(0, 255, 0)),
    PlantSpecies.TREE: PlantParams(max_phase=3, color=(0, 153, 51)),
}


def predator_hungry_bound(prey: Species) -> int:
    """Upper bound (exclusive) of a predator's hungry duration, by what it hunts."""
    if prey is Species.ARMADILLO:
        return SimulationConfig.PREDATOR_HUNGRY_BOUND_ARMADILLO
    if prey is Species.GIRAFFE:
        return SimulationConfig.PREDATOR_HUNGRY_BOUND_GIRAFFE
    raise ValueError(f"No hungry duration configured for prey species {prey}")


def creation_order():
    """
    Seeding priority: (kind, creation probability) pairs, first match wins.
    Read at call time so config overrides apply.
    """
    return [
        (Species.GIRAFFE, SimulationConfig.GIRAFFE_CREATION_PROBABILITY),
        (Species.LION, SimulationConfig.LION_CREATION_PROBABILITY),
        (Species.SNAKE, SimulationConfig.SNAKE_CREATION_PROBABILITY),
        (Species.OCELOT, SimulationConfig.OCELOT_CREATION_PROBABILITY),
        (Species.ARMADILLO, SimulationConfig.ARMADILLO_CREATION_PROBABILITY),
        (PlantSpecies.BERRY_SHRUB, SimulationConfig.BERRY_SHRUB_CREATION_PROBABILITY),
        (PlantSpecies.TREE, SimulationConfig.TREE_CREATION_PROBABILITY),
    ]
