"""
Plant class hierarchy for the ecosystem simulation

A CorePlant is the stationary centre of a plant. On day steps it grows, and at
fixed growth states it spreads LeafCells around itself; leaf cells are the
edible part, eaten by prey whose diet includes the parent's species.
"""

from abc import ABC, abstractmethod
from typing import List

from ecosim.config import SimulationConfig
from ecosim.core.conditions import Time
from ecosim.core.location import Location
from ecosim.core.organism import Organism
from ecosim.core.species import PLANT_PARAMS, PlantParams, PlantSpecies


class Plant(Organism, ABC):
    """Abstract base class for core plants and leaf cells"""

    @abstractmethod
    def act(self, current_field, next_field, time: Time) -> None:
        pass


class CorePlant(Plant):
    """
    Centre of a plant. Grows through phases:
        1: single cell, no leaves
        2: leaves on the 2x2 block towards +row/+col (offsets 0..1)
        3: leaves on the full 3x3 block around the core (offsets -1..1)
    """

    def __init__(self, species: PlantSpecies, location: Location) -> None:
        super().__init__(location)
        self.species = species
        self.params: PlantParams = PLANT_PARAMS[species]
        self.growth_state = 0
        self.phase = 1
        self.leaf_cells: List['LeafCell'] = []

    def __repr__(self) -> str:
        return (f"{self.species}{{growth={self.growth_state}, phase={self.phase}, "
                f"leaves={len(self.leaf_cells)}, location={self.location}}}")

    def valid_phase(self, phase: int) -> bool:
        """Whether this plant's species can grow to the given phase."""
        return phase <= self.params.max_phase

    def act(self, current_field, next_field, time: Time) -> None:
        """Grow by day and always carry the core over to the next field."""
        if time is Time.DAY:
            # Everything was eaten - start over
            if self.growth_state >= SimulationConfig.PHASE_2_AGE and not self.leaf_cells:
                self.reset_plant()

            self.growth_state += 1

            if self.growth_state == SimulationConfig.PHASE_2_AGE and self.valid_phase(2):
                self.change_phase(2)
                self.handle_growth(current_field, next_field)
            elif self.growth_state == SimulationConfig.PHASE_3_AGE and self.valid_phase(3):
                self.change_phase(3)
                self.handle_growth(current_field, next_field)

        next_field.place_plant(self, self.location)

    def reset_plant(self) -> None:
        self.growth_state = 0
        self.phase = 1

    def change_phase(self, phase: int) -> None:
        assert phase in (2, 3), f"cannot change to phase {phase}"
        self.phase = phase

    def handle_growth(self, current_field, next_field) -> List['LeafCell']:
        """
        Spawn the leaf cells of the current phase into the next field.
        Phase 3 replaces the phase 2 leaves; the old ones die.
        """
        row, col = self.location.row, self.location.col
        depth, width = current_field.depth, current_field.width

        min_offset = 0 if self.phase == 2 else -1
        if self.phase == 3:
            for leaf in self.leaf_cells:
                leaf.set_dead()
            self.leaf_cells.clear()

        spawned = []
        for roffset in range(min_offset, 2):
            for coffset in range(min_offset, 2):
                next_row = row + roffset
                next_col = col + coffset
                if (0 <= next_row < depth and 0 <= next_col < width
                        and (roffset != 0 or coffset != 0)):
                    spawned.append(self.add_leaf_cell(Location(next_row, next_col), next_field))
        return spawned

    def add_leaf_cell(self, location: Location, next_field) -> 'LeafCell':
        leaf = LeafCell(location, self)
        next_field.place_plant(leaf, location)
        self.leaf_cells.append(leaf)
        return leaf

    def remove_leaf_cell(self, leaf_cell: 'LeafCell') -> None:
        if leaf_cell in self.leaf_cells:
            self.leaf_cells.remove(leaf_cell)


class LeafCell(Plant):
    """Edible extension of a CorePlant. Stays put until eaten."""

    def __init__(self, location: Location, parent: CorePlant) -> None:
        super().__init__(location)
        self.parent = parent

    def __repr__(self) -> str:
        return f"LeafCell{{parent={self.parent_species}, alive={self.alive}, location={self.location}}}"

    @property
    def parent_species(self) -> PlantSpecies:
        return self.parent.species

    def act(self, current_field, next_field, time: Time) -> None:
        if self.is_alive():
            next_field.place_plant(self, self.location)

    def remove_leaf(self) -> None:
        """Eaten: dies and detaches from its parent. Called by the eating prey."""
        self.set_dead()
        self.parent.remove_leaf_cell(self)


def create_plant(species: PlantSpecies, location: Location) -> CorePlant:
    return CorePlant(species, location)
