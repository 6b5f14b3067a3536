"""
Rectangular grid of field positions

Each cell holds at most one animal and at most one plant. The grid is a dense
arena (two numpy object arrays indexed [row, col]); the flat animal and plant
collections keep placement order and drive iteration in the simulator.

COORDINATE CONVENTION: Uses [row, col] indexing (NumPy order), row in
0..depth-1 and col in 0..width-1. The field does not wrap at its edges.
"""

from typing import Dict, List, Optional

import numpy as np

from ecosim.core import randomizer
from ecosim.core.animal import Predator, Prey
from ecosim.core.location import Location
from ecosim.core.plant import LeafCell
from ecosim.core.species import Species


class Field:
    """Grid store of (animal, plant) pairs plus flat occupant collections"""

    def __init__(self, depth: int, width: int) -> None:
        assert depth > 0 and width > 0, f"invalid field size {depth}x{width}"
        self.depth = int(depth)
        self.width = int(width)
        self._animal_grid = np.empty((self.depth, self.width), dtype=object)
        self._plant_grid = np.empty((self.depth, self.width), dtype=object)
        # Keyed by organism id; dicts keep insertion order and give O(1) eviction
        self._animals: Dict[int, object] = {}
        self._plants: Dict[int, object] = {}

    # ------------------------------------------------------------------
    # Placement and lookup
    # ------------------------------------------------------------------

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self.depth and 0 <= location.col < self.width

    def _check(self, location: Location) -> None:
        assert location is not None, "location must not be None"
        assert self.in_bounds(location), f"{location} outside {self.depth}x{self.width} field"

    def place_animal(self, animal, location: Location) -> None:
        """
        Place an animal at the given location.
        If there is already an animal there it is evicted from the field.
        """
        self._check(location)
        existing = self._animal_grid[location.row, location.col]
        if existing is not None:
            self._animals.pop(existing.id, None)
        self._animal_grid[location.row, location.col] = animal
        self._animals[animal.id] = animal

    def place_plant(self, plant, location: Location) -> None:
        """
        Place a plant at the given location.
        If there is already a plant there it is evicted from the field.
        """
        self._check(location)
        existing = self._plant_grid[location.row, location.col]
        if existing is not None:
            self._plants.pop(existing.id, None)
        self._plant_grid[location.row, location.col] = plant
        self._plants[plant.id] = plant

    def get_animal_at(self, location: Location):
        """Return the animal at the given location, or None."""
        self._check(location)
        return self._animal_grid[location.row, location.col]

    def get_plant_at(self, location: Location):
        """Return the plant at the given location, or None."""
        self._check(location)
        return self._plant_grid[location.row, location.col]

    @property
    def animals(self) -> List:
        return list(self._animals.values())

    @property
    def plants(self) -> List:
        return list(self._plants.values())

    # ------------------------------------------------------------------
    # Neighbourhood queries
    # ------------------------------------------------------------------

    def _locations_within(self, location: Optional[Location], radius: int) -> List[Location]:
        locations = []
        if location is None:
            return locations
        row, col = location.row, location.col
        for roffset in range(-radius, radius + 1):
            next_row = row + roffset
            if 0 <= next_row < self.depth:
                for coffset in range(-radius, radius + 1):
                    next_col = col + coffset
                    # Exclude invalid locations and the location itself
                    if 0 <= next_col < self.width and (roffset != 0 or coffset != 0):
                        locations.append(Location(next_row, next_col))

        # Callers rely on first-match-wins over a random order
        randomizer.shuffle(locations)
        return locations

    def get_adjacent_locations(self, location: Optional[Location]) -> List[Location]:
        """Shuffled in-bounds neighbours (up to 8), excluding the location itself."""
        return self._locations_within(location, 1)

    def get_nearby_locations(self, location: Optional[Location]) -> List[Location]:
        """Shuffled in-bounds locations within 2 cells, excluding the location itself."""
        return self._locations_within(location, 2)

    def get_free_adjacent_locations(self, location: Optional[Location]) -> List[Location]:
        """Shuffled adjacent locations with no live animal."""
        free = []
        for loc in self.get_adjacent_locations(location):
            animal = self._animal_grid[loc.row, loc.col]
            if animal is None or not animal.is_alive():
                free.append(loc)
        return free

    # ------------------------------------------------------------------
    # Whole-field queries
    # ------------------------------------------------------------------

    def is_viable(self) -> bool:
        """
        Return whether there is at least one live prey and one live predator.
        Plant cores never die, so plants do not count towards viability.
        """
        prey_found = False
        predator_found = False
        for animal in self._animals.values():
            if prey_found and predator_found:
                break
            if not animal.is_alive():
                continue
            if isinstance(animal, Prey):
                prey_found = True
            elif isinstance(animal, Predator):
                predator_found = True
        return prey_found and predator_found

    def field_stats(self) -> Dict:
        """Live animal count per species, in species declaration order."""
        counts = {}
        for animal in self._animals.values():
            if animal.is_alive():
                counts[animal.species] = counts.get(animal.species, 0) + 1
        return {s: counts[s] for s in Species if s in counts}

    def infected_count(self) -> int:
        return sum(1 for a in self._animals.values() if a.is_alive() and a.infected)

    def edible_plant_count(self) -> int:
        """Number of live leaf cells in the field. Plant cores are not edible."""
        return sum(1 for p in self._plants.values() if isinstance(p, LeafCell) and p.is_alive())

    def remove_dead(self) -> int:
        """
        Drop occupants that died after being placed (e.g. a prey that moved
        and was then caught at its old cell). Returns how many were removed.
        """
        removed = 0
        for store, grid in ((self._animals, self._animal_grid), (self._plants, self._plant_grid)):
            for row, col in np.argwhere(grid != None):  # noqa: E711
                occupant = grid[row, col]
                if not occupant.is_alive():
                    grid[row, col] = None
                    if store.pop(occupant.id, None) is not None:
                        removed += 1
        return removed

    def clear(self) -> None:
        """Empty the field."""
        self._animal_grid.fill(None)
        self._plant_grid.fill(None)
        self._animals.clear()
        self._plants.clear()
