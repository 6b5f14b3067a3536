"""
Statistics on the state of a field

Keeps a counter per species found in the field. Counts are not kept up to
date as animals are placed; they are regenerated when a report is requested
after reset().
"""

from collections import OrderedDict
from typing import Dict

from ecosim.core.location import Location
from ecosim.core.species import Species


class FieldStats:
    """Lazily rebuilt per-species population counters"""

    def __init__(self) -> None:
        self.counters: Dict[Species, int] = OrderedDict()
        self.counts_valid = False

    def reset(self) -> None:
        """Invalidate the current set of statistics; zero all counts."""
        self.counts_valid = False
        for key in self.counters:
            self.counters[key] = 0

    def increment_count(self, species: Species) -> None:
        self.counters[species] = self.counters.get(species, 0) + 1

    def count_finished(self) -> None:
        self.counts_valid = True

    def is_viable(self, field) -> bool:
        return field.is_viable()

    def generate_counts(self, field) -> None:
        """Walk the grid and count every live animal by species."""
        self.reset()
        for row in range(field.depth):
            for col in range(field.width):
                animal = field.get_animal_at(Location(row, col))
                if animal is not None and animal.is_alive():
                    self.increment_count(animal.species)
        self.count_finished()

    def get_counts(self, field) -> Dict[Species, int]:
        if not self.counts_valid:
            self.generate_counts(field)
        return {s: self.counters[s] for s in Species if self.counters.get(s)}

    def get_population_details(self, field) -> str:
        """
        One-line report, e.g.
            "Armadillo: 12 Lion: 3 Infected: 1 Leaves: 40"
        Species with no live members are left out.
        """
        details = ""
        for species, count in self.get_counts(field).items():
            details += f"{species}: {count} "
        details += f"Infected: {field.infected_count()} Leaves: {field.edible_plant_count()}"
        return details
