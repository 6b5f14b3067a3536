"""
Lifecycle state shared by animals and plants
"""

from typing import Optional

from ecosim.core.location import Location


class Organism:
    """Alive flag plus location. A dead organism never has a location."""
    _next_id = 1

    def __init__(self, location: Optional[Location]) -> None:
        self.id = Organism._next_id
        Organism._next_id += 1
        self.alive = True
        self.location = location

    def is_alive(self) -> bool:
        return self.alive

    def set_dead(self) -> None:
        """Irreversible. Safe to call more than once."""
        self.alive = False
        self.location = None

    def set_location(self, location: Location) -> None:
        assert self.alive, f"cannot move dead organism {self.id}"
        assert location is not None
        self.location = location
