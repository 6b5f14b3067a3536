"""
Grid coordinates for the ecosystem field
"""

from typing import NamedTuple


class Location(NamedTuple):
    """Immutable (row, col) position in the field. Compared and hashed by value."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
