"""Cell states and their character representation."""

from enum import IntEnum
from typing import Any

ALIVE_CHAR = "*"
DEAD_CHAR = "."


class CellState(IntEnum):
    """State of a single cell.

    Integer valued so grids of states can live in numpy arrays directly.
    """

    DEAD = 0
    ALIVE = 1

    def to_char(self) -> str:
        """Get the seed-file character for this state."""
        return ALIVE_CHAR if self is CellState.ALIVE else DEAD_CHAR

    @classmethod
    def from_char(cls, char: str) -> "CellState":
        """Map a seed-file character to a state.

        Only '*' is alive; every other marker is dead.
        """
        return cls.ALIVE if char == ALIVE_CHAR else cls.DEAD

    @classmethod
    def from_value(cls, value: Any) -> "CellState":
        """Coerce a character, state, bool or number to a state."""
        if isinstance(value, CellState):
            return value
        if isinstance(value, str):
            return cls.from_char(value)
        return cls.ALIVE if value else cls.DEAD

    def __str__(self) -> str:
        return self.to_char()
