"""Immutable Game of Life board."""

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

import numpy as np

from .cell import CellState
from .neighbours import count_all_neighbours


class InvalidDimensions(ValueError):
    """Raised when a cell grid does not match the declared board size."""


@dataclass(frozen=True)
class TickStats:
    """Counts gathered while computing one generation transition."""

    current_generation: int
    next_generation: int
    size: Tuple[int, int]
    live_cells_processed: int
    dead_cells_processed: int

    @property
    def size_label(self) -> str:
        """Board size formatted as 'rowsxcols'."""
        return f"{self.size[0]}x{self.size[1]}"

    @property
    def cells_processed(self) -> int:
        return self.live_cells_processed + self.dead_cells_processed


class Board:
    """A snapshot of one generation of the Game of Life.

    Boards never change after construction: tick() returns a new board with
    the next generation. Two boards are equal when their sizes and cells
    match; the generation number is not compared.
    """

    def __init__(self, generation: int, size: Tuple[int, int], cells: Any) -> None:
        """Create a board.

        Args:
            generation: Generation number of this snapshot
            size: (rows, cols) of the grid
            cells: Grid of cells as rows of '*'/'.' characters, CellState
                values, booleans, or a 2D numpy array. Anything that is not
                alive is dead.

        Raises:
            InvalidDimensions: If the grid shape does not match size
        """
        rows, cols = size
        if rows < 0 or cols < 0:
            raise InvalidDimensions(f"Board size must be non-negative, got {rows}x{cols}")

        self._generation = int(generation)
        self._size = (int(rows), int(cols))
        self._cells = _to_state_array(cells, self._size)
        self._cells.setflags(write=False)

    @classmethod
    def _from_array(cls, generation: int, cells: np.ndarray) -> "Board":
        board = cls.__new__(cls)
        board._generation = generation
        board._size = (int(cells.shape[0]), int(cells.shape[1]))
        board._cells = cells
        board._cells.setflags(write=False)
        return board

    @property
    def generation(self) -> int:
        """Generation number of this board."""
        return self._generation

    @property
    def size(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return self._size

    @property
    def rows(self) -> int:
        return self._size[0]

    @property
    def cols(self) -> int:
        return self._size[1]

    @property
    def cells(self) -> np.ndarray:
        """Read-only (rows, cols) array of CellState values."""
        return self._cells

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def cell(self, row: int, col: int) -> CellState:
        """Get the state of a cell.

        Raises:
            IndexError: If the coordinates are outside the board
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        return CellState(int(self._cells[row, col]))

    def tick(self) -> "Board":
        """Compute the next generation."""
        next_board, _ = self.advance()
        return next_board

    def advance(self) -> Tuple["Board", TickStats]:
        """Compute the next generation along with processing counts.

        Every cell of the next grid is derived from the current grid only:
        - Live cell with 2-3 neighbours survives
        - Dead cell with exactly 3 neighbours becomes alive
        - All other cells die or stay dead

        Returns:
            Tuple of (next board, tick statistics)
        """
        alive = self._cells == CellState.ALIVE
        neighbour_counts = count_all_neighbours(alive)

        survive_mask = alive & ((neighbour_counts == 2) | (neighbour_counts == 3))
        birth_mask = ~alive & (neighbour_counts == 3)

        next_cells = np.zeros(self._size, dtype=np.int8)
        next_cells[survive_mask | birth_mask] = CellState.ALIVE

        live = int(np.count_nonzero(alive))
        stats = TickStats(
            current_generation=self._generation,
            next_generation=self._generation + 1,
            size=self._size,
            live_cells_processed=live,
            dead_cells_processed=alive.size - live,
        )

        return Board._from_array(self._generation + 1, next_cells), stats

    def to_chars(self) -> List[List[str]]:
        """Convert cells to nested lists of '*'/'.' characters."""
        return [[CellState(int(value)).to_char() for value in row] for row in self._cells]

    def row_strings(self) -> List[str]:
        """One '*'/'.' string per row."""
        return ["".join(row) for row in self.to_chars()]

    def __eq__(self, other: object) -> bool:
        """Check if two boards hold the same cells."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._size, self._cells.tobytes()))

    def __str__(self) -> str:
        """Seed-file representation: generation header, size line, then the grid."""
        lines = [f"Generation {self._generation}", f"{self.rows} {self.cols}"]
        lines.extend(self.row_strings())
        return "".join(f"{line}\n" for line in lines)

    def __repr__(self) -> str:
        return f"Board(generation={self._generation}, size={self._size}, population={self.population})"


def _to_state_array(cells: Any, size: Tuple[int, int]) -> np.ndarray:
    """Build an int8 grid of CellState values, checking it matches size."""
    rows, cols = size

    if isinstance(cells, np.ndarray) and cells.dtype.kind not in "USO":
        # an empty array stands for "no rows" only
        no_rows = rows == 0 and cells.shape in ((0,), (0, 0))
        if cells.shape != (rows, cols) and not no_rows:
            raise InvalidDimensions(f"Cell grid shape {cells.shape} doesn't match board size {rows}x{cols}")
        return (cells.reshape(rows, cols) != 0).astype(np.int8)

    grid_rows: Sequence[Any] = list(cells)
    if len(grid_rows) != rows:
        raise InvalidDimensions(f"Expected {rows} rows, got {len(grid_rows)}")

    result = np.zeros((rows, cols), dtype=np.int8)
    for r, row in enumerate(grid_rows):
        values = list(row)
        if len(values) != cols:
            raise InvalidDimensions(f"Row {r} has {len(values)} cells, expected {cols}")
        for c, value in enumerate(values):
            result[r, c] = CellState.from_value(value)

    return result
