"""Seed file parsing.

Seed files use the same layout as a rendered board::

    Generation 0
    3 3
    .*.
    ***
    .*.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from .board import Board

GENERATION_PREFIX = "Generation "


class SeedFormatError(ValueError):
    """Raised when seed text is malformed."""


@dataclass(frozen=True)
class Seed:
    """Initial board state read from a seed file."""

    generation: int
    size: Tuple[int, int]
    cells: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", tuple(self.size))
        object.__setattr__(self, "cells", tuple(self.cells))

    def to_board(self) -> Board:
        """Construct the board described by this seed."""
        return Board(self.generation, self.size, self.cells)

    def render(self) -> str:
        """Render back to seed text."""
        return str(self.to_board())


def parse_seed(text: str) -> Seed:
    """Parse seed text.

    Args:
        text: Seed file contents

    Returns:
        Parsed Seed

    Raises:
        SeedFormatError: If the header, size line or grid is malformed
    """
    lines = [line.rstrip("\r") for line in text.split("\n")]
    lines = [line for line in lines if line.strip()]

    if len(lines) < 2:
        raise SeedFormatError("Seed must contain a generation line and a size line")

    header = lines[0].strip()
    if not header.startswith(GENERATION_PREFIX):
        raise SeedFormatError(f"Expected 'Generation <number>', got '{header}'")
    try:
        generation = int(header[len(GENERATION_PREFIX):])
    except ValueError as e:
        raise SeedFormatError(f"Invalid generation number in '{header}'") from e

    size_parts = lines[1].split()
    if len(size_parts) != 2:
        raise SeedFormatError(f"Expected '<rows> <cols>', got '{lines[1]}'")
    try:
        rows, cols = int(size_parts[0]), int(size_parts[1])
    except ValueError as e:
        raise SeedFormatError(f"Invalid board size '{lines[1]}'") from e
    if rows < 0 or cols < 0:
        raise SeedFormatError(f"Board size must be non-negative, got {rows}x{cols}")

    grid = lines[2:]
    if len(grid) != rows:
        raise SeedFormatError(f"Expected {rows} grid rows, found {len(grid)}")
    for index, row in enumerate(grid):
        if len(row) != cols:
            raise SeedFormatError(f"Grid row {index} has {len(row)} cells, expected {cols}")

    return Seed(generation=generation, size=(rows, cols), cells=tuple(grid))


class SeedReader:
    """Reads a seed file from disk."""

    def __init__(self, file_name: Union[str, Path]) -> None:
        self.file_name = Path(file_name)

    def read_seed_file(self) -> Seed:
        """Read and parse the seed file.

        Raises:
            FileNotFoundError: If the file does not exist
            SeedFormatError: If the contents are malformed
        """
        return parse_seed(self.file_name.read_text())
