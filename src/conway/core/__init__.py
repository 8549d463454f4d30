"""Core Game of Life logic."""

from .cell import CellState
from .board import Board, InvalidDimensions, TickStats
from .neighbours import count_live_neighbours, count_all_neighbours
from .seed import Seed, SeedReader, SeedFormatError, parse_seed
from .game import Game, GameEngine, BoardWriter

__all__ = [
    "CellState",
    "Board",
    "InvalidDimensions",
    "TickStats",
    "count_live_neighbours",
    "count_all_neighbours",
    "Seed",
    "SeedReader",
    "SeedFormatError",
    "parse_seed",
    "Game",
    "GameEngine",
    "BoardWriter",
]
