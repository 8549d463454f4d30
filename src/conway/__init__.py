"""Conway's Game of Life board model, game engine and service."""

__version__ = "0.1.0"

from .core.board import Board, InvalidDimensions
from .core.cell import CellState
from .core.game import Game, GameEngine
from .core.seed import Seed, SeedReader, parse_seed

__all__ = [
    "Board",
    "InvalidDimensions",
    "CellState",
    "Game",
    "GameEngine",
    "Seed",
    "SeedReader",
    "parse_seed",
]
