"""Running boards forward through generations."""

import logging
from typing import List, Optional, Protocol

from opentelemetry import trace

from .board import Board
from .seed import Seed
from .telemetry import get_tracer

logger = logging.getLogger(__name__)


class Reader(Protocol):
    """Source of the initial board state."""

    def read_seed_file(self) -> Seed: ...


class Writer(Protocol):
    """Destination for boards as they are produced."""

    def write_board(self, board: Board) -> None: ...


class BoardWriter:
    """Writes boards to the console."""

    def write_board(self, board: Board) -> None:
        print()
        print(board, end="")
        print()


class RecordingWriter:
    """Keeps every board written, in order."""

    def __init__(self) -> None:
        self.boards_written: List[Board] = []

    def write_board(self, board: Board) -> None:
        self.boards_written.append(board)


class GameEngine:
    """Advances boards a number of generations, tracing every tick."""

    def __init__(self, tracer: Optional[trace.Tracer] = None) -> None:
        self.tracer = tracer or get_tracer()

    def run_generations(self, initial_board: Board, runs: int = 1) -> Board:
        """Tick a board forward.

        Args:
            initial_board: Board to start from
            runs: Number of generations to advance

        Returns:
            The board after `runs` ticks

        Raises:
            ValueError: If runs is negative
        """
        if runs < 0:
            raise ValueError(f"Runs must be non-negative, got {runs}")

        size_label = f"{initial_board.rows}x{initial_board.cols}"
        with self.tracer.start_as_current_span("GameEngine.RunGenerations") as span:
            span.set_attribute("game.runs", runs)
            span.set_attribute("game.initial_generation", initial_board.generation)
            span.set_attribute("game.board_size", size_label)

            board = initial_board
            for _ in range(runs):
                board = self.tick(board)

            span.set_attribute("game.final_generation", board.generation)

        logger.debug(
            "Ran %d generations on %s board: %d -> %d",
            runs,
            size_label,
            initial_board.generation,
            board.generation,
        )
        return board

    def tick(self, board: Board) -> Board:
        """Advance one generation inside a Board.Tick span."""
        with self.tracer.start_as_current_span("Board.Tick") as span:
            next_board, stats = board.advance()
            span.set_attribute("board.current_generation", stats.current_generation)
            span.set_attribute("board.next_generation", stats.next_generation)
            span.set_attribute("board.size", stats.size_label)
            span.set_attribute("board.live_cells_processed", stats.live_cells_processed)
            span.set_attribute("board.dead_cells_processed", stats.dead_cells_processed)
        return next_board


class Game:
    """Plays a game from a seed, writing each generation as it goes."""

    def __init__(self, reader: Reader, writer: Writer, engine: Optional[GameEngine] = None) -> None:
        self.reader = reader
        self.writer = writer
        self.engine = engine or GameEngine()

    def play(self, runs: int = 1) -> Board:
        """Read the seed and run it forward.

        The initial board is written first, then the board after every tick.

        Args:
            runs: Number of generations to play

        Returns:
            The final board
        """
        if runs < 0:
            raise ValueError(f"Runs must be non-negative, got {runs}")

        board = self.reader.read_seed_file().to_board()
        self.writer.write_board(board)

        for _ in range(runs):
            board = self.engine.tick(board)
            self.writer.write_board(board)

        return board
