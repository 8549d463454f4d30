"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
from typing import Any, Dict, Optional

import httpx

from ..core.board import Board, InvalidDimensions
from ..core.game import BoardWriter, Game, GameEngine
from ..core.seed import Seed, SeedFormatError, SeedReader
from ..core.telemetry import LoggingSpanExporter, create_tracer_provider, get_tracer

RUN_ENDPOINT = "/api/game/run"


class CLIGameOfLife:
    """Runs seed files locally or through the HTTP service."""

    def __init__(self, writer: Optional[BoardWriter] = None, engine: Optional[GameEngine] = None) -> None:
        self.writer = writer or BoardWriter()
        self.engine = engine or GameEngine()

    def run_local(self, seed_file: str, runs: int, verbose: bool = False) -> Board:
        """Play a seed file in-process, writing every generation.

        Args:
            seed_file: Path to the seed file
            runs: Number of generations to run
            verbose: Print progress information

        Returns:
            The final board
        """
        if verbose:
            print(f"Running {runs} generation(s) from '{seed_file}'")

        game = Game(SeedReader(seed_file), self.writer, self.engine)
        return game.play(runs)

    def run_remote(
        self,
        seed_file: str,
        runs: int,
        api_url: str,
        timeout: float = 10.0,
        verbose: bool = False,
    ) -> Board:
        """Send a seed file to the HTTP service and write the final board.

        Args:
            seed_file: Path to the seed file
            runs: Number of generations to run
            api_url: Base URL of the service
            timeout: Request timeout in seconds
            verbose: Print progress information

        Returns:
            The final board returned by the service

        Raises:
            httpx.HTTPError: On connection failures or error responses
        """
        seed = SeedReader(seed_file).read_seed_file()
        initial_board = seed.to_board()

        if verbose:
            print(f"Loaded board: {seed.size[0]}x{seed.size[1]}, generation {seed.generation}")
        self.writer.write_board(initial_board)

        if verbose:
            print(f"Sending request to {api_url.rstrip('/')}{RUN_ENDPOINT}")

        with httpx.Client(base_url=api_url, timeout=timeout) as client:
            response = client.post(RUN_ENDPOINT, json=build_request(seed, runs))
            response.raise_for_status()

        final_board = board_from_response(response.json())
        self.writer.write_board(final_board)
        return final_board


def build_request(seed: Seed, runs: int) -> Dict[str, Any]:
    """Build the JSON body for the run endpoint."""
    return {
        "generation": seed.generation,
        "size": {"rows": seed.size[0], "cols": seed.size[1]},
        "cells": [list(row) for row in seed.cells],
        "runs": runs,
    }


def board_from_response(data: Dict[str, Any]) -> Board:
    """Rebuild a board from the run endpoint's JSON response."""
    size = data["size"]
    return Board(data["generation"], (size["rows"], size["cols"]), data["cells"])


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life from a seed file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Seed file format:
  Generation 0
  3 3
  .*.
  ***
  .*.

Examples:
  # Run one generation locally
  conway-cli seed.txt

  # Run three generations locally, printing each board
  conway-cli seed.txt --runs 3

  # Run through the HTTP service
  conway-cli seed.txt --runs 3 --api-url http://localhost:8000
        """,
    )

    parser.add_argument("seed_file", help="Path to the seed file")

    parser.add_argument(
        "-r",
        "--runs",
        type=int,
        default=1,
        help="Number of generations to run (default: 1)",
    )

    parser.add_argument(
        "--api-url",
        type=str,
        help="Run through the HTTP service at this base URL instead of locally",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="HTTP request timeout in seconds (default: 10)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log tracing spans for every generation",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.runs < 0:
        errors.append("Runs must be non-negative")

    if args.timeout <= 0:
        errors.append("Timeout must be positive")

    if args.api_url is not None and not args.api_url.startswith(("http://", "https://")):
        errors.append("API URL must start with http:// or https://")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    provider = None
    engine = None
    if args.trace:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        provider = create_tracer_provider(LoggingSpanExporter())
        engine = GameEngine(get_tracer(provider))

    cli = CLIGameOfLife(engine=engine)

    try:
        if args.api_url:
            final_board = cli.run_remote(args.seed_file, args.runs, args.api_url, args.timeout, args.verbose)
        else:
            final_board = cli.run_local(args.seed_file, args.runs, args.verbose)

        if args.verbose:
            print(f"Finished at generation {final_board.generation} with {final_board.population} live cells")
        return 0

    except FileNotFoundError:
        print(f"Error: File '{args.seed_file}' not found!")
        return 1
    except (SeedFormatError, InvalidDimensions) as e:
        print(f"Error: Invalid seed file '{args.seed_file}': {e}")
        return 1
    except httpx.HTTPStatusError as e:
        print(f"API Error: {e.response.status_code}")
        print(e.response.text)
        return 1
    except httpx.HTTPError as e:
        print(f"Connection Error: {e}")
        print("Make sure the API is running!")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    finally:
        if provider is not None:
            provider.shutdown()


if __name__ == "__main__":
    sys.exit(main())
