#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from conway import Board, GameEngine, SeedReader
from conway.core.telemetry import create_tracer_provider, get_tracer


def main():
    """Demonstrate programmatic usage of the conway package."""
    # Load a seed and build the initial board
    seed = SeedReader("seeds/blinker.txt").read_seed_file()
    board = seed.to_board()

    print("Initial state:")
    print(board)

    # Tick manually a few generations
    for _ in range(2):
        board = board.tick()
        print(board)

    # Run through the engine with tracing attached
    exporter = InMemorySpanExporter()
    provider = create_tracer_provider(exporter)
    engine = GameEngine(get_tracer(provider))

    glider = Board(0, (6, 6), [".*....", "..*...", "***...", "......", "......", "......"])
    final = engine.run_generations(glider, runs=4)

    print("Glider after 4 generations:")
    print(final)

    print("Spans:")
    for span in exporter.get_finished_spans():
        print(f"  {span.name}: {dict(span.attributes)}")

    provider.shutdown()


if __name__ == "__main__":
    main()
