"""Tests for seed parsing and reading."""

import tempfile
from pathlib import Path

import pytest

from conway.core.board import Board
from conway.core.seed import Seed, SeedFormatError, SeedReader, parse_seed

CROSS_SEED = "Generation 0\n3 3\n.*.\n***\n.*.\n"


class TestParseSeed:
    """Test cases for parse_seed."""

    def test_parse(self):
        """Test parsing a well-formed seed."""
        seed = parse_seed(CROSS_SEED)

        assert seed.generation == 0
        assert seed.size == (3, 3)
        assert seed.cells == (".*.", "***", ".*.")

    def test_to_board(self):
        """Test building a board from a seed."""
        board = parse_seed(CROSS_SEED).to_board()
        assert board == Board(0, (3, 3), [".*.", "***", ".*."])
        assert board.generation == 0

    def test_round_trip(self):
        """Rendering a parsed seed gives back the same text."""
        texts = [
            CROSS_SEED,
            "Generation 12\n2 5\n*...*\n.***.\n",
            "Generation 0\n0 0\n",
        ]
        for text in texts:
            assert str(parse_seed(text).to_board()) == text
            assert parse_seed(text).render() == text

    def test_round_trip_after_tick_resets_generation_only(self):
        """A ticked board re-parses to the same cells."""
        board = parse_seed(CROSS_SEED).to_board().tick()
        reparsed = parse_seed(str(board))

        assert reparsed.generation == 1
        assert reparsed.to_board() == board

    def test_windows_line_endings(self):
        """Carriage returns are ignored."""
        seed = parse_seed(CROSS_SEED.replace("\n", "\r\n"))
        assert seed.cells == (".*.", "***", ".*.")

    def test_blank_lines_ignored(self):
        """Blank lines between sections are skipped."""
        seed = parse_seed("\nGeneration 3\n\n2 2\n**\n\n..\n\n")
        assert seed.generation == 3
        assert seed.cells == ("**", "..")

    def test_no_trailing_newline(self):
        """A final newline is optional."""
        seed = parse_seed("Generation 0\n1 2\n*.")
        assert seed.cells == ("*.",)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "Generation 0\n",
            "Gen 0\n1 1\n*\n",
            "Generation x\n1 1\n*\n",
            "Generation 0\n1\n*\n",
            "Generation 0\n1 a\n*\n",
            "Generation 0\n-1 1\n",
            "Generation 0\n2 2\n**\n",
            "Generation 0\n1 2\n**\n..\n",
            "Generation 0\n2 2\n**\n*\n",
            "Generation 0\n1 2\n***\n",
        ],
    )
    def test_malformed(self, text):
        """Malformed seeds raise SeedFormatError."""
        with pytest.raises(SeedFormatError):
            parse_seed(text)

    def test_seed_is_hashable(self):
        """Seeds are immutable values usable as dict keys."""
        first = parse_seed(CROSS_SEED)
        second = Seed(generation=0, size=[3, 3], cells=[".*.", "***", ".*."])

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_seed_format_error_is_value_error(self):
        assert issubclass(SeedFormatError, ValueError)


class TestSeedReader:
    """Test cases for reading seed files."""

    def test_read_seed_file(self):
        """Test reading a seed from disk."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "seed.txt"
            path.write_text(CROSS_SEED)

            seed = SeedReader(path).read_seed_file()

        assert seed == Seed(generation=0, size=(3, 3), cells=[".*.", "***", ".*."])

    def test_accepts_string_path(self):
        """File names may be plain strings."""
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "seed.txt"
            path.write_text(CROSS_SEED)

            seed = SeedReader(str(path)).read_seed_file()

        assert seed.size == (3, 3)

    def test_missing_file(self):
        """A missing file raises FileNotFoundError."""
        with tempfile.TemporaryDirectory() as temp_dir:
            reader = SeedReader(Path(temp_dir) / "missing.txt")
            with pytest.raises(FileNotFoundError):
                reader.read_seed_file()
