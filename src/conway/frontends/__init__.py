"""Frontend interfaces for the Game of Life.

The HTTP service lives in ``conway.frontends.api`` and is imported on demand.
"""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
