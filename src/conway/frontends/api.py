"""HTTP service running Game of Life boards."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from conway.core.board import Board, InvalidDimensions
from conway.core.game import GameEngine
from conway.core.telemetry import (
    SERVICE_NAME,
    SERVICE_VERSION,
    LoggingSpanExporter,
    create_tracer_provider,
    get_tracer,
)

logger = logging.getLogger(__name__)


class SizeModel(BaseModel):
    rows: int = Field(..., ge=0)
    cols: int = Field(..., ge=0)


class GameRequest(BaseModel):
    generation: int = 0
    size: SizeModel
    # Each cell is '*' for alive; anything else is dead.
    cells: list[list[str]] = Field(default_factory=list)
    runs: int = Field(1, ge=0)


class GameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generation: int
    size: SizeModel
    cells: list[list[str]]
    board_string: str = Field(..., alias="boardString")

    @classmethod
    def from_board(cls, board: Board) -> GameResponse:
        return cls(
            generation=board.generation,
            size=SizeModel(rows=board.rows, cols=board.cols),
            cells=board.to_chars(),
            board_string=str(board),
        )


def get_engine(request: Request) -> GameEngine:
    return request.app.state.engine


router = APIRouter()


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/info")
async def info() -> dict[str, str]:
    return {"name": SERVICE_NAME, "version": SERVICE_VERSION}


@router.post("/api/game/run", response_model=GameResponse, name="RunGame")
def run_game(payload: GameRequest, engine: GameEngine = Depends(get_engine)) -> GameResponse:
    """Run Conway's Game of Life for a specified number of generations."""
    try:
        board = Board(payload.generation, (payload.size.rows, payload.size.cols), payload.cells)
    except InvalidDimensions as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e

    logger.debug("Running %d generations from generation %d", payload.runs, payload.generation)
    final_board = engine.run_generations(board, payload.runs)

    return GameResponse.from_board(final_board)


def create_app(log_spans: bool = True) -> FastAPI:
    """Build the FastAPI application.

    Each application owns a TracerProvider, created on startup and shut down
    with the app; the global OpenTelemetry provider is left alone.

    Args:
        log_spans: Export finished spans to the module logger
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        exporters = [LoggingSpanExporter(logger)] if log_spans else []
        provider = create_tracer_provider(*exporters)
        app.state.tracer_provider = provider
        app.state.engine = GameEngine(get_tracer(provider))
        try:
            yield
        finally:
            provider.shutdown()

    app = FastAPI(title="conway", version=SERVICE_VERSION, lifespan=lifespan)
    app.include_router(router)

    return app


app = create_app()
