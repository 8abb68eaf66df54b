"""
FastAPI Application - REST API for the table client.

Endpoints:
    POST   /api/game/create     Open a table, become host in seat 0
    POST   /api/game/join       Take the next free seat at a table
    POST   /api/game/start      Host deals the cards
    GET    /api/game/state      Poll the table as seen by one player
    GET    /health              Health check

All responses are JSON with explicit Pydantic schemas.
Errors use ErrorResponse with a machine-readable error_code.
"""

from typing import Annotated, Optional
import os
import random

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..logging_utils import get_logger
from ..session import LobbyError, SessionStore
from .models import (
    CreateGameRequest as CreateCommand,
    JoinGameRequest as JoinCommand,
    StartGameRequest as StartCommand,
)
from .schemas import (
    # Request models
    CreateGameRequest,
    JoinGameRequest,
    StartGameRequest,
    # Response models
    SeatResponse,
    StartResponse,
    GameStateResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
    SessionStatus,
    # Nested models
    PlayerInfo,
)
from .service import LobbyService

# Environment configuration
CARDTABLE_ENV = os.getenv("CARDTABLE_ENV", "development")
CARDTABLE_STATIC_DIR = os.getenv("CARDTABLE_STATIC_DIR", None)
CARDTABLE_SEED = os.getenv("CARDTABLE_SEED", None)
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = get_logger(__name__)


def create_service(seed: Optional[int] = None) -> LobbyService:
    """Build a service, seeding its RNG from CARDTABLE_SEED if set."""
    if seed is None and CARDTABLE_SEED:
        seed = int(CARDTABLE_SEED)
    rng = random.Random(seed) if seed is not None else None
    return LobbyService(store=SessionStore(rng=rng))


def create_app(service: Optional[LobbyService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional LobbyService instance (creates new if not provided)

    Returns:
        FastAPI application instance

    Logging is configured by the entry point (`cardtable serve`), not here,
    so importing the app leaves the root logger alone.
    """
    app = FastAPI(
        title="Card Table API",
        description="""
Four-player card table lobby.

## Flow

1. `POST /api/game/create` returns a 5-character `gameId` to share
2. Three friends `POST /api/game/join` with that code
3. The host calls `POST /api/game/start` to deal 13 cards each
4. Everyone polls `GET /api/game/state` and sees only their own hand

## Error Codes

| Code | Description |
|------|-------------|
| `INVALID_NAME` | Name is empty |
| `SESSION_NOT_FOUND` | Game code does not exist |
| `SESSION_FULL` | All four seats taken |
| `SESSION_ALREADY_STARTED` | Cards already dealt |
| `NOT_HOST` | Only the host can start |
| `PLAYER_COUNT_INVALID` | Need exactly 4 players |
| `PLAYER_NOT_IN_SESSION` | You are not part of this game |
        """,
        version=__version__,
        docs_url=None if CARDTABLE_ENV == "production" else "/api/docs",
        redoc_url=None if CARDTABLE_ENV == "production" else "/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    lobby_service = service or create_service()
    app.state.lobby_service = lobby_service

    # =========================================================================
    # Error handlers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(LobbyError)
    async def lobby_error_handler(request: Request, exc: LobbyError) -> JSONResponse:
        logger.info("%s %s -> %s", request.method, request.url.path, exc.error_code)
        return make_error_response(
            ErrorCode(exc.error_code),
            exc.message,
            status_code=exc.http_status,
            details=exc.details,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": [err.get("msg") for err in exc.errors()]},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return make_error_response(
            ErrorCode.INTERNAL_ERROR,
            "Unexpected server error",
            status_code=500,
        )

    error_responses = {
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    }

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/game/create",
        response_model=SeatResponse,
        responses={400: {"model": ErrorResponse, "description": "Name is required"}},
        tags=["Game"],
        summary="Open a new table",
    )
    async def create_game(body: CreateGameRequest) -> SeatResponse:
        """Create a table. The creator is host and sits in seat 0."""
        seat = lobby_service.create_game(CreateCommand(name=body.name or ""))
        return SeatResponse(
            game_id=seat.game_id,
            player_id=seat.player_id,
            position=seat.position,
        )

    @app.post(
        "/api/game/join",
        response_model=SeatResponse,
        responses=error_responses,
        tags=["Game"],
        summary="Join a table by code",
    )
    async def join_game(body: JoinGameRequest) -> SeatResponse:
        """Take the lowest free seat. Codes are case-insensitive."""
        seat = lobby_service.join_game(
            JoinCommand(game_id=body.game_id or "", name=body.name or "")
        )
        return SeatResponse(
            game_id=seat.game_id,
            player_id=seat.player_id,
            position=seat.position,
        )

    @app.post(
        "/api/game/start",
        response_model=StartResponse,
        responses=error_responses,
        tags=["Game"],
        summary="Deal the cards",
    )
    async def start_game(body: StartGameRequest) -> StartResponse:
        """Host-only. Needs exactly four players; deals once."""
        result = lobby_service.start_game(
            StartCommand(game_id=body.game_id or "", player_id=body.player_id or "")
        )
        return StartResponse(ok=result.ok)

    @app.get(
        "/api/game/state",
        response_model=GameStateResponse,
        responses=error_responses,
        tags=["Game"],
        summary="Get the table as seen by one player",
    )
    async def get_state(
        game_id: Annotated[str, Query(alias="gameId")] = "",
        player_id: Annotated[str, Query(alias="playerId")] = "",
    ) -> GameStateResponse:
        """Returns your own sorted hand and everyone's card counts."""
        view = lobby_service.get_state(game_id, player_id)
        return _convert_view(view)

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="cardtable",
            version=__version__,
            sessions=len(lobby_service.store),
        )

    # =========================================================================
    # Conversion Helpers
    # =========================================================================

    def _convert_view(view) -> GameStateResponse:
        """Convert a projected GameView to the wire model."""
        return GameStateResponse(
            game_id=view.code,
            status=SessionStatus(view.status.value),
            host_id=view.host_id,
            players=[
                PlayerInfo(
                    player_id=p.player_id,
                    name=p.name,
                    position=p.position,
                    is_host=p.is_host,
                    is_you=p.is_you,
                    hand_size=p.hand_size,
                )
                for p in view.players
            ],
            hand=[card.code for card in view.hand],
        )

    # Static client, if configured. Mounted last so API routes win.
    if CARDTABLE_STATIC_DIR:
        app.mount(
            "/",
            StaticFiles(directory=CARDTABLE_STATIC_DIR, html=True),
            name="static",
        )
        logger.info("Serving static files from %s", CARDTABLE_STATIC_DIR)

    return app


# For running directly: uvicorn cardtable.api.app:app
app = create_app()
