"""
API Service - Business logic layer between the HTTP app and the sessions.

The service:
1. Normalizes incoming codes and names
2. Looks sessions up in the store
3. Runs lifecycle operations
4. Returns projected views

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Failures are raised as LobbyError subclasses.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .models import (
    CreateGameRequest,
    JoinGameRequest,
    StartGameRequest,
    SeatAssignment,
    StartResult,
)
from ..logging_utils import get_logger
from ..session import SessionStore, GameView, join, start, project_for

logger = get_logger(__name__)


@dataclass
class LobbyService:
    """
    Main service behind the table API.

    Usage:
        service = LobbyService()

        seat = service.create_game(CreateGameRequest(name="Ann"))
        service.join_game(JoinGameRequest(game_id=seat.game_id, name="Bob"))
        ...
        service.start_game(StartGameRequest(seat.game_id, seat.player_id))
        view = service.get_state(seat.game_id, seat.player_id)
    """
    store: SessionStore = field(default_factory=SessionStore)

    def create_game(self, request: CreateGameRequest) -> SeatAssignment:
        """Open a table with the requester as host in seat 0."""
        session, host = self.store.create_session(request.name)
        return SeatAssignment(
            game_id=session.code,
            player_id=host.player_id,
            position=host.position,
        )

    def join_game(self, request: JoinGameRequest) -> SeatAssignment:
        """Seat a player at an existing table."""
        session = self.store.get(request.game_id)
        player = join(session, request.name)
        return SeatAssignment(
            game_id=session.code,
            player_id=player.player_id,
            position=player.position,
        )

    def start_game(self, request: StartGameRequest) -> StartResult:
        """Deal the cards. Only the host may do this, and only once."""
        session = self.store.get(request.game_id)
        start(session, request.player_id, rng=self.store.rng)
        return StartResult(ok=True)

    def get_state(self, game_id: str, player_id: str) -> GameView:
        """Project the table for one player."""
        session = self.store.get(game_id)
        view = project_for(session, player_id)
        logger.debug("State poll on %s by %s", session.code, player_id)
        return view
