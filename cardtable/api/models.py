"""
API Models - Framework-agnostic requests and results.

The service speaks these dataclasses; the HTTP layer converts them
to and from the pydantic wire schemas in schemas.py.
"""

from __future__ import annotations
from dataclasses import dataclass


# =============================================================================
# Request Models
# =============================================================================

@dataclass
class CreateGameRequest:
    """
    Request to open a new table.

    POST /api/game/create
    """
    name: str = ""


@dataclass
class JoinGameRequest:
    """
    Request to take a seat at an existing table.

    POST /api/game/join
    """
    game_id: str = ""
    name: str = ""


@dataclass
class StartGameRequest:
    """
    Host request to deal the cards.

    POST /api/game/start
    """
    game_id: str = ""
    player_id: str = ""


# =============================================================================
# Result Models
# =============================================================================

@dataclass
class SeatAssignment:
    """Returned by create and join: who you are and where you sit."""
    game_id: str
    player_id: str
    position: int


@dataclass
class StartResult:
    """Acknowledges the deal."""
    ok: bool = True
