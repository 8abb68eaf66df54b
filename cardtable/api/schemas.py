"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact JSON contract with the table client.
Field names on the wire are camelCase (gameId, playerId, handSize...);
Python attributes stay snake_case through aliases.

Error Codes:
- INVALID_NAME: Display name empty or whitespace only
- SESSION_NOT_FOUND: No live game has this code
- SESSION_FULL: All four seats are taken
- SESSION_ALREADY_STARTED: Cards were already dealt
- NOT_HOST: Only the host can start the game
- PLAYER_COUNT_INVALID: Dealing needs exactly four players
- PLAYER_NOT_IN_SESSION: Requesting player is not seated at this table
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    LOBBY = "lobby"
    DEALT = "dealt"


class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_NAME = "INVALID_NAME"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SESSION_FULL = "SESSION_FULL"
    SESSION_ALREADY_STARTED = "SESSION_ALREADY_STARTED"
    NOT_HOST = "NOT_HOST"
    PLAYER_COUNT_INVALID = "PLAYER_COUNT_INVALID"
    PLAYER_NOT_IN_SESSION = "PLAYER_NOT_IN_SESSION"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class PlayerInfo(BaseModel):
    """One seat as shown to any player at the table."""
    player_id: str = Field(..., alias="id")
    name: str
    position: int = Field(..., ge=0, le=3, description="Seat 0-3")
    is_host: bool = Field(False, alias="isHost")
    is_you: bool = Field(False, alias="isYou")
    hand_size: int = Field(0, alias="handSize", ge=0)

    model_config = {"populate_by_name": True}


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(BaseModel):
    """Request to open a new table."""
    name: Optional[str] = Field(None, description="Host display name")


class JoinGameRequest(BaseModel):
    """Request to join a table by code."""
    game_id: Optional[str] = Field(None, alias="gameId", description="5-character code")
    name: Optional[str] = Field(None, description="Display name")

    model_config = {"populate_by_name": True}


class StartGameRequest(BaseModel):
    """Host request to deal."""
    game_id: Optional[str] = Field(None, alias="gameId")
    player_id: Optional[str] = Field(None, alias="playerId")

    model_config = {"populate_by_name": True}


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SeatResponse(BaseModel):
    """Response from create and join."""
    game_id: str = Field(..., alias="gameId")
    player_id: str = Field(..., alias="playerId")
    position: int = Field(..., ge=0, le=3)

    model_config = {"populate_by_name": True}


class StartResponse(BaseModel):
    """Response from start."""
    ok: bool = True


class GameStateResponse(BaseModel):
    """
    The table as seen by the requesting player.

    `hand` holds only the requester's cards, sorted by suit (S, H, D, C)
    then rank (A down to 2). Other seats expose only `handSize`.
    """
    game_id: str = Field(..., alias="gameId")
    status: SessionStatus
    host_id: str = Field(..., alias="hostId")
    players: list[PlayerInfo] = Field(default_factory=list)
    hand: list[str] = Field(default_factory=list, description="Cards like 'AS', '10H'")
    api_version: str = "v1"

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    sessions: int = 0
