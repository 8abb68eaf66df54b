"""
API Module - Table client interface.

Exposes the lobby via REST API. The client:
1. Creates a table and shares the code
2. Joins a table with the code
3. Starts the deal (host only)
4. Polls its own view of the table

All state is in-memory. No user accounts; a player is identified by
the unguessable id returned from create or join.
"""

from .models import (
    # Requests
    CreateGameRequest,
    JoinGameRequest,
    StartGameRequest,
    # Results
    SeatAssignment,
    StartResult,
)
from .service import LobbyService
from .app import create_app, create_service

__all__ = [
    # Requests
    "CreateGameRequest",
    "JoinGameRequest",
    "StartGameRequest",
    # Results
    "SeatAssignment",
    "StartResult",
    # Service
    "LobbyService",
    "create_app",
    "create_service",
]
