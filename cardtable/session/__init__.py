"""
Session Module - Manages in-memory card tables.

A session is one four-seat table:
- Created when the host opens a lobby
- Filled by players joining with the short code
- Dealt once by the host
- Kept until the process exits

Sessions are EPHEMERAL:
- No persistence to database
- Each player only ever sees their own cards
"""

from .errors import (
    LobbyError,
    InvalidName,
    SessionNotFound,
    SessionFull,
    SessionAlreadyStarted,
    NotHost,
    PlayerCountInvalid,
    PlayerNotInSession,
    CodeSpaceExhausted,
)
from .manager import SessionStore, Session, SessionStatus, Player, MAX_PLAYERS
from .lifecycle import join, start, deal, HAND_SIZE
from .projection import project_for, GameView, PlayerView

__all__ = [
    "LobbyError",
    "InvalidName",
    "SessionNotFound",
    "SessionFull",
    "SessionAlreadyStarted",
    "NotHost",
    "PlayerCountInvalid",
    "PlayerNotInSession",
    "CodeSpaceExhausted",
    "SessionStore",
    "Session",
    "SessionStatus",
    "Player",
    "MAX_PLAYERS",
    "join",
    "start",
    "deal",
    "HAND_SIZE",
    "project_for",
    "GameView",
    "PlayerView",
]
