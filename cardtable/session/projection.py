"""
View Projector - What one player is allowed to see of a session.

A view carries the shared table (code, status, host, seats, names and
card counts) plus the requester's own hand, sorted for display.
Other players' cards are reduced to a count and never copied in.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core import Card, sort_hand
from .errors import PlayerNotInSession
from .manager import Session, SessionStatus


@dataclass(frozen=True)
class PlayerView:
    """Public information about one seat."""
    player_id: str
    name: str
    position: int
    is_host: bool
    is_you: bool
    hand_size: int = 0


@dataclass(frozen=True)
class GameView:
    """A session as seen by one player."""
    code: str
    status: SessionStatus
    host_id: str
    players: tuple[PlayerView, ...]
    hand: tuple[Card, ...] = ()

    @property
    def you(self) -> PlayerView:
        return next(p for p in self.players if p.is_you)


def project_for(session: Session, player_id: str) -> GameView:
    """
    Build the view of `session` for `player_id`.

    Raises:
        PlayerNotInSession: If player_id is not seated in the session
    """
    with session.lock:
        if session.get_player(player_id) is None:
            raise PlayerNotInSession(session.code)

        players = tuple(
            PlayerView(
                player_id=p.player_id,
                name=p.name,
                position=p.position,
                is_host=p.player_id == session.host_id,
                is_you=p.player_id == player_id,
                hand_size=len(session.hands.get(p.player_id, ())),
            )
            for p in session.players
        )
        own_hand = session.hands.get(player_id, ())

        return GameView(
            code=session.code,
            status=session.status,
            host_id=session.host_id,
            players=players,
            hand=tuple(sort_hand(own_hand)),
        )
