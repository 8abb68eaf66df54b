"""
Session Lifecycle - Seat assignment and the one-time deal.

Status moves lobby -> dealt exactly once. Every operation here takes
the session lock for its whole check-then-mutate sequence, so two
racing joins can't share a seat and the deal sees a stable table.
"""

from __future__ import annotations
import random

from ..engine_core import build_deck, shuffle, deal_hands, DECK_SIZE
from ..logging_utils import get_logger
from .errors import (
    NotHost,
    PlayerCountInvalid,
    SessionAlreadyStarted,
    SessionFull,
)
from .manager import (
    MAX_PLAYERS,
    Player,
    Session,
    SessionStatus,
    new_player_id,
    normalize_name,
)

logger = get_logger(__name__)

HAND_SIZE = DECK_SIZE // MAX_PLAYERS


def join(session: Session, name: str) -> Player:
    """
    Seat a new player in the lowest free position.

    Raises:
        SessionAlreadyStarted: If the session has been dealt
        InvalidName: If name is empty after stripping
        SessionFull: If all four seats are taken
    """
    with session.lock:
        if session.status != SessionStatus.LOBBY:
            raise SessionAlreadyStarted(session.code)
        cleaned = normalize_name(name)
        seat = session.free_seat()
        if session.is_full or seat is None:
            raise SessionFull(session.code)

        player = Player(player_id=new_player_id(), name=cleaned, position=seat)
        session.players.append(player)
        count = len(session.players)

    logger.info(
        "Player %s (%s) joined %s at seat %d; %d/%d seated",
        cleaned, player.player_id, session.code, seat, count, MAX_PLAYERS,
    )
    return player


def start(
    session: Session,
    requester_id: str,
    rng: random.Random | None = None,
) -> None:
    """
    Deal the cards on the host's request.

    Raises:
        NotHost: If requester_id is not the creator
        SessionAlreadyStarted: If the cards were already dealt
        PlayerCountInvalid: If fewer than four players are seated
    """
    with session.lock:
        if requester_id != session.host_id:
            raise NotHost(session.code)
        if session.status != SessionStatus.LOBBY:
            raise SessionAlreadyStarted(session.code)
        if len(session.players) != MAX_PLAYERS:
            raise PlayerCountInvalid(session.code, len(session.players))
        deal(session, rng)

    logger.info("Session %s dealt", session.code)


def deal(session: Session, rng: random.Random | None = None) -> None:
    """
    Shuffle a fresh deck and give each seat a contiguous slice.

    Seat k gets cards [13k, 13k + 13). The hands are computed in full
    before anything on the session changes.
    Caller holds session.lock.
    """
    deck = shuffle(build_deck(), rng)
    seated = sorted(session.players, key=lambda p: p.position)
    hands = deal_hands(deck, len(seated), HAND_SIZE)

    dealt = {player.player_id: hand for player, hand in zip(seated, hands)}

    session.hands = dealt
    session.status = SessionStatus.DEALT
