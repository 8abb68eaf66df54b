"""
Session Store - Registry of live game sessions.

LIFECYCLE:
1. Host creates a session -> short public code, host seated at 0
2. Up to three more players join while the session is in the lobby
3. Host starts -> the deck is dealt once and the session is "dealt"
4. The session stays readable until the process exits

PERSISTENCE RULES:
- In-memory only, no database
- No explicit deletion: sessions live as long as the process

LOCKING:
- Each Session owns a lock guarding its seats, hands and status
- The store lock only covers code allocation and insertion, so
  unrelated sessions never wait on each other
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import random
import threading
import time
import uuid

from ..engine_core import Card
from ..logging_utils import get_logger
from .errors import InvalidName, SessionNotFound, CodeSpaceExhausted

logger = get_logger(__name__)

MAX_PLAYERS = 4
SEATS = tuple(range(MAX_PLAYERS))

# Uppercase letters and digits without I, O, 0 and 1
CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 5
MAX_CODE_ATTEMPTS = 32


class SessionStatus(Enum):
    """State of a game session."""
    LOBBY = "lobby"  # Waiting for four players
    DEALT = "dealt"  # Cards handed out, terminal


@dataclass(frozen=True)
class Player:
    """A seated player. Belongs to exactly one session."""
    player_id: str
    name: str
    position: int


@dataclass
class Session:
    """
    A single four-seat table.

    Mutate only through session.lifecycle while holding `lock`.
    """
    code: str
    host_id: str
    created_at: float
    status: SessionStatus = SessionStatus.LOBBY
    players: list[Player] = field(default_factory=list)
    hands: dict[str, tuple[Card, ...]] = field(default_factory=dict)
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    def get_player(self, player_id: str) -> Player | None:
        """Find a seated player by id."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def free_seat(self) -> int | None:
        """Lowest seat not currently occupied."""
        taken = {p.position for p in self.players}
        for seat in SEATS:
            if seat not in taken:
                return seat
        return None


def normalize_name(name: str | None) -> str:
    """Strip a display name, raising InvalidName if nothing is left."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidName()
    return cleaned


def normalize_code(code: str | None) -> str:
    """Session codes are case-insensitive; stored uppercase."""
    return (code or "").strip().upper()


def new_player_id() -> str:
    return str(uuid.uuid4())


class SessionStore:
    """
    Owns every live Session, keyed by its public code.

    One store per process, held by the API service.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        code_length: int = CODE_LENGTH,
        max_code_attempts: int = MAX_CODE_ATTEMPTS,
    ):
        self.rng = rng or random.Random()
        self.code_length = code_length
        self.max_code_attempts = max_code_attempts
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, code: str) -> bool:
        return normalize_code(code) in self._sessions

    def create_session(self, host_name: str) -> tuple[Session, Player]:
        """
        Create a session with the host in seat 0.

        Args:
            host_name: Display name of the creator

        Returns:
            (session, host player)

        Raises:
            InvalidName: If host_name is empty after stripping
            CodeSpaceExhausted: If no free code was found
        """
        name = normalize_name(host_name)
        host = Player(player_id=new_player_id(), name=name, position=0)

        with self._lock:
            code = self._allocate_code()
            session = Session(
                code=code,
                host_id=host.player_id,
                created_at=time.time(),
                players=[host],
            )
            self._sessions[code] = session

        logger.info("Session %s created by %s (%s)", code, name, host.player_id)
        return session, host

    def lookup(self, code: str | None) -> Session | None:
        """Get a session by code, or None."""
        return self._sessions.get(normalize_code(code))

    def get(self, code: str | None) -> Session:
        """Get a session by code, raising SessionNotFound."""
        session = self.lookup(code)
        if session is None:
            raise SessionNotFound(normalize_code(code))
        return session

    def _allocate_code(self) -> str:
        """Pick an unused code. Caller holds the store lock."""
        for _ in range(self.max_code_attempts):
            code = "".join(
                self.rng.choice(CODE_ALPHABET) for _ in range(self.code_length)
            )
            if code not in self._sessions:
                return code
            logger.warning("Session code collision on %s, retrying", code)
        raise CodeSpaceExhausted(self.max_code_attempts)
