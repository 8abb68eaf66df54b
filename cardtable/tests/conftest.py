"""
Pytest fixtures for Card Table tests.
"""

import random

import pytest

from ..api.service import LobbyService
from ..session import Player, Session, SessionStore, join, start

PLAYER_NAMES = ["Ann", "Bob", "Cid", "Dee"]


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so codes and deals are reproducible."""
    return random.Random(1234)


@pytest.fixture
def store(rng: random.Random) -> SessionStore:
    """An empty session store."""
    return SessionStore(rng=rng)


@pytest.fixture
def lobby(store: SessionStore) -> tuple[Session, Player]:
    """A fresh session with only the host seated."""
    return store.create_session("Ann")


@pytest.fixture
def full_lobby(lobby: tuple[Session, Player]) -> tuple[Session, list[Player]]:
    """A session with all four seats taken, not yet dealt."""
    session, host = lobby
    players = [host]
    for name in PLAYER_NAMES[1:]:
        players.append(join(session, name))
    return session, players


@pytest.fixture
def dealt_session(
    full_lobby: tuple[Session, list[Player]],
    rng: random.Random,
) -> tuple[Session, list[Player]]:
    """A four-player session after the deal."""
    session, players = full_lobby
    start(session, session.host_id, rng=rng)
    return session, players


@pytest.fixture
def service(store: SessionStore) -> LobbyService:
    """A service over a seeded store."""
    return LobbyService(store=store)
