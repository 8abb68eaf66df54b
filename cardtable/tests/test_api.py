"""
Tests for the API service layer.

Tests:
- Service methods for create, join, start and state
- The four-player scenario end to end
- Error propagation
"""

import pytest

from ..api.models import (
    CreateGameRequest,
    JoinGameRequest,
    StartGameRequest,
    SeatAssignment,
    StartResult,
)
from ..api.service import LobbyService
from ..session import (
    InvalidName,
    NotHost,
    PlayerCountInvalid,
    PlayerNotInSession,
    SessionAlreadyStarted,
    SessionFull,
    SessionNotFound,
    SessionStatus,
)


def seat_table(service, names=("Ann", "Bob", "Cid", "Dee")):
    """Create a table and join the rest; returns the seat assignments."""
    host = service.create_game(CreateGameRequest(name=names[0]))
    seats = [host]
    for name in names[1:]:
        seats.append(service.join_game(JoinGameRequest(game_id=host.game_id, name=name)))
    return seats


class TestLobbyService:
    """Tests for LobbyService."""

    def test_create_game(self, service):
        """Create returns the code, the host id and seat 0."""
        seat = service.create_game(CreateGameRequest(name="Ann"))

        assert isinstance(seat, SeatAssignment)
        assert len(seat.game_id) == 5
        assert seat.position == 0
        assert seat.player_id
        assert seat.game_id in service.store

    def test_create_requires_name(self, service):
        """Blank host name is InvalidName."""
        with pytest.raises(InvalidName):
            service.create_game(CreateGameRequest(name=" "))

    def test_join_with_lowercase_code(self, service):
        """Codes are accepted in any case and echoed uppercase."""
        host = service.create_game(CreateGameRequest(name="Ann"))
        seat = service.join_game(JoinGameRequest(game_id=host.game_id.lower(), name="Bob"))

        assert seat.game_id == host.game_id
        assert seat.position == 1

    def test_join_unknown_game(self, service):
        """Unknown code is SessionNotFound."""
        with pytest.raises(SessionNotFound):
            service.join_game(JoinGameRequest(game_id="ABCDE", name="Bob"))

    def test_join_missing_code(self, service):
        """Empty code is SessionNotFound."""
        with pytest.raises(SessionNotFound):
            service.join_game(JoinGameRequest(name="Bob"))

    def test_start_unknown_game(self, service):
        """Start on an unknown code is SessionNotFound."""
        with pytest.raises(SessionNotFound):
            service.start_game(StartGameRequest(game_id="ABCDE", player_id="x"))

    def test_state_unknown_game(self, service):
        """State on an unknown code is SessionNotFound."""
        with pytest.raises(SessionNotFound):
            service.get_state("ABCDE", "x")

    def test_state_for_stranger(self, service):
        """State for a player not at the table is PlayerNotInSession."""
        host = service.create_game(CreateGameRequest(name="Ann"))
        with pytest.raises(PlayerNotInSession):
            service.get_state(host.game_id, "intruder")

    def test_start_too_early(self, service):
        """Host can't deal with three players."""
        seats = seat_table(service, names=("Ann", "Bob", "Cid"))
        with pytest.raises(PlayerCountInvalid):
            service.start_game(
                StartGameRequest(game_id=seats[0].game_id, player_id=seats[0].player_id)
            )


class TestFourPlayerScenario:
    """Ann hosts, Bob, Cid and Dee join, Eve is turned away."""

    def test_full_flow(self, service):
        """Seats 0-3, host deals, everybody holds 13."""
        ann, bob, cid, dee = seat_table(service)
        code = ann.game_id

        assert [s.position for s in (ann, bob, cid, dee)] == [0, 1, 2, 3]

        with pytest.raises(SessionFull):
            service.join_game(JoinGameRequest(game_id=code, name="Eve"))

        with pytest.raises(NotHost):
            service.start_game(StartGameRequest(game_id=code, player_id=bob.player_id))

        result = service.start_game(StartGameRequest(game_id=code, player_id=ann.player_id))
        assert result == StartResult(ok=True)

        with pytest.raises(SessionAlreadyStarted):
            service.join_game(JoinGameRequest(game_id=code, name="Eve"))
        with pytest.raises(SessionAlreadyStarted):
            service.start_game(StartGameRequest(game_id=code, player_id=ann.player_id))

        seen = set()
        for seat in (ann, bob, cid, dee):
            view = service.get_state(code, seat.player_id)
            assert view.status == SessionStatus.DEALT
            assert view.host_id == ann.player_id
            assert [p.hand_size for p in view.players] == [13] * 4
            assert len(view.hand) == 13
            seen.update(view.hand)

        assert len(seen) == 52

    def test_tables_are_independent(self, service):
        """Dealing one table leaves another in the lobby."""
        first = seat_table(service)
        second = seat_table(service, names=("Wes", "Xan"))

        service.start_game(
            StartGameRequest(game_id=first[0].game_id, player_id=first[0].player_id)
        )

        view = service.get_state(second[0].game_id, second[1].player_id)
        assert view.status == SessionStatus.LOBBY
        assert len(view.players) == 2
        assert first[0].game_id != second[0].game_id
