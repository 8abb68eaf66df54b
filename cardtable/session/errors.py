"""
Lobby errors - Caller-correctable failures of session operations.

Every error carries a machine-readable error_code and the HTTP status
the API layer answers with. None of them is fatal to the process, and
none leaves a session partially mutated.
"""


class LobbyError(Exception):
    """Base class for session operation failures."""
    error_code = "LOBBY_ERROR"
    http_status = 400

    def __init__(self, message: str, **details):
        self.message = message
        self.details = details or None
        super().__init__(message)


class InvalidName(LobbyError):
    """Display name is empty or whitespace only."""
    error_code = "INVALID_NAME"

    def __init__(self):
        super().__init__("Name is required")


class SessionNotFound(LobbyError):
    """No live session has this code."""
    error_code = "SESSION_NOT_FOUND"
    http_status = 404

    def __init__(self, code: str):
        super().__init__("Game not found", game_id=code)


class SessionFull(LobbyError):
    """All four seats are taken."""
    error_code = "SESSION_FULL"

    def __init__(self, code: str):
        super().__init__("Game is full", game_id=code)


class SessionAlreadyStarted(LobbyError):
    """The session has already been dealt."""
    error_code = "SESSION_ALREADY_STARTED"

    def __init__(self, code: str):
        super().__init__("Game already started", game_id=code)


class NotHost(LobbyError):
    """Only the creator may start the deal."""
    error_code = "NOT_HOST"
    http_status = 403

    def __init__(self, code: str):
        super().__init__("Only the host can start the game", game_id=code)


class PlayerCountInvalid(LobbyError):
    """Dealing needs exactly four seated players."""
    error_code = "PLAYER_COUNT_INVALID"

    def __init__(self, code: str, player_count: int):
        super().__init__(
            "Need exactly 4 players to start",
            game_id=code,
            player_count=player_count,
        )


class PlayerNotInSession(LobbyError):
    """The requesting player id is not seated in this session."""
    error_code = "PLAYER_NOT_IN_SESSION"
    http_status = 403

    def __init__(self, code: str):
        super().__init__("You are not part of this game", game_id=code)


class CodeSpaceExhausted(RuntimeError):
    """Could not find a free session code within the retry budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"No free session code after {attempts} attempts")
