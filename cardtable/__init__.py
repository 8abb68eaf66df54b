"""
Card Table - Four-player card-game lobby.

Players create or join a table via a short code, wait in the lobby until
four seats are filled, and the host deals a standard 52-card deck.
The engine provides:
- Session registry keyed by short public codes
- Seat assignment and the one-time deal
- Per-player views that never reveal another player's cards
- A REST API for the table client
"""

__version__ = "0.1.0"
