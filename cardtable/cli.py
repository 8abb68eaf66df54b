"""
Card Table CLI - Command-line interface for the lobby.

Usage:
    cardtable serve [--host H] [--port P]    Run the HTTP API
    cardtable demo [--seed N] [--names ...]  Play a table in-process and print the views
"""

import argparse
import os
import sys

DEFAULT_NAMES = ["Ann", "Bob", "Cid", "Dee"]


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Card Table - four-player card lobby",
        prog="cardtable",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument(
        "--port", type=int, default=int(os.getenv("PORT", "3000")), help="Bind port"
    )
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Deal a table in-process")
    demo_parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible deal")
    demo_parser.add_argument(
        "--names", nargs=4, default=DEFAULT_NAMES, metavar="NAME",
        help="Four player names, host first",
    )

    args = parser.parse_args(argv)

    from .logging_utils import setup_logging, LOG_LEVEL
    setup_logging(args.log_level or LOG_LEVEL)

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "demo":
        cmd_demo(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API under uvicorn."""
    import uvicorn

    print(f"Server listening on http://{args.host}:{args.port}")
    uvicorn.run(
        "cardtable.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


def cmd_demo(args):
    """Create a table, seat four players, deal, and print every view."""
    from .api import (
        CreateGameRequest,
        JoinGameRequest,
        StartGameRequest,
        create_service,
    )
    from .session import LobbyError

    service = create_service(seed=args.seed)
    host_name, *guests = args.names

    try:
        host = service.create_game(CreateGameRequest(name=host_name))
        seats = [host]
        for name in guests:
            seats.append(service.join_game(JoinGameRequest(game_id=host.game_id, name=name)))
        service.start_game(StartGameRequest(game_id=host.game_id, player_id=host.player_id))
    except LobbyError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    print(f"Table {host.game_id} dealt")
    for seat in seats:
        view = service.get_state(seat.game_id, seat.player_id)
        you = view.you
        role = " (host)" if you.is_host else ""
        print(f"\nSeat {you.position + 1}: {you.name}{role}")
        print("  " + " ".join(card.code for card in view.hand))


if __name__ == "__main__":
    main()
