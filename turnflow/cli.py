"""
Turnflow CLI - Command-line interface for the engine.

Usage:
    turnflow play [--players N] [--target T] [--save FILE]
    turnflow replay <state_file> [--upto K]

`play` runs a scripted race game to completion; `replay` loads a saved
state and prints the state reconstructed after K logged actions.
"""

import argparse
import json
import logging
import sys

from .config import EngineSettings


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Turnflow - turn-based game state engine",
        prog="turnflow",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a scripted race game")
    play_parser.add_argument("--players", type=int, default=None, help="Number of players")
    play_parser.add_argument("--target", type=int, default=10, help="Score needed to win")
    play_parser.add_argument("--max-turns", type=int, default=100, help="Stop after this many turns")
    play_parser.add_argument("--save", help="Write the final state as JSON")

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Replay a saved state")
    replay_parser.add_argument("state_file", help="Path to a saved state JSON file")
    replay_parser.add_argument("--upto", type=int, default=None, help="Number of log entries to apply")

    args = parser.parse_args(argv)

    settings = EngineSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args, settings)
    elif args.command == "replay":
        cmd_replay(args, settings)
    else:
        parser.print_help()
        sys.exit(1)


def _print_ctx(state):
    ctx = state.ctx
    print(
        f"_id={state._id} turn={ctx.turn} current={ctx.current_player} "
        f"winner={ctx.winner} G={state.G}"
    )


def cmd_play(args, settings):
    """Play a race where every player advances by their index + 1."""
    from .engine_core import create_game_reducer, end_turn
    from .games.race import create_race_game
    from .session import GameStore

    reducer = create_game_reducer(create_race_game(args.target), args.players, settings=settings)
    store = GameStore(reducer)
    store.subscribe(_print_ctx)

    print(f"Starting race to {args.target} with {store.state.ctx.num_players} players")
    while not store.state.is_over and store.state.ctx.turn < args.max_turns:
        store.moves["advance"](store.state.ctx.current_player_idx + 1)
        store.dispatch(end_turn())

    if store.state.is_over:
        print(f"\nPlayer {store.state.ctx.winner} wins after {store.state.ctx.turn} turns")
    else:
        print(f"\nNo winner after {store.state.ctx.turn} turns")

    if args.save:
        from .api import state_to_wire

        with open(args.save, "w", encoding="utf-8") as f:
            json.dump(state_to_wire(store.state), f, indent=2)
        print(f"Saved state to {args.save}")


def cmd_replay(args, settings):
    """Reconstruct a historical state from a saved one."""
    from pydantic import ValidationError

    from .api import state_from_wire
    from .engine_core import prepare_game, replay
    from .games.race import create_race_game

    try:
        with open(args.state_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Error: File not found: {args.state_file}")
        sys.exit(1)

    try:
        state = state_from_wire(data)
    except ValidationError as e:
        print(f"Error: Invalid state file: {e}")
        sys.exit(1)

    G = state.G
    is_race = (
        isinstance(G, dict)
        and isinstance(G.get("scores"), list)
        and isinstance(G.get("target"), int)
    )
    if not is_race:
        print(f"Error: Not a race game state: {args.state_file}")
        sys.exit(1)

    try:
        game = prepare_game(create_race_game(G["target"]), settings=settings)
        historical = replay(game, state, args.upto)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Log has {len(state.log)} entries")
    _print_ctx(historical)


if __name__ == "__main__":
    main()
