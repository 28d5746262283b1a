"""
Command-line front end for the minefield game.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py demo [--games N] [--seed S]
"""
import argparse
import logging
import sys
from typing import Optional, TextIO, Tuple

import numpy as np

from .board import BoardConfig, Position
from .controller import GameController
from .environment import MinefieldEnv
from .events import Action

PLAY_HELP = "Commands: r X Y (reveal), f X Y (flag), n (new game), q (quit)"

COMMANDS = {
    "r": Action.REVEAL,
    "reveal": Action.REVEAL,
    "f": Action.TOGGLE_FLAG,
    "flag": Action.TOGGLE_FLAG,
}


def parse_command(line: str) -> Optional[Tuple[Action, Optional[Position]]]:
    """
    Parse one line of play input.

    Returns:
        (action, position) for reveal/flag commands, where position is None
        when the coordinates are missing or not integers. None when the
        verb is not a cell command.
    """
    parts = line.split()
    if not parts or parts[0].lower() not in COMMANDS:
        return None
    action = COMMANDS[parts[0].lower()]
    if len(parts) != 3:
        return action, None
    try:
        return action, (int(parts[1]), int(parts[2]))
    except ValueError:
        return action, None


def play(
    config: BoardConfig,
    seed: Optional[int] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> GameController:
    """Run an interactive game reading commands from stdin."""
    controller = GameController(config, seed=seed)

    def show() -> None:
        print(controller.board.render(), file=stdout)
        print(
            f"[{controller.status.name}] mines left: {controller.mines_remaining}",
            file=stdout,
        )

    print(PLAY_HELP, file=stdout)
    show()
    for line in stdin:
        verb = line.strip().lower()
        if verb in ("q", "quit"):
            break
        if verb in ("n", "new"):
            controller.new_game()
            show()
            continue

        command = parse_command(line)
        if command is None:
            print(PLAY_HELP, file=stdout)
            continue

        action, position = command
        if controller.dispatch(action, position):
            show()
            if controller.is_won:
                print(f"You win! ({controller.elapsed:.1f}s)", file=stdout)
            elif controller.is_lost:
                print("Boom. Game over.", file=stdout)
    return controller


def demo(config: BoardConfig, games: int = 5, seed: Optional[int] = None) -> int:
    """Let a random player reveal cells; return the number of wins."""
    if games < 1:
        raise ValueError("games must be at least 1")
    env = MinefieldEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)

    wins = 0
    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)
        done = False
        info = {}
        while not done:
            valid_indices = np.where(env.get_action_mask())[0]
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        print(f"=== Game {game + 1}/{games}: {info['status']} ===")
        print(env.render())
        if info["status"] == "WON":
            wins += 1

    print(f"\n=== Final: {wins}/{games} wins ({100 * wins / games:.0f}%) ===")
    return wins


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=9, help="Board columns")
    parser.add_argument("--height", type=int, default=9, help="Board rows")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minefield - play in the terminal")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    _add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch a random player")
    _add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games to play"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return

    try:
        config = BoardConfig(args.width, args.height, args.mines)
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "demo" and args.games < 1:
        parser.error("--games must be at least 1")

    if args.command == "play":
        play(config, seed=args.seed)
    elif args.command == "demo":
        demo(config, games=args.games, seed=args.seed)
