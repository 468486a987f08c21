#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty LABEL] [--seed N]
    python main.py random [--difficulty LABEL] [--games N] [--seed N] [--envs N]
"""
import argparse
import logging
import random

import numpy as np

from src.minefield.engine import DIFFICULTIES, Engine, find_difficulty
from src.minefield.environment import MinefieldEnv, make_vec_env, render_text


PLAY_HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), "
    "n (new game), d LABEL (difficulty), q (quit)"
)


def print_engine(engine: Engine) -> None:
    """Print the grid and status line."""
    print(render_text(engine.get_observation()))
    print(
        f"{engine.status_message} "
        f"[{engine.difficulty.label} {engine.rows}x{engine.cols}, "
        f"flags left: {engine.remaining_flags}]"
    )


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    engine = Engine(
        find_difficulty(args.difficulty), rng=random.Random(args.seed)
    )
    print(PLAY_HELP)
    print_engine(engine)

    while True:
        try:
            line = input("> ").split()
        except EOFError:
            break
        if not line:
            continue

        command, params = line[0].lower(), line[1:]
        if command == "q":
            break
        if command == "n":
            engine.reset()
        elif command == "d" and params:
            if not engine.change_difficulty(" ".join(params)):
                print(f"Unknown difficulty: {' '.join(params)}")
                continue
        elif command in ("r", "f") and len(params) == 2:
            try:
                row, col = int(params[0]), int(params[1])
            except ValueError:
                print(PLAY_HELP)
                continue
            if command == "r":
                engine.reveal(row, col)
            else:
                engine.toggle_flag(row, col)
        else:
            print(PLAY_HELP)
            continue

        print_engine(engine)


def play_random(args: argparse.Namespace) -> None:
    """Play games with random reveals and report the win rate."""
    env = MinefieldEnv(difficulty=find_difficulty(args.difficulty))
    rng = np.random.default_rng(args.seed)

    print(f"Playing {args.games} random games on {env.difficulty.label}...")

    wins = 0
    total_revealed = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        info = {}

        while not done:
            action = random_action(rng, env.get_action_mask())
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        total_revealed += info["revealed"]
        if info["game_state"] == "WON":
            wins += 1

    print("Results:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def random_action(rng: np.random.Generator, mask: np.ndarray) -> int:
    """Pick a random valid action, or 0 when none is valid."""
    valid_actions = np.where(mask)[0]
    if len(valid_actions) == 0:
        return 0
    return int(rng.choice(valid_actions))


def play_random_parallel(args: argparse.Namespace) -> None:
    """Play random games across parallel environments."""
    envs = make_vec_env(args.envs, find_difficulty(args.difficulty))
    rng = np.random.default_rng(args.seed)

    print(
        f"Playing {args.games} random games on {args.difficulty} "
        f"across {args.envs} environments..."
    )

    envs.reset(seed=args.seed)
    wins = 0
    games = 0
    try:
        while games < args.games:
            masks = envs.call("get_action_mask")
            actions = np.array([random_action(rng, mask) for mask in masks])
            _, rewards, terminated, truncated, _ = envs.step(actions)
            done = np.logical_or(terminated, truncated)
            games += int(done.sum())
            wins += int((rewards[done] == 10.0).sum())
    finally:
        envs.close()

    print("Results:")
    print(f"  Games: {games}")
    print(f"  Win rate: {wins / games:.1%}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    labels = [difficulty.label for difficulty in DIFFICULTIES]

    parser = argparse.ArgumentParser(
        description="Minefield - Play the mine detection puzzle"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", choices=labels, default=labels[0],
        help="Difficulty preset",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Random command
    random_parser = subparsers.add_parser(
        "random", help="Play games with random moves"
    )
    random_parser.add_argument(
        "--difficulty", choices=labels, default=labels[0],
        help="Difficulty preset",
    )
    random_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    random_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for moves and mines"
    )
    random_parser.add_argument(
        "--envs", type=int, default=1, help="Number of parallel environments"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "play":
        play(args)
    elif args.command == "random" and args.envs > 1:
        play_random_parallel(args)
    elif args.command == "random":
        play_random(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
