#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--level NAME | --width W --height H --mines M] [--seed S]
    python main.py demo [--level NAME] [--games N] [--delay S] [--seed S]
"""
import argparse
import os
import random
import time
from typing import Optional, Tuple

import numpy as np

from minesweeper import (
    LEVELS,
    BoardConfig,
    GameState,
    MinesweeperEnv,
    MinesweeperError,
    new_game,
    render_text,
    reset,
    reveal,
    toggle_flag,
)
from minesweeper.geometry import to_index


PLAY_HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), "
    "l LEVEL (change level), q (quit)"
)


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def config_from_args(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from a named level or explicit sizes."""
    base = LEVELS[args.level]
    return BoardConfig(
        width=base.width if args.width is None else args.width,
        height=base.height if args.height is None else args.height,
        num_mines=base.num_mines if args.mines is None else args.mines,
    )


def _is_number(text: str) -> bool:
    """Check if text is a plain run of ASCII digits."""
    return text.isascii() and text.isdecimal()


def apply_command(
    state: GameState, line: str, rng: Optional[random.Random] = None
) -> Tuple[Optional[GameState], str]:
    """
    Apply one line of player input.

    Args:
        state: Current game.
        line: Raw command text.
        rng: Random source used for new boards.

    Returns:
        Tuple of (next state, message). The state is None when the
        player quits.
    """
    parts = line.split()
    if not parts:
        return state, PLAY_HELP
    command, operands = parts[0].lower(), parts[1:]

    if command == "q":
        return None, "Bye."
    if command == "n":
        return reset(state, rng=rng), "New game."
    if command == "l":
        if len(operands) != 1 or operands[0].lower() not in LEVELS:
            return state, f"Levels: {', '.join(LEVELS)}"
        level = operands[0].lower()
        return reset(state, LEVELS[level], rng), f"Level: {level}."
    if command in ("r", "f"):
        if len(operands) != 2 or not all(_is_number(op) for op in operands):
            return state, PLAY_HELP
        row, col = int(operands[0]), int(operands[1])
        if row >= state.config.height or col >= state.config.width:
            return state, f"No tile at ({row}, {col})."
        index = to_index(row, col, state.config.width)
        action = reveal if command == "r" else toggle_flag
        return action(state, index), ""
    return state, PLAY_HELP


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    rng = random.Random(args.seed)
    state = new_game(config_from_args(args), rng)
    message = PLAY_HELP

    while state is not None:
        print()
        print(render_text(state))
        print(
            f"Mines left: {state.mines_remaining} | "
            f"Status: {state.status.name}"
        )
        if state.is_won:
            print("*** WIN! ***")
        elif state.is_lost:
            print("*** LOST (hit mine) ***")
        if message:
            print(message)

        try:
            line = input("> ")
        except EOFError:
            break
        state, message = apply_command(state, line, rng)


def demo(args: argparse.Namespace) -> None:
    """Watch a random player play Minesweeper."""
    config = LEVELS[args.level]
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    print(
        f"Board: {config.width}x{config.height} with {config.num_mines} mines "
        f"({100 * config.num_mines / config.num_tiles:.1f}% density)"
    )

    wins = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)

        done = False
        step = 0

        while not done:
            valid_indices = np.where(env.get_action_mask())[0]
            action = int(rng.choice(valid_indices))
            row, col = divmod(action, config.width)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if args.delay > 0:
                clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(args.delay)

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or watch a demo"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--level", choices=list(LEVELS), default="beginner", help="Level preset"
    )
    play_parser.add_argument("--width", type=int, default=None, help="Columns")
    play_parser.add_argument("--height", type=int, default=None, help="Rows")
    play_parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    demo_parser.add_argument(
        "--level", choices=list(LEVELS), default="beginner", help="Level preset"
    )
    demo_parser.add_argument(
        "--games", type=positive_int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for boards and moves"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except MinesweeperError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
