#!/usr/bin/env python3
"""Watch random moves play Minesweeper."""
import argparse
import os
import time
from typing import Optional

from src.sweeper import BoardConfig, MinesweeperEnv


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(
    delay: float = 0.3,
    games: int = 3,
    config: Optional[BoardConfig] = None,
    seed: Optional[int] = None,
):
    """Run demo games, picking a random hidden cell each move."""
    if games < 1:
        raise ValueError("Number of games must be at least 1")
    config = config or BoardConfig()
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(seed)

    density = 100 * config.mine_count / config.cell_count
    print(f"Board: {config.rows}x{config.cols} with {config.mine_count} mines ({density:.1f}% density)")
    time.sleep(delay)

    wins = 0

    for game in range(games):
        game_seed = None if seed is None else seed + game
        env.reset(seed=game_seed)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            row, col = divmod(int(action), config.cols)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=positive_int, default=3, help="Number of games")
    parser.add_argument("--rows", type=int, default=10, help="Number of rows")
    parser.add_argument("--cols", type=int, default=10, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(
        delay=args.delay,
        games=args.games,
        config=BoardConfig(args.rows, args.cols, args.mines),
        seed=args.seed,
    )
