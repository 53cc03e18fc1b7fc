"""
Play Game - Manual Runs
=======================

Play one game from the command line and print the outcome.

Usage:
    python -m tools.play_game 1 1 2 3
    python -m tools.play_game 1 1 2 3 5 8 13 21 --turns
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from box_game.core.config_loader import get_config
from box_game.core.game import BoxGame, GameResult, format_scores


def print_turns(result: GameResult) -> None:
    """Print one row per turn."""
    print(f"{'turn':>4}  {'player':<6}  {'box':<8}  {'token':>6}  {'points':>10}  {'total':>10}")
    for t in result.turns:
        box = f"{t.box_variant}[{t.box_index}]"
        print(f"{t.turn:>4}  {t.player:<6}  {box:<8}  {t.token_weight:>6g}  "
              f"{t.delta_score:>10g}  {t.player_score:>10g}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play the box game on a list of token weights",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # First 4 Fibonacci numbers
    python -m tools.play_game 1 1 2 3

    # Show which box absorbed each token
    python -m tools.play_game 1 1 2 3 5 8 13 21 --turns
"""
    )
    parser.add_argument("weights", type=int, nargs="*", help="Token weights, one per turn")
    parser.add_argument("--turns", action="store_true", help="Print a row per turn")
    
    args = parser.parse_args(argv)
    
    try:
        config = get_config()
        result = BoxGame(config).run(args.weights)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    
    if args.turns:
        print_turns(result)
        print()
    
    print(format_scores(result.score_a, result.score_b, config))
    winner = result.winner
    print(f"Winner: player {winner}" if winner is not None else "Winner: tie")
    return 0


if __name__ == "__main__":
    sys.exit(main())
