#!/usr/bin/env python3
"""
Command line front end.

    connect4-engine play --level hard --hint-level medium
    connect4-engine tournament medium easy --games 50
"""
import argparse
import logging
import sys

import numpy as np

from connect4_engine.config import COLS
from connect4_engine.game.board import Player, apply_move, empty_board, legal_columns, render
from connect4_engine.game.rules import winning_line
from connect4_engine.engine.policy import DifficultyTier, select_move
from connect4_engine.engine.hints import suggest_move
from connect4_engine.arena.match import annotate_move
from connect4_engine.arena.tournament import run_tournament


def print_history(moves):
    print("\nMove history:")
    for move in moves:
        print(f"  #{move.move_number:<3} {move.player.label}  Col {move.column + 1}  "
              f"{move.quality.description} ({move.score})")


def read_column(board, human, hint_tier, rng):
    """Prompt until the human enters a legal column. Returns None on quit."""
    valid_cols = legal_columns(board)
    while True:
        raw = input(f"Your move {[c + 1 for c in valid_cols]}, 'h' for a hint, 'q' to quit: ").strip().lower()
        if raw == 'q':
            return None
        if raw == 'h':
            print(f"💡 {suggest_move(board, human, tier=hint_tier, rng=rng).message}")
            continue
        try:
            col = int(raw) - 1
        except ValueError:
            print(f"❌ Enter a number 1-{COLS}")
            continue
        if col not in valid_cols:
            print(f"❌ Invalid column! Choose from: {[c + 1 for c in valid_cols]}")
            continue
        return col


def play(args):
    rng = np.random.default_rng(args.seed)
    tier = DifficultyTier.from_name(args.level)
    hint_tier = DifficultyTier.from_name(args.hint_level)
    ai = Player.ONE if args.ai_first else Player.TWO
    human = ai.opponent

    print("=" * 50)
    print(f"🎮 Connect Four - you are {human.label} vs AI ({tier.value})")
    print("=" * 50)

    board = empty_board()
    player = Player.ONE
    moves = []

    while True:
        print(render(board))
        if not legal_columns(board):
            print("🤝 Game Over - Draw!")
            break

        if player is human:
            col = read_column(board, human, hint_tier, rng)
            if col is None:
                print("👋 Thanks for playing!")
                break
        else:
            col = select_move(board, player, tier, rng=rng)
            print(f"🤖 AI plays column {col + 1}")

        record = annotate_move(board, player, col, len(moves) + 1)
        moves.append(record)
        board = apply_move(board, col, player)
        print(f"   {record.quality.description}")

        if winning_line(board, player) is not None:
            print(render(board))
            print("🎉 YOU WIN!" if player is human else "🤖 AI WINS!")
            break

        player = player.opponent

    print_history(moves)
    return 0


def tournament(args):
    tier_a = DifficultyTier.from_name(args.tier_a)
    tier_b = DifficultyTier.from_name(args.tier_b)
    results = run_tournament(tier_a, tier_b, num_games=args.games, seed=args.seed, verbose=True)

    print(f"\n{tier_a.value} vs {tier_b.value} over {args.games} games")
    print(f"  Wins:   {results['wins']}")
    print(f"  Losses: {results['losses']}")
    print(f"  Draws:  {results['draws']}")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Average game length: {results['average_moves']:.1f} moves")
    return 0


def build_parser():
    tiers = [t.value for t in DifficultyTier]

    parser = argparse.ArgumentParser(prog="connect4-engine", description="Connect Four engine")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play against the AI in the terminal")
    play_parser.add_argument("--level", choices=tiers, default="medium")
    play_parser.add_argument("--hint-level", choices=tiers, default="medium",
                             help="Difficulty used to pick hinted columns")
    play_parser.add_argument("--ai-first", action="store_true", help="Let the AI open the game")
    play_parser.add_argument("--seed", type=int, default=None)
    play_parser.set_defaults(func=play)

    tournament_parser = subparsers.add_parser("tournament", help="Pit two AI tiers against each other")
    tournament_parser.add_argument("tier_a", choices=tiers)
    tournament_parser.add_argument("tier_b", choices=tiers)
    tournament_parser.add_argument("--games", type=int, default=20)
    tournament_parser.add_argument("--seed", type=int, default=None)
    tournament_parser.set_defaults(func=tournament)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n👋 Game interrupted. Thanks for playing!")
        return 130


if __name__ == "__main__":
    sys.exit(main())
