"""Command-line entry point: play seeded headless sessions with the random agent.

Usage:
    deckbuilder-sim [--seed N] [--runs N] [--max-combats N] [--config PATH] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys

from deckbuilder.config import GameConfig
from deckbuilder.sim.content.registry import ContentRegistry
from deckbuilder.sim.runner import BatchRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deckbuilder-sim",
        description="Run headless card-combat sessions with a random agent.",
    )
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first session")
    parser.add_argument("--runs", type=int, default=10, help="Number of sessions to play")
    parser.add_argument(
        "--max-combats", type=int, default=10,
        help="Stop a session after this many combats",
    )
    parser.add_argument("--config", default=None, help="JSON file with GameConfig overrides")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = GameConfig.from_file(args.config) if args.config else GameConfig()

    registry = ContentRegistry()
    registry.load_vanilla_cards()
    registry.load_vanilla_enemies()

    runner = BatchRunner(registry, config=config)
    results = runner.run_batch(args.runs, base_seed=args.seed, max_combats=args.max_combats)

    for run in results:
        hp_end = run.battles[-1].player_hp_end if run.battles else 0
        print(
            f"seed={run.seed:<6} result={run.final_result:<10} "
            f"combats_won={run.combats_won:<3} hp={hp_end:<4} deck={len(run.cards_in_deck)}"
        )

    survived = sum(1 for r in results if r.final_result == "survived")
    total_won = sum(r.combats_won for r in results)
    print(f"\n{survived}/{len(results)} sessions survived, {total_won} combats won in total")
    return 0


if __name__ == "__main__":
    sys.exit(main())
