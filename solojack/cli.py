"""
This module is used to run solojack from the command line.

It can be used to play in two modes:
- Interactive console mode (the default), where the user plays rounds against
  the house and is asked after each one whether to play again.
- Simulation mode, where rounds are played automatically with a fixed player
  strategy and the results are summarized.

For example, `solojack --simulate --num_games 1000 --strat threshold --hit_below 15`
simulates a thousand rounds, and `--log_file` followed by a filename writes a
plain-text trace of the simulated rounds to that file.
"""

import argparse
import asyncio
import logging
import sys
import time
from typing import Dict, List, Optional

from solojack.adapters import CLIAdapter, DummyAdapter, always_stand, hit_below
from solojack.adapters.cli import parse_yes_no
from solojack.adapters.dummy import DrawStrategy
from solojack.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from solojack.common.pile import IndexSource
from solojack.common.util import seeded_index_source
from solojack.engine import BlackjackGame, RoundStats, Rules

logger = logging.getLogger(__name__)

REPLAY_PROMPT = "\nWould you like to play again? (Y/N)\n"
GOODBYE = "Thanks for playing! Goodbye!"
INVALID_REPLAY_INPUT = "Invalid input. Exiting the game."


async def play_interactive(
    io_interface: IOInterface, rules: Rules, index_source: IndexSource
) -> None:
    """
    Play rounds until the user declines another one.

    Every round gets a fresh adapter and engine; the IO interface and the random
    source are shared across rounds. An invalid replay answer ends the session
    rather than re-prompting.
    """
    while True:
        adapter = CLIAdapter(io_interface)
        async with adapter.session():
            game = BlackjackGame(adapter, rules, index_source=index_source)
            await game.play_round()

        io_interface.output(REPLAY_PROMPT)
        again = parse_yes_no(io_interface.input(""))
        if again is None:
            io_interface.output(INVALID_REPLAY_INPUT)
            return
        if not again:
            io_interface.output(GOODBYE)
            return
        io_interface.clear()


async def run_simulation(
    rules: Rules,
    index_source: IndexSource,
    num_games: int,
    strategy: DrawStrategy,
    io_interface: IOInterface,
) -> Dict[str, int]:
    """
    Play ``num_games`` rounds with a DummyAdapter and return the tallied stats.
    """
    stats = RoundStats().attach()
    try:
        for _ in range(num_games):
            adapter = DummyAdapter(strategy=strategy, io_interface=io_interface)
            async with adapter.session():
                game = BlackjackGame(adapter, rules, index_source=index_source)
                await game.play_round()
    finally:
        stats.detach()
    return stats.report()


def create_rules(args: argparse.Namespace) -> Rules:
    """
    Create the Rules object based on the command line arguments.

    Raises ValueError if the house stand threshold is out of range.
    """
    return Rules(dealer_stand_threshold=args.dealer_stands_on)


def create_strategy(args: argparse.Namespace) -> DrawStrategy:
    """Pick the simulated player's draw strategy."""
    if args.strat == "threshold":
        return hit_below(args.hit_below)
    return always_stand


def print_report(report: Dict[str, int], duration: float) -> None:
    decided = report["rounds_played"] - report["ties"]
    print("Simulation completed.")
    print(f"Rounds played: {report['rounds_played']:,}")
    print(f"Player wins: {report['player_wins']:,}")
    print(f"House wins: {report['house_wins']:,}")
    print(f"Ties: {report['ties']:,}")
    print(f"Player busts: {report['player_busts']:,}")
    print(f"House busts: {report['house_busts']:,}")
    print(f"Incomplete rounds: {report['incomplete_rounds']:,}")
    if decided:
        print(f"Player win ratio (excluding ties): {report['player_wins'] / decided:.2%}")
    print(f"\nDuration of simulation: {duration:.2f} seconds")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Blackjack against the house.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Play rounds automatically instead of asking at the console.",
        default=False,
    )
    parser.add_argument(
        "--num_games", type=int, default=1, help="Number of rounds to simulate"
    )
    parser.add_argument(
        "--strat",
        type=str,
        choices=["stand", "threshold"],
        default="stand",
        help="Simulated player strategy: 'stand' never draws, 'threshold' draws below --hit_below",
    )
    parser.add_argument(
        "--hit_below",
        type=int,
        default=17,
        help="Score below which the 'threshold' strategy draws",
    )
    parser.add_argument(
        "--dealer_stands_on",
        type=int,
        default=17,
        help="Lowest score at which the house stops drawing",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed the deck for reproducible rounds"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Write a trace of simulated rounds to the specified file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine activity at DEBUG level to stderr.",
        default=False,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to start the game.

    It parses the command line, sets up logging, the random source and the IO
    interface for the whole process, then either runs the interactive replay
    loop or a simulation.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        rules = create_rules(args)
    except ValueError as e:
        parser.error(str(e))
    index_source = seeded_index_source(args.seed)
    logger.debug("Rules: %s, seed: %s", rules.to_dict(), args.seed)

    if args.simulate:
        io_interface = (
            LoggingIOInterface(args.log_file) if args.log_file else DummyIOInterface()
        )
        start_time = time.time()
        report = asyncio.run(
            run_simulation(
                rules, index_source, args.num_games, create_strategy(args), io_interface
            )
        )
        print_report(report, time.time() - start_time)
        return 0

    io_interface = ConsoleIOInterface()
    try:
        asyncio.run(play_interactive(io_interface, rules, index_source))
    except (EOFError, KeyboardInterrupt):
        io_interface.output(f"\n{GOODBYE}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
