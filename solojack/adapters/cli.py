"""
Command-line interface adapter for the solojack engine.

This module renders the table as text banners and reads the player's Y/N
answers through an IOInterface, so the same adapter drives the real console
and scripted test input.
"""

import logging
from typing import Any, Dict, Optional

from solojack.adapters.base import TableAdapter
from solojack.common.io_interface import ConsoleIOInterface, IOInterface
from solojack.engine.rules import RoundResult, Winner

logger = logging.getLogger(__name__)

HOUSE_HEADER = (
    "######################################\n"
    "\t         House Holds: \n"
    "######################################"
)
PLAYER_HEADER = (
    "--------------------------------------\n"
    "\t          You Hold: \n"
    "--------------------------------------"
)
DRAW_PROMPT = (
    "|---------------------------------------------------|\n"
    "| Would you like to draw another card? Type Y or N  |\n"
    "|---------------------------------------------------|"
)
INVALID_DRAW_INPUT = "Invalid input. Please type 'Y' or 'N'."

WINNER_BANNERS = {
    Winner.HOUSE: "|-------------|\n| House Wins! |\n|-------------|",
    Winner.PLAYER: "|----------|\n| You Win! |\n|----------|",
    Winner.TIE: "|------------|\n| It's a Tie |\n|------------|",
}
THANKS = "\nThanks for playing BlackJack!\n"


def parse_yes_no(answer: str) -> Optional[bool]:
    """Map a Y/N answer to a bool, case-insensitively; anything else is None."""
    choice = answer.strip().lower()
    if choice == "y":
        return True
    if choice == "n":
        return False
    return None


class CLIAdapter(TableAdapter):
    """
    Command-line interface adapter for the solojack engine.

    This adapter uses an IOInterface for input/output, providing a simple
    text-based interface to the game.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
        """
        self.io_interface = io_interface or ConsoleIOInterface()

    async def _write(self, message: str) -> None:
        await self.io_interface.output_async(message)

    async def render_table(self, state: Dict[str, Any]) -> None:
        """
        Render the house's and the player's hands.

        Args:
            state: The current table snapshot
        """
        house_cards = state.get("house", {}).get("cards", [])
        player_cards = state.get("player", {}).get("cards", [])

        await self._write(f"{HOUSE_HEADER}\n\n" + "\n".join(house_cards) + "\n")
        await self._write(f"{PLAYER_HEADER}\n\n" + "\n".join(player_cards) + "\n")

    async def request_draw(self) -> bool:
        """
        Ask the player whether to draw, re-prompting until the answer is Y or N.

        Returns:
            True if the player wants another card
        """
        await self._write(DRAW_PROMPT)
        while True:
            decision = parse_yes_no(self.io_interface.input(""))
            if decision is not None:
                logger.debug("Player chose to %s", "draw" if decision else "stand")
                return decision
            await self._write(INVALID_DRAW_INPUT)

    async def announce_outcome(self, result: RoundResult) -> None:
        """
        Show the final hands, both scores and who won.

        Args:
            result: The round result
        """
        await self.render_table(
            {
                "house": {"cards": result.house_cards},
                "player": {"cards": result.player_cards},
            }
        )
        await self._write(
            f"House Score: {result.house_score}, Your Score: {result.player_score}"
        )
        await self._write(
            f"{WINNER_BANNERS[result.winner]} \n({result.outcome.reason})"
        )
        await self._write(THANKS)

    async def notify(self, message: str) -> None:
        await self._write(message)
