"""
Dummy adapter for the solojack engine, used for testing and simulation.

This module provides a non-interactive adapter that can be used for automated
testing, simulations, and benchmarks where no user interaction is needed.
"""

from typing import Any, Callable, Dict, List, Optional

from solojack.adapters.base import TableAdapter
from solojack.common.io_interface import IOInterface
from solojack.engine.rules import RoundResult

# A strategy gets the player's current score and returns True to draw.
DrawStrategy = Callable[[int], bool]


def always_stand(score: int) -> bool:
    return False


def hit_below(threshold: int) -> DrawStrategy:
    """Build a strategy that draws while the player's score is under ``threshold``."""

    def strategy(score: int) -> bool:
        return score < threshold

    return strategy


class DummyAdapter(TableAdapter):
    """
    Dummy adapter for testing and simulation.

    This adapter doesn't interact with any real surface. Draw decisions come
    from a scripted list first, then from a strategy function, and default to
    standing. Everything the engine sends is recorded for later inspection.
    """

    def __init__(
        self,
        decisions: Optional[List[bool]] = None,
        strategy: Optional[DrawStrategy] = None,
        io_interface: Optional[IOInterface] = None,
    ):
        """
        Initialize the dummy adapter.

        Args:
            decisions: Optional draw/stand answers to give in sequence
            strategy: Optional function of the player's score used once the
                      scripted decisions run out
            io_interface: Optional interface that receives a plain-text trace
                          of the round (useful for debugging and transcripts)
        """
        self.decisions = list(decisions or [])
        self.strategy = strategy
        self.io_interface = io_interface

        self.rendered_states: List[Dict[str, Any]] = []
        self.notices: List[str] = []
        self.results: List[RoundResult] = []
        self.draw_requests = 0

    async def _trace(self, message: str) -> None:
        if self.io_interface is not None:
            await self.io_interface.output_async(message)

    async def render_table(self, state: Dict[str, Any]) -> None:
        """
        Store the table snapshot for later inspection.
        """
        self.rendered_states.append(state)
        await self._trace(
            f"House: {', '.join(state['house']['cards'])} | "
            f"Player: {', '.join(state['player']['cards'])}"
        )

    async def request_draw(self) -> bool:
        """
        Return the next scripted decision, else ask the strategy, else stand.
        """
        self.draw_requests += 1

        if self.decisions:
            decision = self.decisions.pop(0)
        elif self.strategy is not None and self.rendered_states:
            player_score = self.rendered_states[-1]["player"]["score"]
            decision = self.strategy(player_score)
        else:
            decision = False

        await self._trace("Player draws" if decision else "Player stands")
        return decision

    async def announce_outcome(self, result: RoundResult) -> None:
        self.results.append(result)
        await self._trace(
            f"House {result.house_score}, Player {result.player_score}: "
            f"{result.winner.value} ({result.outcome.reason})"
        )

    async def notify(self, message: str) -> None:
        self.notices.append(message)
        await self._trace(message)

    @property
    def last_result(self) -> Optional[RoundResult]:
        return self.results[-1] if self.results else None
