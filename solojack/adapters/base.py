"""
Base adapter interface for the solojack engine.

This module defines the interface that presentation adapters must implement
to interact with the engine. The engine pushes plain data to the adapter
(table snapshots, round results, notices) and asks it for the player's
draw/stand decision; the adapter never holds a reference to the engine.
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

from solojack.engine.rules import RoundResult


class TableAdapter(ABC):
    """
    Base interface for presentation adapters.

    Implementations of this interface bridge the gap between the
    platform-agnostic game engine and a concrete surface such as the console
    or an automated simulation.
    """

    @abstractmethod
    async def render_table(self, state: Dict[str, Any]) -> None:
        """
        Render both hands.

        Args:
            state: Snapshot from the engine. ``state["house"]["cards"]`` and
                   ``state["player"]["cards"]`` hold display strings, with the
                   hole card already shown as ``"?"``.
        """
        pass

    @abstractmethod
    async def request_draw(self) -> bool:
        """
        Ask whether the player wants another card.

        Implementations must keep asking until they get a valid answer.

        Returns:
            True to draw, False to stand
        """
        pass

    @abstractmethod
    async def announce_outcome(self, result: RoundResult) -> None:
        """
        Present the end of the round.

        Args:
            result: Final hands, scores and outcome of the round
        """
        pass

    @abstractmethod
    async def notify(self, message: str) -> None:
        """
        Show a user-facing notice, such as the deck running out.

        Args:
            message: The notice text
        """
        pass

    # The following methods have default implementations but can be overridden

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        Called once before the first round of a session.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        Called once after the last round of a session, even if it failed.
        """
        pass

    @asynccontextmanager
    async def session(self) -> AsyncIterator["TableAdapter"]:
        """
        Bracket a playing session with initialize() and shutdown().

        >>> async with adapter.session():
        ...     await play_round(adapter)
        """
        await self.initialize()
        try:
            yield self
        finally:
            await self.shutdown()
