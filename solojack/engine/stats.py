"""
This module contains the RoundStats class which tallies the results of
rounds as they are announced on the event bus.
"""

from typing import Any, Callable, Dict, Optional

from solojack.events import EngineEventType, EventBus, EventEmitter


class RoundStats:
    """
    A class that holds the statistics of a sequence of rounds.
    """

    def __init__(self):
        """
        Initializes the RoundStats with default values.
        """
        self.rounds_played = 0
        self.player_wins = 0
        self.house_wins = 0
        self.ties = 0
        self.player_busts = 0
        self.house_busts = 0
        self.incomplete_rounds = 0
        self._unsubscribe: Optional[Callable] = None

    def attach(self, emitter: Optional[EventEmitter] = None) -> "RoundStats":
        """Start counting ROUND_ENDED events from ``emitter`` (the global bus by default)."""
        emitter = emitter or EventBus.get_instance()
        self.detach()
        self._unsubscribe = emitter.on(EngineEventType.ROUND_ENDED, self.update)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def update(self, data: Dict[str, Any]) -> None:
        """Updates the statistics from a ROUND_ENDED event payload."""
        self.rounds_played += 1

        winner = data.get("winner")
        if winner == "player":
            self.player_wins += 1
        elif winner == "house":
            self.house_wins += 1
        elif winner == "tie":
            self.ties += 1

        outcome = data.get("outcome")
        if outcome == "player_bust":
            self.player_busts += 1
        elif outcome == "house_bust":
            self.house_busts += 1

        if not data.get("completed", True):
            self.incomplete_rounds += 1

    def report(self) -> Dict[str, int]:
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "rounds_played": self.rounds_played,
            "player_wins": self.player_wins,
            "house_wins": self.house_wins,
            "ties": self.ties,
            "player_busts": self.player_busts,
            "house_busts": self.house_busts,
            "incomplete_rounds": self.incomplete_rounds,
        }
