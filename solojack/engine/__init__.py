"""
Round engine, rules and statistics for solojack.
"""

from solojack.engine.game import BlackjackGame, GamePhase
from solojack.engine.rules import (
    Outcome,
    RoundResult,
    Rules,
    Winner,
    calculate_score,
    determine_outcome,
)
from solojack.engine.stats import RoundStats

__all__ = [
    "BlackjackGame",
    "GamePhase",
    "Outcome",
    "RoundResult",
    "Rules",
    "Winner",
    "calculate_score",
    "determine_outcome",
    "RoundStats",
]
