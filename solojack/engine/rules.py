"""
Scoring and table rules for a round of blackjack.

`calculate_score` is the single scoring function shared by the engine (to
drive the dealer and detect busts) and by the round result handed to the
presentation surface.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from solojack.common.card import Card, Rank


class Rules:
    def __init__(
        self,
        dealer_stand_threshold: int = 17,
        bust_limit: int = 21,
    ):
        if not 2 <= dealer_stand_threshold <= bust_limit:
            raise ValueError(
                f"dealer_stand_threshold must be between 2 and {bust_limit}, "
                f"got {dealer_stand_threshold}"
            )
        self.dealer_stand_threshold = dealer_stand_threshold
        self.bust_limit = bust_limit

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for reporting."""
        return {
            "dealer_stand_threshold": self.dealer_stand_threshold,
            "bust_limit": self.bust_limit,
        }

    def should_dealer_draw(self, score: int) -> bool:
        """The house draws on anything below the stand threshold, soft or hard."""
        return score < self.dealer_stand_threshold

    def is_bust(self, score: int) -> bool:
        return score > self.bust_limit


def card_value(card: Card) -> int:
    """Blackjack value of a single card, with an ace counted as 11."""
    if card.rank == Rank.ACE:
        return 11
    if card.rank.is_face:
        return 10
    return int(card.rank)


def calculate_score(cards: Iterable[Card], bust_limit: int = 21) -> int:
    """
    Score a hand, demoting soft aces from 11 to 1 while the total is over the limit.

    Visibility is ignored; a face-down card still counts.

    >>> calculate_score([Card(Rank.ACE, 0), Card(Rank.ACE, 1), Card(Rank.NINE, 2)])
    21
    """
    score = 0
    soft_aces = 0
    for card in cards:
        score += card_value(card)
        if card.rank == Rank.ACE:
            soft_aces += 1

    while score > bust_limit and soft_aces > 0:
        score -= 10
        soft_aces -= 1

    return score


class Winner(Enum):
    HOUSE = "house"
    PLAYER = "player"
    TIE = "tie"


class Outcome(Enum):
    """How a round was decided, in the order the checks are made."""

    PLAYER_BUST = ("player_bust", Winner.HOUSE, "You Busted")
    HOUSE_BUST = ("house_bust", Winner.PLAYER, "House Busted")
    PLAYER_HIGHER = ("player_higher", Winner.PLAYER, "Your Score is Higher")
    HOUSE_HIGHER = ("house_higher", Winner.HOUSE, "House Score is Higher")
    TIE = ("tie", Winner.TIE, "Both Scores are Equal")

    def __init__(self, key: str, winner: Winner, reason: str):
        self.key = key
        self.winner = winner
        self.reason = reason


def determine_outcome(
    player_score: int, house_score: int, bust_limit: int = 21
) -> Outcome:
    """
    Decide a round from the two final scores.

    A player bust is checked first, so it loses even if the house also busted.
    """
    if player_score > bust_limit:
        return Outcome.PLAYER_BUST
    if house_score > bust_limit:
        return Outcome.HOUSE_BUST
    if player_score > house_score:
        return Outcome.PLAYER_HIGHER
    if player_score < house_score:
        return Outcome.HOUSE_HIGHER
    return Outcome.TIE


@dataclass(frozen=True)
class RoundResult:
    """
    Final state of a round, handed to the presentation surface as plain values.
    """

    house_cards: Tuple[str, ...]
    player_cards: Tuple[str, ...]
    house_score: int
    player_score: int
    outcome: Outcome
    completed: bool = True

    @property
    def winner(self) -> Winner:
        return self.outcome.winner

    def to_dict(self) -> dict:
        return {
            "house_cards": list(self.house_cards),
            "player_cards": list(self.player_cards),
            "house_score": self.house_score,
            "player_score": self.player_score,
            "outcome": self.outcome.key,
            "winner": self.outcome.winner.value,
            "completed": self.completed,
        }


def build_result(
    house_cards: Iterable[Card],
    player_cards: Iterable[Card],
    rules: Optional[Rules] = None,
    completed: bool = True,
) -> RoundResult:
    """Score both hands and wrap them in a RoundResult."""
    rules = rules or Rules()
    house_cards = list(house_cards)
    player_cards = list(player_cards)
    house_score = calculate_score(house_cards, rules.bust_limit)
    player_score = calculate_score(player_cards, rules.bust_limit)
    return RoundResult(
        house_cards=tuple(str(card) for card in house_cards),
        player_cards=tuple(str(card) for card in player_cards),
        house_score=house_score,
        player_score=player_score,
        outcome=determine_outcome(player_score, house_score, rules.bust_limit),
        completed=completed,
    )
