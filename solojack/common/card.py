"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Diamonds, Hearts and Spades, numbered 0 through 3.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards, numbered 2 through 14 with Jack, Queen, King and Ace as 11 to 14.

- `Card`: A class representing a playing card. A card has a rank, a suit and a
visibility flag. Face-down cards display as a concealment marker.

This module is part of the `solojack` package, a console Blackjack game.
"""

from enum import IntEnum, unique
from typing import Union


@unique
class Suit(IntEnum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def suit_str(self) -> str:
        """A display name for the suit."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.suit_str


@unique
class Rank(IntEnum):
    """
    Enum for ranks in a card deck.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def rank_str(self) -> str:
        """A display name for the rank."""
        if self > Rank.TEN:
            return self.name.capitalize()
        return str(self.value)

    def __str__(self) -> str:
        return self.rank_str


HIDDEN_CARD = "?"


def _coerce(enum_cls, value, label):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Invalid {label}: {value!r}")
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise ValueError(f"{label.capitalize()} out of range: {value}") from exc


class Card:
    """
    Class representing a playing card. This class is a member of a card pile.

    >>> card = Card(Rank.QUEEN, Suit.HEARTS)
    >>> print(card)
    Queen of Hearts
    >>> card.face_up = False
    >>> print(card)
    ?
    """

    __slots__ = ("_rank", "_suit", "face_up")

    def __init__(
        self, rank: Union[Rank, int], suit: Union[Suit, int], face_up: bool = True
    ):
        """
        Initialize a Card instance.

        :param rank: Rank of the card, a Rank or an integer from 2 to 14
        :param suit: Suit of the card, a Suit or an integer from 0 to 3
        :param face_up: Whether the card is visible
        :raises TypeError: If rank or suit is not an integer
        :raises ValueError: If rank or suit is out of range
        """
        self._rank = _coerce(Rank, rank, "rank")
        self._suit = _coerce(Suit, suit, "suit")
        self.face_up = face_up

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._rank, self._suit))

    # Ordering looks at rank only, so two cards can be neither < nor > each
    # other while still being unequal.
    def __lt__(self, other):
        if isinstance(other, Card):
            return self._rank < other._rank
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Card):
            return self._rank <= other._rank
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Card):
            return self._rank > other._rank
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Card):
            return self._rank >= other._rank
        return NotImplemented

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return (
            f"Card(Rank.{self._rank.name}, Suit.{self._suit.name}, "
            f"face_up={self.face_up})"
        )

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: The card's name if it is face up, otherwise the hidden marker.
        """
        if not self.face_up:
            return HIDDEN_CARD
        return f"{self._rank.rank_str} of {self._suit.suit_str}"
