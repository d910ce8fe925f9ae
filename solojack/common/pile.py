"""
This module contains the CardPile class, an ordered collection of cards that
serves as the draw deck and as each participant's hand.

Cards are appended in order and drawn at a uniformly random position. The
random position comes from an index source, any callable that takes the pile
size ``n`` and returns an index in ``[0, n)``. ``random.randrange`` is the
default; tests pass a scripted source to get a reproducible draw order.

>>> pile = CardPile.full_deck(index_source=lambda n: 0)
>>> pile.size
52
>>> pile.remove_random()
Card(Rank.TWO, Suit.CLUBS, face_up=True)
>>> pile.size
51
"""

import random
from typing import Callable, Iterable, Iterator, List, Optional

from solojack.common.card import Card, Rank, Suit
from solojack.exceptions import EmptyPileError

IndexSource = Callable[[int], int]


class CardPile:
    """
    A class representing a pile of cards.
    """

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        index_source: Optional[IndexSource] = None,
    ):
        """
        Initialize a CardPile instance.

        :param cards: Cards to place in the pile, in order (optional).
        :param index_source: Callable returning a random index below its
                             argument. Defaults to ``random.randrange``.
        """
        self._cards: List[Card] = list(cards) if cards is not None else []
        self._index_source = index_source or random.randrange

    @classmethod
    def full_deck(cls, index_source: Optional[IndexSource] = None) -> "CardPile":
        """
        Build a pile holding one face-up card for every rank and suit.

        Cards are ordered by rank, then suit.
        """
        return cls(
            (Card(rank, suit, True) for rank in Rank for suit in Suit),
            index_source=index_source,
        )

    @property
    def cards(self) -> List[Card]:
        """Returns the cards in the pile, first added first."""
        return self._cards

    @property
    def size(self) -> int:
        return len(self._cards)

    def add(self, card: Card) -> None:
        """
        Append a card to the end of the pile.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def remove_random(self) -> Card:
        """
        Remove and return a card chosen uniformly at random.

        Raises:
            EmptyPileError: If the pile has no cards.
            IndexError: If the index source returns an index outside the pile.
        """
        if not self._cards:
            raise EmptyPileError("No cards left to remove.")

        index = self._index_source(len(self._cards))
        if not 0 <= index < len(self._cards):
            raise IndexError(
                f"Index source returned {index} for a pile of {len(self._cards)}"
            )
        return self._cards.pop(index)

    def is_empty(self) -> bool:
        return not self._cards

    def render(self) -> str:
        """
        Returns the display string of each card, one per line.
        """
        return "\n".join(str(card) for card in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"CardPile({self._cards!r})"

    def __str__(self) -> str:
        return self.render()
