"""
Cards, piles and I/O shared by the solojack engine and adapters.
"""

from solojack.common.card import Card, Rank, Suit
from solojack.common.pile import CardPile

__all__ = ["Card", "Rank", "Suit", "CardPile"]
