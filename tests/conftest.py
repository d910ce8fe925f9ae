"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the solojack test suite.
"""

import pytest

from solojack.common.card import Card
from solojack.common.pile import CardPile
from solojack.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def stacked_deck():
    """
    Factory for a deck that deals the given cards in the given order.

    The cards are stored in reverse and the index source always picks the last
    one, so ``stacked_deck(a, b, c)`` deals ``a`` first.
    """

    def build(*cards: Card) -> CardPile:
        return CardPile(reversed(cards), index_source=lambda n: n - 1)

    return build
