from collections import Counter

import pytest

from solojack.common.card import Card, Rank, Suit
from solojack.common.pile import CardPile
from solojack.common.util import calculate_chi_square, seeded_index_source
from solojack.exceptions import EmptyPileError, SolojackError


def test_pile_initialization():
    pile = CardPile()
    assert pile.cards == []
    assert pile.size == 0
    assert pile.is_empty()


def test_pile_initialization_with_custom_cards():
    cards = [
        Card(Rank.TWO, Suit.HEARTS),
        Card(Rank.ACE, Suit.DIAMONDS),
        Card(Rank.JACK, Suit.CLUBS),
    ]
    pile = CardPile(cards)
    assert pile.cards == cards
    assert pile.cards is not cards


def test_add_preserves_insertion_order():
    pile = CardPile()
    first = Card(Rank.KING, Suit.SPADES)
    second = Card(Rank.THREE, Suit.HEARTS)
    pile.add(first)
    pile.add(second)
    assert pile.cards == [first, second]
    assert pile.cards[0] is first
    assert len(pile) == 2


def test_full_deck_has_every_rank_and_suit_once():
    deck = CardPile.full_deck()
    assert deck.size == 52
    pairs = {(card.rank, card.suit) for card in deck}
    assert len(pairs) == 52
    assert pairs == {(rank, suit) for rank in Rank for suit in Suit}
    assert all(card.face_up for card in deck)


def test_remove_random_uses_index_source():
    calls = []

    def index_source(n):
        calls.append(n)
        return 1

    cards = [Card(Rank.TWO, Suit.CLUBS), Card(Rank.THREE, Suit.CLUBS)]
    pile = CardPile(cards, index_source=index_source)

    assert pile.remove_random() == Card(Rank.THREE, Suit.CLUBS)
    assert calls == [2]
    assert pile.cards == [Card(Rank.TWO, Suit.CLUBS)]


@pytest.mark.parametrize("size", [1, 2, 13, 52])
def test_remove_random_removes_exactly_the_returned_card(size):
    pile = CardPile(
        CardPile.full_deck().cards[:size], index_source=seeded_index_source(size)
    )
    before = Counter(pile.cards)

    card = pile.remove_random()

    assert pile.size == size - 1
    assert before - Counter(pile.cards) == Counter([card])


def test_remove_random_until_empty():
    pile = CardPile.full_deck(index_source=seeded_index_source(3))
    drawn = [pile.remove_random() for _ in range(52)]
    assert pile.is_empty()
    assert len(set(drawn)) == 52


def test_remove_random_from_empty_pile():
    pile = CardPile()
    with pytest.raises(EmptyPileError):
        pile.remove_random()
    assert issubclass(EmptyPileError, SolojackError)


def test_bad_index_source_is_rejected():
    pile = CardPile([Card(Rank.TWO, Suit.CLUBS)], index_source=lambda n: n)
    with pytest.raises(IndexError):
        pile.remove_random()
    assert pile.size == 1


def test_render():
    pile = CardPile(
        [Card(Rank.ACE, Suit.SPADES, face_up=False), Card(Rank.TEN, Suit.HEARTS)]
    )
    assert pile.render() == "?\n10 of Hearts"
    assert str(pile) == pile.render()
    assert CardPile().render() == ""


def test_pile_repr():
    pile = CardPile([Card(Rank.TWO, Suit.CLUBS)])
    assert repr(pile) == "CardPile([Card(Rank.TWO, Suit.CLUBS, face_up=True)])"


def test_seeded_index_source_is_reproducible():
    first = CardPile.full_deck(index_source=seeded_index_source(42))
    second = CardPile.full_deck(index_source=seeded_index_source(42))
    assert [first.remove_random() for _ in range(10)] == [
        second.remove_random() for _ in range(10)
    ]


def test_first_draw_is_uniform_over_ranks():
    index_source = seeded_index_source(2024)
    trials = 2600
    counts = Counter(
        CardPile.full_deck(index_source=index_source).remove_random().rank
        for _ in range(trials)
    )

    observed = [counts[rank] for rank in Rank]
    expected = [trials / len(Rank)] * len(Rank)

    # 12 degrees of freedom; 40 is far beyond the p=0.001 critical value
    assert calculate_chi_square(observed, expected) < 40
