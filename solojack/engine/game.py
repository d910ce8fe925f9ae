"""
Blackjack round engine.

This module provides the BlackjackGame class, which plays one round of
single-player blackjack against an automated house:

1. ``start()`` deals two cards to each side, the house's first one face down.
2. ``play()`` alternates the house policy (draw below 17) and the player's
   draw/stand decision until both sides are done.
3. ``end()`` reveals the hole card, scores both hands and hands the result to
   the presentation adapter.

A fresh BlackjackGame, with a fresh deck, is used for every round.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from solojack.common.card import Card
from solojack.common.pile import CardPile, IndexSource
from solojack.engine.rules import RoundResult, Rules, build_result, calculate_score
from solojack.events import EngineEventType, EventBus
from solojack.exceptions import GamePhaseError

if TYPE_CHECKING:
    from solojack.adapters.base import TableAdapter

logger = logging.getLogger(__name__)

# Two cards for the house, two for the player
INITIAL_DEAL_SIZE = 4

HOUSE = "house"
PLAYER = "player"


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    DEALING = "dealing"
    PLAYING = "playing"
    RESOLVED = "resolved"


class BlackjackGame:
    """
    Engine for a single round of blackjack.

    The engine owns the deck and both hands. It talks to the presentation
    surface only through the adapter it is given, sending it plain snapshots
    and results.
    """

    def __init__(
        self,
        adapter: TableAdapter,
        rules: Optional[Rules] = None,
        index_source: Optional[IndexSource] = None,
        deck: Optional[CardPile] = None,
    ):
        """
        Initialize the round.

        Args:
            adapter: Presentation adapter for rendering and player input
            rules: Table rules; defaults to standing on 17 and busting over 21
            index_source: Random index provider for the deck; ignored if
                          ``deck`` is given
            deck: Optional prebuilt deck, e.g. a stacked one for tests
        """
        self.adapter = adapter
        self.rules = rules or Rules()
        self.deck = deck if deck is not None else CardPile.full_deck(index_source)
        self.house_cards = CardPile()
        self.player_cards = CardPile()
        self.house_done = False
        self.player_done = False
        self.phase = GamePhase.NOT_STARTED
        self.event_bus = EventBus.get_instance()
        self._start_attempted = False

    # Round lifecycle

    async def start(self) -> None:
        """
        Deal the opening hands and show the table.

        An empty deck aborts with a notice and leaves the round untouched.
        Fewer than four cards ends the round before any card is dealt.
        """
        if self._start_attempted:
            raise GamePhaseError("start() may only be called once per round")
        self._start_attempted = True

        if self.deck.is_empty():
            await self._report_exhausted("Deck is empty. Cannot start the game.")
            return

        self.phase = GamePhase.DEALING
        self.event_bus.emit(
            EngineEventType.ROUND_STARTED,
            {"deck_size": self.deck.size, "rules": self.rules.to_dict()},
        )
        await self._deal_initial_cards()
        self.phase = GamePhase.PLAYING
        await self.adapter.render_table(self.snapshot())

    async def play(self) -> None:
        """
        Run the turn loop until both the house and the player are done.

        Running out of cards stops the loop early; whichever side was still
        playing is left as it is.
        """
        self._require_started("play")

        if self.deck.is_empty():
            await self._report_exhausted("Deck is empty. Game cannot proceed.")
            return

        while not (self.house_done and self.player_done):
            if self.deck.is_empty():
                await self._report_exhausted("Deck depleted. Ending the game.")
                break

            if not self.house_done and self._house_plays():
                await self.adapter.render_table(self.snapshot())

            if not self.player_done and await self._player_plays():
                await self.adapter.render_table(self.snapshot())

    async def end(self) -> RoundResult:
        """
        Reveal the hole card, score the round and announce it.

        Returns:
            The round result that was sent to the adapter
        """
        self._require_started("end")
        if self.phase == GamePhase.RESOLVED:
            raise GamePhaseError("Round has already ended")

        if self.house_cards.cards:
            hole_card = self.house_cards.cards[0]
            if not hole_card.face_up:
                hole_card.face_up = True
                self.event_bus.emit(
                    EngineEventType.CARD_REVEALED,
                    {"recipient": HOUSE, "card": str(hole_card)},
                )

        result = build_result(
            self.house_cards,
            self.player_cards,
            self.rules,
            completed=self.house_done and self.player_done,
        )
        self.phase = GamePhase.RESOLVED

        logger.info(
            "Round over: house %d, player %d, %s",
            result.house_score,
            result.player_score,
            result.outcome.key,
        )
        self.event_bus.emit(EngineEventType.ROUND_ENDED, result.to_dict())
        await self.adapter.announce_outcome(result)
        return result

    async def play_round(self) -> RoundResult:
        """Run start(), play() and end() in order."""
        await self.start()
        await self.play()
        return await self.end()

    # Scoring and state

    def calculate_score(self, cards: Iterable[Card]) -> int:
        """Score a pile or list of cards under this round's rules."""
        return calculate_score(cards, self.rules.bust_limit)

    def house_score(self) -> int:
        return self.calculate_score(self.house_cards)

    def player_score(self) -> int:
        return self.calculate_score(self.player_cards)

    def snapshot(self) -> Dict[str, Any]:
        """
        Plain-data view of the table for the adapter.

        The house total is only computed over face-up cards so the hole card
        stays hidden.
        """
        return {
            "phase": self.phase.value,
            "deck_size": self.deck.size,
            "house": {
                "cards": [str(card) for card in self.house_cards],
                "visible_score": self.calculate_score(
                    card for card in self.house_cards if card.face_up
                ),
                "done": self.house_done,
            },
            "player": {
                "cards": [str(card) for card in self.player_cards],
                "score": self.player_score(),
                "done": self.player_done,
            },
        }

    # Turn logic

    async def _deal_initial_cards(self) -> None:
        if self.deck.size < INITIAL_DEAL_SIZE:
            await self._report_exhausted("Not enough cards to deal. Ending the game.")
            self.house_done = True
            self.player_done = True
            return

        hole_card = self.deck.remove_random()
        hole_card.face_up = False
        self._deal(self.house_cards, hole_card, HOUSE)
        self._deal(self.house_cards, self.deck.remove_random(), HOUSE)
        self._deal(self.player_cards, self.deck.remove_random(), PLAYER)
        self._deal(self.player_cards, self.deck.remove_random(), PLAYER)

    def _house_plays(self) -> bool:
        """
        Apply the house policy once.

        Returns:
            True if the house drew a card
        """
        score = self.house_score()
        if not self.deck.is_empty() and self.rules.should_dealer_draw(score):
            self._deal(self.house_cards, self.deck.remove_random(), HOUSE)
            score = self.house_score()
            self.event_bus.emit(
                EngineEventType.DEALER_ACTION, {"action": "draw", "score": score}
            )
            if self.rules.is_bust(score):
                self.event_bus.emit(
                    EngineEventType.HAND_BUSTED, {"recipient": HOUSE, "score": score}
                )
            return True

        self.house_done = True
        self.event_bus.emit(
            EngineEventType.DEALER_ACTION, {"action": "stand", "score": score}
        )
        return False

    async def _player_plays(self) -> bool:
        """
        Ask the player to draw or stand and apply the answer.

        Returns:
            True if the player drew a card
        """
        wants_card = await self.adapter.request_draw()

        if wants_card and not self.deck.is_empty():
            self._deal(self.player_cards, self.deck.remove_random(), PLAYER)
            score = self.player_score()
            self.event_bus.emit(
                EngineEventType.PLAYER_ACTION, {"action": "draw", "score": score}
            )
            if self.rules.is_bust(score):
                # A player bust ends the round for both sides
                self.player_done = True
                self.house_done = True
                logger.debug("Player busts with %d", score)
                self.event_bus.emit(
                    EngineEventType.HAND_BUSTED, {"recipient": PLAYER, "score": score}
                )
            return True

        self.player_done = True
        self.event_bus.emit(
            EngineEventType.PLAYER_ACTION,
            {"action": "stand", "score": self.player_score()},
        )
        return False

    def _deal(self, pile: CardPile, card: Card, recipient: str) -> None:
        pile.add(card)
        logger.debug("Dealt %r to %s", card, recipient)
        self.event_bus.emit(
            EngineEventType.CARD_DEALT,
            {"recipient": recipient, "card": str(card), "deck_size": self.deck.size},
        )

    async def _report_exhausted(self, message: str) -> None:
        logger.warning(message)
        self.event_bus.emit(
            EngineEventType.DECK_EXHAUSTED,
            {"phase": self.phase.value, "deck_size": self.deck.size},
        )
        await self.adapter.notify(message)

    def _require_started(self, operation: str) -> None:
        if not self._start_attempted:
            raise GamePhaseError(f"{operation}() called before start()")
