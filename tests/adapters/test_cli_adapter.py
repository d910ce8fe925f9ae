"""
Tests for the CLIAdapter console surface, driven through TestIOInterface.
"""

import pytest

from solojack.adapters.cli import (
    DRAW_PROMPT,
    INVALID_DRAW_INPUT,
    THANKS,
    CLIAdapter,
    parse_yes_no,
)
from solojack.common.card import Card, Rank, Suit
from solojack.common.io_interface import ConsoleIOInterface, TestIOInterface
from solojack.engine.game import BlackjackGame
from solojack.engine.rules import build_result


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("Y", True), (" n ", False), ("N", False), ("yes", None), ("", None)],
)
def test_parse_yes_no(answer, expected):
    assert parse_yes_no(answer) is expected


def test_defaults_to_console():
    assert isinstance(CLIAdapter().io_interface, ConsoleIOInterface)


@pytest.mark.asyncio
async def test_request_draw_reprompts_until_valid():
    io = TestIOInterface(["maybe", "", "Y"])
    adapter = CLIAdapter(io)

    assert await adapter.request_draw() is True

    assert io.sent_messages == [DRAW_PROMPT, INVALID_DRAW_INPUT, INVALID_DRAW_INPUT]
    assert len(io.prompts) == 3


@pytest.mark.asyncio
async def test_request_draw_stand():
    io = TestIOInterface(["n"])
    assert await CLIAdapter(io).request_draw() is False


@pytest.mark.asyncio
async def test_render_table_shows_hidden_card():
    io = TestIOInterface()
    adapter = CLIAdapter(io)

    await adapter.render_table(
        {
            "house": {"cards": ["?", "7 of Clubs"]},
            "player": {"cards": ["10 of Hearts", "9 of Spades"]},
        }
    )

    assert "House Holds:" in io.sent_messages[0]
    assert io.sent_messages[0].endswith("\n\n?\n7 of Clubs\n")
    assert "You Hold:" in io.sent_messages[1]
    assert io.sent_messages[1].endswith("\n\n10 of Hearts\n9 of Spades\n")


@pytest.mark.asyncio
async def test_announce_player_win():
    io = TestIOInterface()
    result = build_result(
        [Card(Rank.TEN, Suit.CLUBS), Card(Rank.EIGHT, Suit.CLUBS)],
        [Card(Rank.KING, Suit.HEARTS), Card(Rank.QUEEN, Suit.HEARTS)],
    )

    await CLIAdapter(io).announce_outcome(result)

    transcript = io.transcript
    assert "10 of Clubs\n8 of Clubs" in transcript
    assert "House Score: 18, Your Score: 20" in transcript
    assert "| You Win! |" in transcript
    assert "(Your Score is Higher)" in transcript
    assert io.sent_messages[-1] == THANKS


@pytest.mark.asyncio
async def test_announce_player_bust():
    io = TestIOInterface()
    result = build_result(
        [Card(Rank.TEN, Suit.CLUBS), Card(Rank.SEVEN, Suit.CLUBS)],
        [
            Card(Rank.KING, Suit.HEARTS),
            Card(Rank.SIX, Suit.HEARTS),
            Card(Rank.NINE, Suit.HEARTS),
        ],
    )

    await CLIAdapter(io).announce_outcome(result)

    assert "| House Wins! |" in io.transcript
    assert "(You Busted)" in io.transcript


@pytest.mark.asyncio
async def test_announce_tie():
    io = TestIOInterface()
    result = build_result(
        [Card(Rank.TEN, Suit.CLUBS), Card(Rank.NINE, Suit.CLUBS)],
        [Card(Rank.KING, Suit.HEARTS), Card(Rank.NINE, Suit.HEARTS)],
    )

    await CLIAdapter(io).announce_outcome(result)

    assert "| It's a Tie |" in io.transcript
    assert "(Both Scores are Equal)" in io.transcript


@pytest.mark.asyncio
async def test_notify():
    io = TestIOInterface()
    await CLIAdapter(io).notify("Deck depleted. Ending the game.")
    assert io.sent_messages == ["Deck depleted. Ending the game."]


@pytest.mark.asyncio
async def test_full_round_through_console_adapter(stacked_deck):
    io = TestIOInterface(["x", "n"])
    adapter = CLIAdapter(io)
    deck = stacked_deck(
        Card(Rank.TEN, Suit.CLUBS),
        Card(Rank.SEVEN, Suit.CLUBS),
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.HEARTS),
        Card(Rank.TWO, Suit.DIAMONDS),
    )

    async with adapter.session():
        result = await BlackjackGame(adapter, deck=deck).play_round()

    assert result.player_score == 20
    transcript = io.transcript
    assert transcript.count(INVALID_DRAW_INPUT) == 1
    # The hole card is hidden at the deal and revealed at the end
    assert "\n\n?\n7 of Clubs\n" in transcript
    assert "\n\n10 of Clubs\n7 of Clubs\n" in transcript
    assert "(Your Score is Higher)" in transcript
