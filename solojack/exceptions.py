"""Exception types raised by the solojack package."""


class SolojackError(Exception):
    """Base class for all solojack errors."""


class EmptyPileError(SolojackError):
    """Raised when a card is drawn from a pile that has none left."""


class GamePhaseError(SolojackError):
    """Raised when a round is driven out of order, e.g. ending before starting."""
