"""
solojack: single-player console Blackjack against an automated house.
"""

__version__ = "0.1.0"
