"""
Presentation adapters for the solojack engine.

This package provides adapters that translate between the core game engine
and a concrete surface (console, automated simulation).
"""

from solojack.adapters.base import TableAdapter
from solojack.adapters.cli import CLIAdapter
from solojack.adapters.dummy import DummyAdapter, always_stand, hit_below

__all__ = ["TableAdapter", "CLIAdapter", "DummyAdapter", "always_stand", "hit_below"]
