"""
metazelda Core Module
=====================

Symbols, preconditions, edges and rooms of the lock-and-key puzzle.

Usage:
    from metazelda.core import Symbol, Condition, SwitchState, Room, Edge

    precond = Condition(Symbol(0)).and_(Symbol(2))
    precond.implies(Symbol(1))      # True: key C implies keys A and B
"""

from metazelda.core.definitions import (
    SpecialSymbol,
    SymbolKind,
    KEY_ALPHABET_SIZE,
)
from metazelda.core.geometry import Vec2I, Rect2I
from metazelda.core.symbol import (
    Symbol,
    symbols_equal,
    START,
    GOAL,
    BOSS,
    SWITCH_ON,
    SWITCH_OFF,
    SWITCH,
)
from metazelda.core.condition import Condition, SwitchState
from metazelda.core.edge import Edge
from metazelda.core.room import Room

__all__ = [
    # Definitions
    'SpecialSymbol',
    'SymbolKind',
    'KEY_ALPHABET_SIZE',
    # Geometry
    'Vec2I',
    'Rect2I',
    # Symbols
    'Symbol',
    'symbols_equal',
    'START',
    'GOAL',
    'BOSS',
    'SWITCH_ON',
    'SWITCH_OFF',
    'SWITCH',
    # Preconditions
    'Condition',
    'SwitchState',
    # Graph
    'Edge',
    'Room',
]
