"""
metazelda - Lock-and-Key Dungeon Graph Core
============================================

Precondition algebra and room/edge graph model for procedurally generated
lock-and-key dungeons.

Submodules:
- core: Symbols, Conditions, Edges, Rooms, grid geometry
- dungeon: Dungeon contract, in-memory implementation, networkx views
- config: DungeonConfig and logging setup

Generators populate a Dungeon; solvability checkers, renderers and game
engines query it.
"""

__version__ = "0.1.0"

from metazelda.config import DungeonConfig, setup_logging
from metazelda.core import (
    Symbol,
    SpecialSymbol,
    Condition,
    SwitchState,
    Edge,
    Room,
    Vec2I,
    Rect2I,
)
from metazelda.dungeon import BaseDungeon, Dungeon, to_networkx, validate_dungeon

__all__ = [
    'DungeonConfig',
    'setup_logging',
    'Symbol',
    'SpecialSymbol',
    'Condition',
    'SwitchState',
    'Edge',
    'Room',
    'Vec2I',
    'Rect2I',
    'BaseDungeon',
    'Dungeon',
    'to_networkx',
    'validate_dungeon',
]
