"""Dungeon contract, in-memory implementation and graph utilities."""

from metazelda.dungeon.base import BaseDungeon
from metazelda.dungeon.dungeon import Dungeon
from metazelda.dungeon.graph_utils import (
    to_networkx,
    lineage_graph,
    validate_dungeon,
)

__all__ = [
    'BaseDungeon',
    'Dungeon',
    'to_networkx',
    'lineage_graph',
    'validate_dungeon',
]
