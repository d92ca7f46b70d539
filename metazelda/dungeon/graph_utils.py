"""
Dungeon Graph Utilities
=======================

NetworkX views of a dungeon and consistency validation.

This module provides:
- Link graph export (rooms as nodes, Edges as directed edges)
- Lineage tree export (generation-time parent -> child)
- Dungeon consistency validation for generator output

Usage:
    from metazelda.dungeon.graph_utils import to_networkx, validate_dungeon

    G = to_networkx(dungeon)
    is_valid, errors = validate_dungeon(dungeon)
    if not is_valid:
        print(f"Validation failed: {errors}")
"""

import logging
from typing import List, Tuple

import networkx as nx

from metazelda.core.room import Room
from metazelda.dungeon.base import BaseDungeon

logger = logging.getLogger(__name__)


# ==========================================
# GRAPH EXPORT
# ==========================================

def to_networkx(dungeon: BaseDungeon) -> nx.DiGraph:
    """
    Export the link graph.

    Node attributes: ``item``, ``precond``, ``intensity``, ``center``.
    Edge attributes: ``symbol`` (None for unconditional links).
    Edges whose target is not in the dungeon are skipped.
    """
    G = nx.DiGraph()
    for room in dungeon.get_rooms():
        G.add_node(
            room.id,
            item=room.item,
            precond=room.precond,
            intensity=room.intensity,
            center=room.center.as_tuple(),
        )
    for room in dungeon.get_rooms():
        for edge in room.edges:
            if edge.target_room_id not in G:
                logger.debug(f"Skipping dangling edge {room.id} -> {edge.target_room_id}")
                continue
            G.add_edge(room.id, edge.target_room_id, symbol=edge.symbol)
    return G


def lineage_graph(dungeon: BaseDungeon) -> nx.DiGraph:
    """Parent -> child tree recorded during generation (parent ids only)."""
    G = nx.DiGraph()
    for room in dungeon.get_rooms():
        G.add_node(room.id)
    for room in dungeon.get_rooms():
        if room.parent_id is not None and room.parent_id in G:
            G.add_edge(room.parent_id, room.id)
    return G


# ==========================================
# VALIDATION
# ==========================================

def _check_special_rooms(dungeon: BaseDungeon) -> List[str]:
    errors = []
    checks = [
        ('start', Room.is_start),
        ('goal', Room.is_goal),
        ('boss', Room.is_boss),
        ('switch', Room.is_switch),
    ]
    for label, predicate in checks:
        ids = sorted(room.id for room in dungeon.get_rooms() if predicate(room))
        if len(ids) > 1:
            errors.append(f"Multiple {label} rooms: {ids}")
    return errors


def _check_edges(dungeon: BaseDungeon) -> List[str]:
    errors = []
    for room in dungeon.get_rooms():
        seen = set()
        for edge in room.edges:
            target = edge.target_room_id
            if target == room.id:
                errors.append(f"Room {room.id} links to itself")
            if target in seen:
                errors.append(f"Room {room.id} has duplicate edges to {target}")
            seen.add(target)
            if dungeon.get(target) is None:
                errors.append(f"Room {room.id} links to unknown room {target}")
    return errors


def _check_lineage(dungeon: BaseDungeon) -> List[str]:
    errors = []
    for room in dungeon.get_rooms():
        if room.parent_id is not None:
            parent = dungeon.get(room.parent_id)
            if parent is None:
                errors.append(f"Room {room.id} has unknown parent {room.parent_id}")
            elif room.id not in parent.child_ids:
                errors.append(f"Room {room.id} is not registered as a child of {parent.id}")
        for child_id in room.child_ids:
            child = dungeon.get(child_id)
            if child is None:
                errors.append(f"Room {room.id} has unknown child {child_id}")
            elif child.parent_id != room.id:
                errors.append(f"Room {child_id} is a child of {room.id} but its parent is {child.parent_id}")

    tree = lineage_graph(dungeon)
    if tree.number_of_nodes() > 0 and not nx.is_forest(tree):
        cycle = nx.find_cycle(tree)
        errors.append(f"Lineage contains a cycle: {cycle}")
    return errors


def _check_intensity(dungeon: BaseDungeon) -> List[str]:
    return [
        f"Room {room.id} intensity {room.intensity} outside [0, 1]"
        for room in dungeon.get_rooms()
        if not 0.0 <= room.intensity <= 1.0
    ]


def validate_dungeon(dungeon: BaseDungeon) -> Tuple[bool, List[str]]:
    """
    Check a populated dungeon for generator faults.

    Checks:
    1. At most one start, goal, boss and switch room
    2. Every edge targets a known room, no self-links, no duplicate targets
    3. Parent/child ids agree and the lineage forms a forest
    4. Intensities lie in [0, 1]

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors: List[str] = []
    errors.extend(_check_special_rooms(dungeon))
    errors.extend(_check_edges(dungeon))
    errors.extend(_check_lineage(dungeon))
    errors.extend(_check_intensity(dungeon))

    if errors:
        logger.info(f"Dungeon validation failed with {len(errors)} errors")
        for error in errors:
            logger.debug(f"  {error}")
    else:
        logger.info(f"Dungeon validation passed ({dungeon.room_count()} rooms)")

    return len(errors) == 0, errors
