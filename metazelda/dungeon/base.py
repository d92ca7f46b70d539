"""
Dungeon Contract
================

``BaseDungeon`` is the graph-level contract that a generator populates and
that solvability checkers, renderers and game engines query. It owns the room
table (id -> Room) and every Room, Edge and Symbol in the puzzle.

Subclasses provide storage (``get_rooms``, ``get``, ``add``). Linking,
adjacency queries, special-room lookup and extent bounds are built on top of
that storage here.

Invariants:
- room ids in the table are unique and stable for the dungeon's lifetime
- ``rooms_are_linked`` is symmetric regardless of edge direction
- at most one room each holds START, GOAL, BOSS and SWITCH
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Collection, Iterator, List, Optional

from metazelda.config import DungeonConfig
from metazelda.core.geometry import Rect2I
from metazelda.core.room import Room
from metazelda.core.symbol import Symbol

logger = logging.getLogger(__name__)


class BaseDungeon(ABC):
    """Room table plus the links between rooms."""

    def __init__(self, config: Optional[DungeonConfig] = None):
        self.config = config or DungeonConfig()

    # ==========================================
    # STORAGE (subclass responsibility)
    # ==========================================

    @abstractmethod
    def get_rooms(self) -> Collection[Room]:
        """All rooms in the dungeon."""

    @abstractmethod
    def get(self, room_id: int) -> Optional[Room]:
        """The room with ``room_id``, or None if unknown."""

    @abstractmethod
    def add(self, room: Room):
        """
        Insert ``room``.

        Any existing room whose coordinates collide with ``room``'s
        coordinates is overwritten. Spatial occupancy decides the overwrite,
        not the id.
        """

    def room_count(self) -> int:
        return len(self.get_rooms())

    def __len__(self) -> int:
        return self.room_count()

    def __iter__(self) -> Iterator[Room]:
        return iter(self.get_rooms())

    def __contains__(self, room) -> bool:
        room_id = room.id if isinstance(room, Room) else room
        return self.get(room_id) is not None

    # ==========================================
    # LINKING
    # ==========================================

    def link_one_way(self, room1: Room, room2: Room, symbol: Optional[Symbol] = None):
        """Add (or re-guard) the single edge room1 -> room2."""
        room1.set_edge(room2.id, symbol)
        logger.debug(f"Linked {room1.id} -> {room2.id} ({symbol if symbol is not None else 'open'})")

    def link(self, room1: Room, room2: Room, symbol: Optional[Symbol] = None):
        """Add edges in both directions with the same guard."""
        self.link_one_way(room1, room2, symbol)
        self.link_one_way(room2, room1, symbol)

    def rooms_are_linked(self, room1: Room, room2: Room) -> bool:
        """True if an edge exists in either direction."""
        return (room1.get_edge(room2.id) is not None
                or room2.get_edge(room1.id) is not None)

    # ==========================================
    # SPECIAL ROOMS
    # ==========================================

    def _find_unique(self, predicate: Callable[[Room], bool], label: str) -> Optional[Room]:
        matches: List[Room] = sorted(
            (room for room in self.get_rooms() if predicate(room)),
            key=lambda r: r.id,
        )
        if len(matches) > 1:
            ids = [room.id for room in matches]
            message = f"Dungeon has {len(matches)} {label} rooms: {ids}"
            if self.config.strict:
                raise RuntimeError(message)
            logger.warning(f"{message}; using room {ids[0]}")
        return matches[0] if matches else None

    def find_start(self) -> Optional[Room]:
        return self._find_unique(Room.is_start, "start")

    def find_boss(self) -> Optional[Room]:
        return self._find_unique(Room.is_boss, "boss")

    def find_goal(self) -> Optional[Room]:
        return self._find_unique(Room.is_goal, "goal")

    def find_switch(self) -> Optional[Room]:
        return self._find_unique(Room.is_switch, "switch")

    # ==========================================
    # GEOMETRY
    # ==========================================

    def get_extent_bounds(self) -> Optional[Rect2I]:
        """
        Bounding rectangle over every room's coordinates.

        Both extreme cells are inside the rectangle. Returns None when the
        dungeon has no rooms.
        """
        cells = [xy for room in self.get_rooms() for xy in room.coords]
        if not cells:
            return None
        return Rect2I.bounding(cells)
