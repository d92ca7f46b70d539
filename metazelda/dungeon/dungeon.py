"""
In-memory dungeon: the reference implementation of ``BaseDungeon``.

Rooms are kept in an id-keyed table plus a cell index (Vec2I -> room id)
used to enforce single occupancy of every grid cell.
"""

import logging
from typing import Dict, List, Optional

from metazelda.config import DungeonConfig
from metazelda.core.geometry import PointLike, Vec2I, to_vec
from metazelda.core.room import Room
from metazelda.dungeon.base import BaseDungeon

logger = logging.getLogger(__name__)


class Dungeon(BaseDungeon):
    """
    Room table keyed by id with coordinate-based overwrite.

    Usage:
        dungeon = Dungeon()
        entry = Room(0, (0, 0), item=START)
        hall = Room(1, (1, 0), parent=entry, precond=Condition(Symbol(0)))
        entry.add_child(hall)
        dungeon.add(entry)
        dungeon.add(hall)
        dungeon.link(entry, hall, Symbol(0))
    """

    def __init__(self, config: Optional[DungeonConfig] = None):
        super().__init__(config)
        self._rooms: Dict[int, Room] = {}
        self._cells: Dict[Vec2I, int] = {}

    def get_rooms(self) -> List[Room]:
        return list(self._rooms.values())

    def room_count(self) -> int:
        return len(self._rooms)

    def get(self, room_id: int) -> Optional[Room]:
        return self._rooms.get(room_id)

    def get_room_at(self, xy: PointLike) -> Optional[Room]:
        """The room occupying grid cell ``xy``, or None."""
        room_id = self._cells.get(to_vec(xy))
        return self._rooms.get(room_id) if room_id is not None else None

    def add(self, room: Room):
        evicted = {self._cells[xy] for xy in room.coords if xy in self._cells}
        evicted.discard(room.id)

        previous = self._rooms.get(room.id)
        if previous is not None and previous is not room and not (previous.coords & room.coords):
            message = f"Room id {room.id} already used by a room at {previous}"
            if self.config.strict:
                raise RuntimeError(message)
            logger.warning(f"{message}; replacing it")

        if previous is not None:
            self._remove(previous)

        for room_id in sorted(evicted):
            old = self._rooms[room_id]
            if self.config.log_overwrites:
                logger.warning(f"Room {room.id} overwrites room {room_id} at {old}")
            self._remove(old)

        self._rooms[room.id] = room
        for xy in room.coords:
            self._cells[xy] = room.id
        logger.debug(f"Added room {room.id} centered at {room.center}")

    def _remove(self, room: Room):
        del self._rooms[room.id]
        for xy in room.coords:
            if self._cells.get(xy) == room.id:
                del self._cells[xy]

    # ==========================================
    # LINEAGE RESOLUTION
    # ==========================================

    def parent_of(self, room: Room) -> Optional[Room]:
        """Generation-time parent of ``room``, or None for the root."""
        if room.parent_id is None:
            return None
        return self.get(room.parent_id)

    def children_of(self, room: Room) -> List[Room]:
        """Rooms ``room`` spawned during generation, in registration order."""
        children = []
        for child_id in room.child_ids:
            child = self.get(child_id)
            if child is not None:
                children.append(child)
        return children
