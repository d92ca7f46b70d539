"""
Rooms: nodes of the dungeon graph.

A Room contains:
- an item (Symbol) the player may collect by passing through
- a precondition (Condition) that must hold to enter
- an intensity in [0.0, 1.0], the relative difficulty of the room
- outgoing Edges, at most one per target room
- its generation lineage: the parent that spawned it while the initial room
  tree was built, and the children it spawned. Lineage is recorded before any
  extra links are added, so it is a tree while the edge graph generally is not.

Parent and children are stored as room ids, resolved through the owning
dungeon's room table. No Room holds a reference to another Room.
"""

from numbers import Integral
from typing import FrozenSet, Iterable, List, Optional, Union

import numpy as np

from metazelda.core.condition import Condition
from metazelda.core.edge import Edge
from metazelda.core.geometry import PointLike, Vec2I, to_vec
from metazelda.core.symbol import Symbol

CoordsLike = Union[PointLike, Iterable[PointLike]]


def _trunc_div(total: int, count: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(total) // count
    return q if total >= 0 else -q


def _normalize_coords(coords: CoordsLike) -> FrozenSet[Vec2I]:
    if isinstance(coords, Vec2I):
        return frozenset([coords])
    if (isinstance(coords, tuple) and len(coords) == 2
            and all(isinstance(c, Integral) for c in coords)):
        return frozenset([to_vec(coords)])
    return frozenset(to_vec(p) for p in coords)


class Room:
    """A single space within the dungeon."""

    def __init__(
        self,
        id: int,
        coords: CoordsLike,
        parent: Optional['Room'] = None,
        item: Optional[Symbol] = None,
        precond: Optional[Condition] = None,
    ):
        """
        Args:
            id: Unique id of the room within its dungeon
            coords: A single grid cell or an iterable of cells (non-empty)
            parent: Parent in the generation tree, or None for the entry room
            item: Symbol placed in the room, or None
            precond: Precondition to enter; defaults to no requirement
        """
        self._id = int(id)
        self._coords = _normalize_coords(coords)
        if not self._coords:
            raise ValueError(f"Room {self._id} must occupy at least one cell")

        self.item = item
        self.precond = precond if precond is not None else Condition()
        self._intensity = 0.0
        self._edges: List[Edge] = []
        self._parent_id: Optional[int] = parent.id if parent is not None else None
        self._child_ids: List[int] = []

        # Cached: coords is frozen so the centroid cannot go stale
        cells = np.array([c.as_tuple() for c in self._coords], dtype=np.int64)
        sx, sy = cells.sum(axis=0)
        n = len(self._coords)
        self._center = Vec2I(_trunc_div(int(sx), n), _trunc_div(int(sy), n))

    # ------------------------------------------------------------------
    # Identity / geometry
    # ------------------------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def coords(self) -> FrozenSet[Vec2I]:
        return self._coords

    @property
    def center(self) -> Vec2I:
        """Integer-averaged centroid of ``coords`` (rounded toward zero)."""
        return self._center

    # ------------------------------------------------------------------
    # Mutable properties
    # ------------------------------------------------------------------

    @property
    def intensity(self) -> float:
        return self._intensity

    @intensity.setter
    def intensity(self, value: float):
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Room intensity must be in [0.0, 1.0], got {value}")
        self._intensity = value

    def set_intensity(self, value: float):
        self.intensity = value

    def set_item(self, item: Optional[Symbol]):
        self.item = item

    def set_precond(self, precond: Condition):
        self.precond = precond

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    @property
    def edges(self) -> List[Edge]:
        return self._edges

    def get_edge(self, target_room_id: int) -> Optional[Edge]:
        """The edge to ``target_room_id``, or None if there is no such link."""
        for edge in self._edges:
            if edge.target_room_id == target_room_id:
                return edge
        return None

    def set_edge(self, target_room_id: int, symbol: Optional[Symbol] = None) -> Edge:
        """
        Create or update the edge to ``target_room_id``.

        If an edge already exists its guard is replaced by ``symbol``,
        otherwise a new edge is appended. Returns the resulting edge.
        """
        edge = self.get_edge(target_room_id)
        if edge is not None:
            edge.symbol = symbol
        else:
            edge = Edge(target_room_id, symbol)
            self._edges.append(edge)
        return edge

    def link_count(self) -> int:
        """Number of rooms this room links to."""
        return len(self._edges)

    # ------------------------------------------------------------------
    # Item predicates
    # ------------------------------------------------------------------

    def is_start(self) -> bool:
        return self.item is not None and self.item.is_start()

    def is_goal(self) -> bool:
        return self.item is not None and self.item.is_goal()

    def is_boss(self) -> bool:
        return self.item is not None and self.item.is_boss()

    def is_switch(self) -> bool:
        return self.item is not None and self.item.is_switch()

    # ------------------------------------------------------------------
    # Generation lineage
    # ------------------------------------------------------------------

    @property
    def parent_id(self) -> Optional[int]:
        return self._parent_id

    def set_parent(self, parent: Optional['Room']):
        self._parent_id = parent.id if parent is not None else None

    @property
    def child_ids(self) -> List[int]:
        return self._child_ids

    def add_child(self, child: 'Room'):
        """
        Register ``child`` as spawned by this room.

        Does not set the child's parent; generators set the parent first and
        register the child afterwards.
        """
        self._child_ids.append(child.id)

    def __str__(self) -> str:
        cells = ", ".join(str(c) for c in sorted(self._coords))
        return f"Room({cells})"

    def __repr__(self) -> str:
        return f"<Room id={self._id} center={self._center} item={self.item!r} precond={self.precond!r}>"
