"""
Directed links between rooms.

The guard on an Edge is a single Symbol rather than a full Condition so that
clients of the library never have to handle doors needing several symbols.
Internal reasoning about what a room requires uses Conditions instead.
"""

from typing import Optional

from metazelda.core.symbol import Symbol, symbols_equal


class Edge:
    """
    A link from one room to the room with id ``target_room_id``.

    An unconditional edge (``symbol is None``) may always be used. Otherwise
    the player must have collected ``symbol`` before passing.
    """

    __slots__ = ('_target_room_id', 'symbol')

    def __init__(self, target_room_id: int, symbol: Optional[Symbol] = None):
        self._target_room_id = int(target_room_id)
        self.symbol = symbol

    @property
    def target_room_id(self) -> int:
        return self._target_room_id

    def has_symbol(self) -> bool:
        """Whether the edge is conditional."""
        return self.symbol is not None

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._target_room_id == other._target_room_id
                and symbols_equal(self.symbol, other.symbol))

    # Edges are mutable (symbol can be reassigned)
    __hash__ = None

    def __repr__(self) -> str:
        guard = str(self.symbol) if self.symbol is not None else "-"
        return f"Edge(->{self._target_room_id}, {guard})"
