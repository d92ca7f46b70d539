"""
Symbols: keys, locks and special markers of the lock-and-key puzzle.

Each Symbol has an integer ``value``; two Symbols are equal iff their
values are equal. Ordinary keys (value >= 0) are totally ordered by value.
Reserved negative values mark the start/goal/boss rooms, the switch item,
and the two switch-state locks (see ``definitions.SpecialSymbol``).

START/GOAL/BOSS serve no purpose in the puzzle other than telling the client
where to place special game objects. SWITCH_ON/SWITCH_OFF never appear as room
items, only as Edge guards and inside Conditions.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from metazelda.core.definitions import SpecialSymbol, SymbolKind, classify_value, symbol_name


@total_ordering
@dataclass(frozen=True, eq=False)
class Symbol:
    """A single key, lock or special marker."""
    value: int

    def __post_init__(self):
        # Normalise SpecialSymbol members and numpy ints to a plain int
        object.__setattr__(self, 'value', int(self.value))

    @classmethod
    def key(cls, rank: int) -> 'Symbol':
        """Ordinary key of the given 0-based rank."""
        if rank < 0:
            raise ValueError(f"Key rank must be non-negative, got {rank}")
        return cls(rank)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __lt__(self, other):
        # Only ordinary keys have a rank order
        if not isinstance(other, Symbol) or not (self.is_key() and other.is_key()):
            return NotImplemented
        return self.value < other.value

    @property
    def kind(self) -> SymbolKind:
        return classify_value(self.value)

    @property
    def name(self) -> str:
        return symbol_name(self.value)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Symbol({self.name})"

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_key(self) -> bool:
        return self.value >= 0

    def is_start(self) -> bool:
        return self.value == SpecialSymbol.START

    def is_goal(self) -> bool:
        return self.value == SpecialSymbol.GOAL

    def is_boss(self) -> bool:
        return self.value == SpecialSymbol.BOSS

    def is_switch(self) -> bool:
        """Whether this is the switch item (not a switch-state lock)."""
        return self.value == SpecialSymbol.SWITCH

    def is_switch_state(self) -> bool:
        """Whether this is one of the SWITCH_ON / SWITCH_OFF locks."""
        return self.value in (SpecialSymbol.SWITCH_ON, SpecialSymbol.SWITCH_OFF)


def symbols_equal(a: Optional[Symbol], b: Optional[Symbol]) -> bool:
    """
    Null-tolerant symbol comparison.

    Both absent -> True, exactly one absent -> False, otherwise value equality.
    """
    if a is None or b is None:
        return a is None and b is None
    return a == b


START = Symbol(SpecialSymbol.START)
GOAL = Symbol(SpecialSymbol.GOAL)
BOSS = Symbol(SpecialSymbol.BOSS)
SWITCH_ON = Symbol(SpecialSymbol.SWITCH_ON)
SWITCH_OFF = Symbol(SpecialSymbol.SWITCH_OFF)
SWITCH = Symbol(SpecialSymbol.SWITCH)
