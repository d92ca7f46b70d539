"""
Room Preconditions
==================

A Room's precondition is the set of Symbols from other Rooms the player must
have collected to reach it. If a Room sits behind a locked door, its
precondition includes the key for that lock.

Because keys are always collected in rank order, the set collapses into a
single count, the ``key_level``: a condition with key_level ``n`` requires
every ordinary key with value ``0 .. n-1``. Holding key ``n-1`` implies
holding all lower keys.

The state of the dungeon's single switch is recorded alongside. A Room behind
a link that needs the switch in a particular state carries that state in its
precondition; ``SwitchState.EITHER`` means no switch requirement.

Semantics:
    satisfied(c)   <=>  player holds keys 0..c.key_level-1
                        AND (c.switch_state is EITHER or switch == c.switch_state)
    x.implies(y)   <=>  y is satisfied whenever x is

Conjunction (``and_`` / ``&``) always returns a new Condition. Conditions are
shared between rooms, so never mutate one in place.
"""

import logging
from enum import Enum
from typing import Optional, Union

from metazelda.core.definitions import SpecialSymbol, SymbolKind
from metazelda.core.symbol import Symbol, SWITCH_ON, SWITCH_OFF

logger = logging.getLogger(__name__)


class SwitchState(Enum):
    """Required state of the switch for a Condition to be satisfied."""
    EITHER = "either"   # The switch may be in any state
    OFF = "off"         # The switch must be off
    ON = "on"           # The switch must be on

    def to_symbol(self) -> Optional[Symbol]:
        """The lock symbol for this state, or None for EITHER."""
        if self is SwitchState.ON:
            return SWITCH_ON
        if self is SwitchState.OFF:
            return SWITCH_OFF
        return None

    def invert(self) -> 'SwitchState':
        """ON <-> OFF. EITHER stays EITHER."""
        if self is SwitchState.ON:
            return SwitchState.OFF
        if self is SwitchState.OFF:
            return SwitchState.ON
        return SwitchState.EITHER


ConditionSource = Union[None, Symbol, 'Condition', SwitchState]


class Condition:
    """
    Conjunctive precondition: a minimum key level plus a switch requirement.

    Construct with:
        Condition()                    # no requirement
        Condition(Symbol(3))           # keys A..D (key_level 4)
        Condition(SWITCH_ON)           # switch on, no keys
        Condition(SwitchState.OFF)     # switch off, no keys
        Condition(other)               # copy
    """

    __slots__ = ('_key_level', '_switch_state')

    def __init__(self, source: ConditionSource = None):
        self._key_level = 0
        self._switch_state = SwitchState.EITHER

        if source is None:
            return
        if isinstance(source, Condition):
            self._key_level = source._key_level
            self._switch_state = source._switch_state
        elif isinstance(source, SwitchState):
            self._switch_state = source
        elif isinstance(source, Symbol):
            self._set_from_symbol(source)
        else:
            raise TypeError(
                f"Condition expects a Symbol, Condition or SwitchState, got {type(source).__name__}"
            )

    def _set_from_symbol(self, symbol: Symbol):
        if symbol.value == SpecialSymbol.SWITCH_OFF:
            self._switch_state = SwitchState.OFF
        elif symbol.value == SpecialSymbol.SWITCH_ON:
            self._switch_state = SwitchState.ON
        elif symbol.kind is SymbolKind.KEY:
            self._key_level = symbol.value + 1
        # Markers (START/GOAL/BOSS/SWITCH item) carry no key requirement

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def key_level(self) -> int:
        return self._key_level

    @property
    def switch_state(self) -> SwitchState:
        return self._switch_state

    def top_symbol(self) -> Optional[Symbol]:
        """Highest-ranked key this condition requires, or None."""
        if self._key_level == 0:
            return None
        return Symbol(self._key_level - 1)

    # ------------------------------------------------------------------
    # Conjunction
    # ------------------------------------------------------------------

    def _add(self, other: 'Condition') -> 'Condition':
        # Only ever called on a fresh copy (see and_)
        if self._switch_state is SwitchState.EITHER:
            self._switch_state = other._switch_state
        elif (other._switch_state is not SwitchState.EITHER
              and other._switch_state is not self._switch_state):
            # Contradictory requirement: caller's responsibility, first state wins
            logger.debug(
                f"Conjoining switch {self._switch_state.name} with "
                f"{other._switch_state.name}; keeping {self._switch_state.name}"
            )
        self._key_level = max(self._key_level, other._key_level)
        return self

    def and_(self, other: Union[Symbol, 'Condition']) -> 'Condition':
        """
        Conjunction of this condition with a Symbol or another Condition.

        Returns a new Condition; the receiver is never modified. Key level is
        the max of both levels. If the receiver's switch state is EITHER it
        adopts the other's; otherwise the receiver's state is kept.

        Precondition: the two switch requirements are not contradictory
        (ON with OFF). This is not checked.
        """
        if isinstance(other, Symbol):
            other = Condition(other)
        return Condition(self)._add(other)

    def __and__(self, other):
        if not isinstance(other, (Symbol, Condition)):
            return NotImplemented
        return self.and_(other)

    # ------------------------------------------------------------------
    # Implication
    # ------------------------------------------------------------------

    def implies(self, other: Union[Symbol, 'Condition']) -> bool:
        """Whether ``other`` is guaranteed to be satisfied whenever this is."""
        if isinstance(other, Symbol):
            other = Condition(other)
        return (self._key_level >= other._key_level
                and (self._switch_state is other._switch_state
                     or other._switch_state is SwitchState.EITHER))

    def single_symbol_difference(self, other: 'Condition') -> Optional[Symbol]:
        """
        The Symbol that, added to ``other``, makes it equal to this condition.

        Returns None if the conditions are already equal or if more than one
        Symbol would be needed.

        When the switch states match, the difference is reported as the
        highest missing key without checking that only one key separates the
        two levels. Callers must only ask when at most one requirement differs.
        """
        if self == other:
            return None

        if self._switch_state is other._switch_state:
            return Symbol(max(self._key_level, other._key_level) - 1)

        if self._key_level != other._key_level:
            # Both a key and the switch differ
            return None

        if (self._switch_state is not SwitchState.EITHER
                and other._switch_state is not SwitchState.EITHER):
            return None

        non_either = (self._switch_state
                      if self._switch_state is not SwitchState.EITHER
                      else other._switch_state)
        return non_either.to_symbol()

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Condition):
            return NotImplemented
        return (self._key_level == other._key_level
                and self._switch_state is other._switch_state)

    def __hash__(self):
        return hash((self._key_level, self._switch_state))

    def __str__(self) -> str:
        parts = []
        top = self.top_symbol()
        if top is not None:
            parts.append(str(top))
        switch_symbol = self._switch_state.to_symbol()
        if switch_symbol is not None:
            parts.append(str(switch_symbol))
        return ",".join(parts)

    def __repr__(self) -> str:
        return f"Condition(key_level={self._key_level}, switch_state={self._switch_state.name})"
