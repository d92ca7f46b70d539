"""
METAZELDA DEFINITIONS
=====================
Central constants for the lock-and-key puzzle model.

This file is the SINGLE SOURCE OF TRUTH for:
- Reserved symbol values (start/goal/boss/switch markers)
- Symbol classification (key vs marker vs switch state)
- Display names for symbols

The reserved integers are a stable contract: external tools (renderers,
engines, saved dungeons) may depend on them. Do NOT renumber.
"""

from typing import Dict
from enum import Enum, IntEnum


# ==========================================
# RESERVED SYMBOL VALUES (STABLE CONTRACT)
# ==========================================
# Ordinary keys are 0-based and non-negative.

class SpecialSymbol(IntEnum):
    """Reserved symbol values with special meanings."""
    START = -1          # Entry room marker
    GOAL = -2           # Goal room marker
    BOSS = -3           # Boss room marker
    SWITCH_ON = -4      # Lock: switch must be on
    SWITCH_OFF = -5     # Lock: switch must be off
    SWITCH = -6         # Item: the switch object placed in a room


class SymbolKind(Enum):
    """Classification of a symbol value."""
    KEY = "key"                     # Ordinary key, totally ordered by value
    MARKER = "marker"               # START/GOAL/BOSS/SWITCH item markers
    SWITCH_STATE = "switch_state"   # SWITCH_ON/SWITCH_OFF lock tokens
    UNKNOWN = "unknown"             # Negative value outside the reserved set


MARKER_VALUES = frozenset({
    SpecialSymbol.START,
    SpecialSymbol.GOAL,
    SpecialSymbol.BOSS,
    SpecialSymbol.SWITCH,
})

SWITCH_STATE_VALUES = frozenset({
    SpecialSymbol.SWITCH_ON,
    SpecialSymbol.SWITCH_OFF,
})

SPECIAL_NAMES: Dict[int, str] = {
    SpecialSymbol.START: "Start",
    SpecialSymbol.GOAL: "Goal",
    SpecialSymbol.BOSS: "Boss",
    SpecialSymbol.SWITCH_ON: "ON",
    SpecialSymbol.SWITCH_OFF: "OFF",
    SpecialSymbol.SWITCH: "SW",
}

# Keys 0..25 render as letters A..Z
KEY_ALPHABET_SIZE: int = 26


def classify_value(value: int) -> SymbolKind:
    """Return the SymbolKind for a raw symbol value."""
    if value >= 0:
        return SymbolKind.KEY
    if value in SWITCH_STATE_VALUES:
        return SymbolKind.SWITCH_STATE
    if value in MARKER_VALUES:
        return SymbolKind.MARKER
    return SymbolKind.UNKNOWN


def symbol_name(value: int) -> str:
    """Display name for a raw symbol value."""
    if value in SPECIAL_NAMES:
        return SPECIAL_NAMES[value]
    if 0 <= value < KEY_ALPHABET_SIZE:
        return chr(ord('A') + value)
    return str(value)
