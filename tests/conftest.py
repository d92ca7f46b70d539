"""Shared fixtures: a small generated-looking dungeon."""

import pytest

from metazelda.core.condition import Condition
from metazelda.core.room import Room
from metazelda.core.symbol import Symbol, START, GOAL, BOSS, SWITCH
from metazelda.dungeon.dungeon import Dungeon


@pytest.fixture
def small_dungeon():
    """
    Five rooms in a line, grown as a tree from the entry:

        (0,0) start -> (1,0) key A -> (2,0) [A] switch -> (3,0) [A] boss -> (3,1) goal
    """
    dungeon = Dungeon()
    entry = Room(0, (0, 0), item=START)
    key_room = Room(1, (1, 0), parent=entry, item=Symbol(0))
    switch_room = Room(2, (2, 0), parent=key_room, item=SWITCH, precond=Condition(Symbol(0)))
    boss_room = Room(3, (3, 0), parent=switch_room, item=BOSS, precond=Condition(Symbol(0)))
    goal_room = Room(4, (3, 1), parent=boss_room, item=GOAL, precond=Condition(Symbol(0)))

    rooms = [entry, key_room, switch_room, boss_room, goal_room]
    for parent, child in zip(rooms, rooms[1:]):
        parent.add_child(child)
    for room in rooms:
        dungeon.add(room)

    dungeon.link(entry, key_room)
    dungeon.link(key_room, switch_room, Symbol(0))
    dungeon.link(switch_room, boss_room)
    dungeon.link(boss_room, goal_room)
    return dungeon
