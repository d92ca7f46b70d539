"""
Tests for networkx export and dungeon validation.
"""

import logging

import networkx as nx

from metazelda.config import setup_logging
from metazelda.core.room import Room
from metazelda.core.symbol import Symbol, START
from metazelda.dungeon.dungeon import Dungeon
from metazelda.dungeon.graph_utils import lineage_graph, to_networkx, validate_dungeon


class TestExport:
    """Link graph and lineage tree."""

    def test_link_graph(self, small_dungeon):
        G = to_networkx(small_dungeon)
        assert isinstance(G, nx.DiGraph)
        assert G.number_of_nodes() == 5
        # Four two-way links
        assert G.number_of_edges() == 8
        assert G.edges[1, 2]['symbol'] == Symbol(0)
        assert G.edges[0, 1]['symbol'] is None
        assert G.nodes[0]['item'] == START
        assert G.nodes[4]['center'] == (3, 1)

    def test_link_graph_reachability(self, small_dungeon):
        G = to_networkx(small_dungeon)
        assert nx.has_path(G, 0, 4)
        open_only = nx.subgraph_view(G, filter_edge=lambda u, v: G.edges[u, v]['symbol'] is None)
        assert not nx.has_path(open_only, 0, 4)

    def test_dangling_edges_skipped(self):
        dungeon = Dungeon()
        room = Room(0, (0, 0))
        room.set_edge(7)
        dungeon.add(room)
        G = to_networkx(dungeon)
        assert G.number_of_edges() == 0

    def test_lineage_is_tree(self, small_dungeon):
        tree = lineage_graph(small_dungeon)
        assert nx.is_arborescence(tree)
        assert list(nx.topological_sort(tree)) == [0, 1, 2, 3, 4]


class TestValidation:
    """validate_dungeon error reporting."""

    def test_valid_dungeon(self, small_dungeon):
        is_valid, errors = validate_dungeon(small_dungeon)
        assert is_valid, errors
        assert errors == []

    def test_empty_dungeon_is_valid(self):
        assert validate_dungeon(Dungeon()) == (True, [])

    def test_duplicate_special_rooms(self, small_dungeon):
        small_dungeon.add(Room(9, (9, 9), item=START))
        is_valid, errors = validate_dungeon(small_dungeon)
        assert not is_valid
        assert any("Multiple start rooms" in e for e in errors)

    def test_bad_edges(self):
        dungeon = Dungeon()
        room = Room(0, (0, 0))
        room.set_edge(0)
        room.set_edge(4)
        room.edges.append(room.edges[-1])
        dungeon.add(room)
        is_valid, errors = validate_dungeon(dungeon)
        assert not is_valid
        assert any("links to itself" in e for e in errors)
        assert any("unknown room 4" in e for e in errors)
        assert any("duplicate edges" in e for e in errors)

    def test_inconsistent_lineage(self):
        dungeon = Dungeon()
        parent = Room(0, (0, 0))
        child = Room(1, (1, 0), parent=parent)
        # Child never registered with its parent
        dungeon.add(parent)
        dungeon.add(child)
        is_valid, errors = validate_dungeon(dungeon)
        assert not is_valid
        assert any("not registered as a child" in e for e in errors)

    def test_lineage_cycle(self):
        dungeon = Dungeon()
        a, b = Room(0, (0, 0)), Room(1, (1, 0))
        a.set_parent(b)
        b.set_parent(a)
        a.add_child(b)
        b.add_child(a)
        dungeon.add(a)
        dungeon.add(b)
        is_valid, errors = validate_dungeon(dungeon)
        assert not is_valid
        assert any("cycle" in e for e in errors)

    def test_validation_logs_summary(self, small_dungeon, caplog):
        with caplog.at_level(logging.INFO, logger="metazelda"):
            validate_dungeon(small_dungeon)
        assert "validation passed (5 rooms)" in caplog.text


class TestLoggingSetup:
    """setup_logging accepts names and levels."""

    def test_accepts_level_name(self):
        setup_logging("debug")
        setup_logging(logging.WARNING)
