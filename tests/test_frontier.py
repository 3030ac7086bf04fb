import math

import pytest

from shortpath.domain.errors import ConfigurationError
from shortpath.graph.frontier import HeapFrontier, SortedFrontier, make_frontier

FRONTIERS = [HeapFrontier, SortedFrontier]


def drain(frontier):
    entries = []
    while (entry := frontier.extract_min()) is not None:
        entries.append(entry)
    return entries


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_extract_min_returns_lowest_priority(frontier_cls):
    frontier = frontier_cls()
    frontier.insert("A", 5)
    frontier.insert("B", 1)
    frontier.insert("C", math.inf)
    frontier.insert("D", 3)

    assert drain(frontier) == [("B", 1), ("D", 3), ("A", 5), ("C", math.inf)]


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_empty_frontier(frontier_cls):
    frontier = frontier_cls()

    assert frontier.extract_min() is None
    assert len(frontier) == 0
    assert not frontier


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_ties_are_first_in_first_out(frontier_cls):
    frontier = frontier_cls()
    for node in ["C", "A", "B"]:
        frontier.insert(node, 2)

    assert [node for node, _ in drain(frontier)] == ["C", "A", "B"]


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_decrease_priority_moves_node_forward(frontier_cls):
    frontier = frontier_cls()
    frontier.insert("A", 1)
    frontier.insert("B", math.inf)

    frontier.decrease_priority("B", 0)

    assert frontier.extract_min() == ("B", 0)
    assert frontier.extract_min() == ("A", 1)


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_decrease_priority_inserts_missing_node(frontier_cls):
    frontier = frontier_cls()

    frontier.decrease_priority("A", 4)

    assert "A" in frontier
    assert frontier.extract_min() == ("A", 4)


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_decrease_priority_refuses_increase(frontier_cls):
    frontier = frontier_cls()
    frontier.insert("A", 2)

    with pytest.raises(ValueError):
        frontier.decrease_priority("A", 3)


@pytest.mark.parametrize("frontier_cls", FRONTIERS)
def test_negative_priority_rejected(frontier_cls):
    with pytest.raises(ValueError):
        frontier_cls().insert("A", -1)


def test_heap_frontier_leaves_superseded_entry():
    frontier = HeapFrontier()
    frontier.insert("A", 10)
    frontier.insert("B", 5)

    frontier.decrease_priority("A", 1)

    assert len(frontier) == 3
    assert drain(frontier) == [("A", 1), ("B", 5), ("A", 10)]


def test_heap_frontier_equal_decrease_is_noop():
    frontier = HeapFrontier()
    frontier.insert("A", 3)

    frontier.decrease_priority("A", 3)

    assert len(frontier) == 1


def test_heap_frontier_membership_tracks_live_entry():
    frontier = HeapFrontier()
    frontier.insert("A", 10)
    frontier.decrease_priority("A", 1)

    frontier.extract_min()

    assert "A" not in frontier
    # The superseded entry is still physically queued.
    assert frontier.extract_min() == ("A", 10)


def test_sorted_frontier_updates_in_place():
    frontier = SortedFrontier()
    frontier.insert("A", 10)
    frontier.insert("B", 5)

    frontier.decrease_priority("A", 1)

    assert len(frontier) == 2
    assert drain(frontier) == [("A", 1), ("B", 5)]


def test_make_frontier():
    assert isinstance(make_frontier(), HeapFrontier)
    assert isinstance(make_frontier("heap"), HeapFrontier)
    assert isinstance(make_frontier("sorted"), SortedFrontier)


def test_make_frontier_unknown_kind():
    with pytest.raises(ConfigurationError) as excinfo:
        make_frontier("fibonacci")

    assert excinfo.value.setting_name == "engine.frontier"
