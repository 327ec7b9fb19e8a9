import pytest

from pathgraph.graph.frontier import Frontier, SearchState, State


def test_frontier_pops_cheapest_first():
    frontier = Frontier()
    frontier.push(5, 1)
    frontier.push(2, 2)
    frontier.push(9, 3)

    assert len(frontier) == 3
    assert frontier.pop() == State(cost=2, position=2)
    assert frontier.pop() == State(cost=5, position=1)
    assert frontier.pop() == State(cost=9, position=3)
    assert not frontier


def test_frontier_pop_empty_raises():
    with pytest.raises(IndexError):
        Frontier().pop()


def test_search_state_is_seeded_with_source():
    state = SearchState.start(7)

    assert state.distances == {7: 0}
    assert state.frontier.pop() == State(0, 7)


def test_relax_records_only_improvements():
    state = SearchState.start(1)

    assert state.relax(2, 10) is True
    assert state.relax(2, 12) is False
    assert state.relax(2, 10) is False
    assert state.relax(2, 4) is True

    assert state.distances[2] == 4
    # Both pushes stay in the frontier; the first one is now stale
    assert len(state.frontier) == 3


def test_is_stale_compares_with_best_known():
    state = SearchState.start(1)
    state.relax(2, 10)
    state.relax(2, 4)

    assert state.is_stale(10, 2) is True
    assert state.is_stale(4, 2) is False
    assert state.is_stale(3, 99) is False
