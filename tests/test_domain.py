import dataclasses

import pytest

from pathgraph.domain import (
    UNREACHABLE,
    Edge,
    GraphError,
    Node,
    NodeNotFoundError,
    PathGraphError,
    RouteCost,
)


def test_models_are_frozen():
    node = Node(1, 2, 3)

    with pytest.raises(dataclasses.FrozenInstanceError):
        node.x = 5  # type: ignore[misc]


def test_edge_reversed_is_new_edge():
    edge = Edge(1, 2, 7)

    reverse = edge.reversed()

    assert reverse == Edge(2, 1, 7)
    assert reverse is not edge
    assert edge == Edge(1, 2, 7)


def test_route_cost_found():
    route = RouteCost(source=1, target=3, cost=9)

    assert route.found
    assert route.as_sentinel() == 9


def test_route_cost_not_found_maps_to_sentinel():
    route = RouteCost(source=1, target=2)

    assert not route.found
    assert route.as_sentinel() == UNREACHABLE


def test_error_str_includes_cause():
    cause = OSError("disk gone")
    error = GraphError("Failed to read nodes.csv", cause=cause, file_path="x")

    assert str(error) == "Failed to read nodes.csv: disk gone"
    assert isinstance(error, PathGraphError)


def test_error_without_cause():
    error = NodeNotFoundError("Source node not in graph: 5", node_id=5)

    assert str(error) == "Source node not in graph: 5"
    assert error.node_id == 5
    with pytest.raises(PathGraphError):
        raise error
