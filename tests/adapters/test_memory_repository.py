import pytest

from pathgraph.adapters.graph import InMemoryGraphRepository
from pathgraph.domain.errors import NegativeWeightError
from pathgraph.domain.models import Edge, Node


def test_load_builds_graph_once():
    repository = InMemoryGraphRepository(
        nodes=[Node(1, 0, 0), Node(2, 1, 1)],
        edges=[Edge(1, 2, 7), Edge(1, 2, 3)],
    )

    graph = repository.load()

    assert repository.load() is graph
    assert graph.shortest_path(1, 2) == 3
    assert repository.get_node(2) == Node(2, 1, 1)
    assert list(repository.list_nodes()) == [Node(1, 0, 0), Node(2, 1, 1)]


def test_clear_cache_rebuilds():
    repository = InMemoryGraphRepository(nodes=[Node(1, 0, 0)])
    first = repository.load()

    repository.clear_cache()

    assert repository.load() is not first


def test_empty_repository():
    graph = InMemoryGraphRepository().load()

    assert graph.node_count == 0
    assert graph.shortest_path(1, 2) == 2**31 - 1


def test_negative_weight_propagates():
    repository = InMemoryGraphRepository(edges=[Edge(1, 2, -5)])

    with pytest.raises(NegativeWeightError):
        repository.load()
