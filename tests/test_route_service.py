import pytest

from pathgraph.adapters.graph import DijkstraRouteSolver, InMemoryGraphRepository
from pathgraph.domain.errors import NodeNotFoundError, NoRouteFoundError
from pathgraph.domain.models import UNREACHABLE, Edge, Node
from pathgraph.services import RouteService


@pytest.fixture
def repository():
    return InMemoryGraphRepository(
        nodes=[Node(1, 0, 0), Node(2, 4, 0), Node(3, 4, 5), Node(4, 10, 10)],
        edges=[Edge(1, 2, 4), Edge(2, 3, 5), Edge(1, 3, 10)],
    )


@pytest.fixture
def service(repository):
    return RouteService(
        graph_repository=repository,
        route_solver=DijkstraRouteSolver(),
    )


def test_cost(service):
    route = service.cost(1, 3)

    assert route.found
    assert route.cost == 9


def test_cost_errors(service):
    with pytest.raises(NoRouteFoundError):
        service.cost(1, 4)
    with pytest.raises(NodeNotFoundError):
        service.cost(1, 99)


def test_cost_or_sentinel(service):
    assert service.cost_or_sentinel(3, 1) == 9
    assert service.cost_or_sentinel(1, 4) == UNREACHABLE
    assert service.cost_or_sentinel(1, 99) == UNREACHABLE
    assert service.cost_or_sentinel(2, 2) == 0


def test_reload_clears_repository_cache(service, repository):
    first = repository.load()

    service.reload()

    assert repository.load() is not first
