import pytest

from pathgraph.adapters.graph import (
    CSVGraphRepository,
    DijkstraRouteSolver,
    InMemoryGraphRepository,
)
from pathgraph.config import AppConfig, GraphConfig
from pathgraph.container import Container, get_container, reset_container
from pathgraph.domain.models import Edge
from pathgraph.ports.graph import GraphRepositoryPort, RouteSolverPort
from pathgraph.services import RouteService


def test_default_bindings(triangle_dir):
    config = AppConfig(graph=GraphConfig(data_dir=triangle_dir))
    container = Container.create_default(config)

    repository = container.resolve(GraphRepositoryPort)
    assert isinstance(repository, CSVGraphRepository)
    assert repository.config.data_dir == triangle_dir
    assert isinstance(container.resolve(RouteSolverPort), DijkstraRouteSolver)

    service = container.resolve(RouteService)
    assert service.graph_repository is repository
    assert service.cost(1, 3).cost == 9


def test_singletons_and_factories():
    container = Container()
    container.register(RouteSolverPort, DijkstraRouteSolver)
    container.register(GraphRepositoryPort, InMemoryGraphRepository, singleton=False)

    assert container.resolve(RouteSolverPort) is container.resolve(RouteSolverPort)
    assert container.resolve(GraphRepositoryPort) is not container.resolve(
        GraphRepositoryPort
    )

    first = container.resolve(RouteSolverPort)
    container.clear_singletons()
    assert container.resolve(RouteSolverPort) is not first


def test_register_replaces_previous_binding():
    container = Container()
    container.register(GraphRepositoryPort, InMemoryGraphRepository)
    container.resolve(GraphRepositoryPort)

    override = InMemoryGraphRepository(edges=[Edge(1, 2, 3)])
    container.register(GraphRepositoryPort, lambda: override)

    assert container.resolve(GraphRepositoryPort) is override


def test_resolve_unregistered_raises():
    container = Container()

    with pytest.raises(KeyError):
        container.resolve(RouteService)


def test_global_container_is_reset():
    first = get_container()
    assert get_container() is first

    reset_container()

    assert get_container() is not first
