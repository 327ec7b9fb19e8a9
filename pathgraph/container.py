"""Dependency injection container.

Explicit registration and lazy resolution of the repository, solver
and service, so tests and embedding applications can swap any of them.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(RouteService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: InMemoryGraphRepository(nodes, edges))
        repository = container.resolve(GraphRepositoryPort)

    Attributes:
        config: Configuration used by the default bindings
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the CSV repository and Dijkstra solver.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import CSVGraphRepository, DijkstraRouteSolver
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .services import RouteService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            GraphRepositoryPort,
            lambda: CSVGraphRepository(config.graph),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(),
        )
        container.register(
            RouteService,
            lambda: RouteService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            ),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default container, creating it on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        _default_container = None
