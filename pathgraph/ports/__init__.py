"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the graph core and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import GraphRepositoryPort, RouteSolverPort

__all__ = [
    "GraphRepositoryPort",
    "RouteSolverPort",
]
