"""CSV Graph Repository adapter.

Loads node and edge rows from two CSV files and inserts them into a
Graph:
- nodes.csv with columns ``id,x,y``
- edges.csv with columns ``node_a_id,node_b_id,weight``

Rows with a blank required column are skipped. Unreadable or undecodable
files and values that are not integers raise GraphError naming the
offending file.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, NegativeWeightError
from ...domain.models import Edge, Node
from ...graph.graph import Graph

NODE_COLUMNS = ("id", "x", "y")
EDGE_COLUMNS = ("node_a_id", "node_b_id", "weight")


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    Implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph from CSV files.

        Returns:
            The graph built from every node and edge row.

        Raises:
            GraphError: If a file cannot be read or holds invalid values.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "nodes_path": str(self.config.nodes_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        nodes = self._read_nodes(self.config.nodes_path)
        edges = self._read_edges(self.config.edges_path)
        try:
            graph = Graph.from_records(nodes, edges)
        except NegativeWeightError as e:
            raise GraphError(
                f"Invalid edge in {self.config.edges_path.name}",
                file_path=str(self.config.edges_path),
                cause=e,
            )
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": graph.node_count, "arcs": graph.arc_count},
        )
        return graph

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.load().get_node(node_id)

    def list_nodes(self) -> Sequence[Node]:
        return list(self.load().nodes.values())

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")

    def _read_nodes(self, path: Path) -> List[Node]:
        return [
            Node(id=values[0], x=values[1], y=values[2])
            for values in self._read_rows(path, NODE_COLUMNS)
        ]

    def _read_edges(self, path: Path) -> List[Edge]:
        return [
            Edge(node_a_id=values[0], node_b_id=values[1], weight=values[2])
            for values in self._read_rows(path, EDGE_COLUMNS)
        ]

    def _read_rows(
        self, path: Path, columns: Sequence[str]
    ) -> Iterator[List[int]]:
        """Yield the integer values of ``columns`` for every complete row."""
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                missing = [c for c in columns if c not in (reader.fieldnames or ())]
                if missing:
                    raise GraphError(
                        f"Missing columns {', '.join(missing)} in {path.name}",
                        file_path=str(path),
                    )

                for line_no, row in enumerate(reader, start=2):
                    raw: Dict[str, str] = {
                        c: (row.get(c) or "").strip() for c in columns
                    }
                    if not all(raw.values()):
                        self._logger.debug(
                            "Skipping incomplete row",
                            extra={"file": path.name, "line": line_no},
                        )
                        continue
                    try:
                        values = [int(raw[c]) for c in columns]
                    except ValueError as e:
                        raise GraphError(
                            f"Invalid integer on line {line_no} of {path.name}",
                            file_path=str(path),
                            cause=e,
                        )
                    yield values
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise GraphError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            )
