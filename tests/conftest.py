import logging
from pathlib import Path

import pytest

from pathgraph.config import reset_config
from pathgraph.container import reset_container


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch):
    """Fresh configuration and container, root logger restored afterwards."""
    for name in ("PATHGRAPH_GRAPH_DATA_DIR", "PATHGRAPH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

    reset_config()
    reset_container()


@pytest.fixture
def write_graph(tmp_path):
    """Write nodes.csv and edges.csv into a temporary data directory."""

    def _write(nodes: str, edges: str) -> Path:
        (tmp_path / "nodes.csv").write_text(nodes, encoding="utf-8")
        (tmp_path / "edges.csv").write_text(edges, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def triangle_dir(write_graph):
    """Nodes 1, 2, 3 with edges 1-2 (4), 2-3 (5), 1-3 (10) and a lone node 4."""
    return write_graph(
        "id,x,y\n1,0,0\n2,4,0\n3,4,5\n4,10,10\n",
        "node_a_id,node_b_id,weight\n1,2,4\n2,3,5\n1,3,10\n",
    )
