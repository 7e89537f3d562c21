"""Shared fixtures: small graphs and fresh host models."""

from __future__ import annotations

from typing import Any, List, Optional

import pytest

from graphlp.graph import MetaDiGraph
from graphlp.model import LpModel


class BareModel:
    """Host model with neither bulk creation nor variable names."""

    def __init__(self) -> None:
        self.graph_model: Optional[Any] = None
        self.created: List[dict] = []

    def add_variable(self, category):
        var = {"index": len(self.created), "category": category}
        self.created.append(var)
        return var


@pytest.fixture
def complete4() -> MetaDiGraph:
    """Complete directed graph on vertices 0..3 (12 edges)."""
    return MetaDiGraph.complete(4)


@pytest.fixture
def line_graph() -> MetaDiGraph:
    """A -> B -> C with capacities on the edges."""
    graph = MetaDiGraph()
    for name in ("A", "B", "C"):
        graph.add_node(name)
    graph.add_edge("A", "B", capacity=10.0)
    graph.add_edge("B", "C", capacity=5.0)
    return graph


@pytest.fixture
def model() -> LpModel:
    return LpModel("test")


@pytest.fixture
def bare_model() -> BareModel:
    return BareModel()
