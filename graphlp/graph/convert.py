"""Conversion utilities between MetaDiGraph and plain NetworkX graphs.

Formulations require a `MetaDiGraph`; these helpers turn any NetworkX graph
into one (keeping graph, node and edge attributes) and back.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import networkx as nx

from graphlp.graph.meta_digraph import MetaDiGraph

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


def from_networkx(
    nx_graph: NxGraph, bidirectional: Optional[bool] = None
) -> MetaDiGraph:
    """Convert a NetworkX graph to a MetaDiGraph.

    Node order and edge order of ``nx_graph`` are preserved. Parallel edges of
    multigraphs are merged into one ``(src, dst)`` edge whose attributes are
    the union of the parallel edges' attributes (later edges win).

    Args:
        nx_graph: Any NetworkX graph.
        bidirectional: If True, add the reverse of every edge. Defaults to True
            for undirected graphs and False for directed ones.

    Returns:
        A new MetaDiGraph. Attribute dictionaries are copied, not shared.

    Raises:
        TypeError: If ``nx_graph`` is not a NetworkX graph.
    """
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(nx_graph).__name__}"
        )
    if bidirectional is None:
        bidirectional = not nx_graph.is_directed()

    graph = MetaDiGraph()
    graph.graph.update(nx_graph.graph)
    for node, data in nx_graph.nodes(data=True):
        graph.add_node(node)
        graph.nodes[node].update(data)

    for u, v, data in nx_graph.edges(data=True):
        _merge_edge(graph, u, v, data)
        if bidirectional and u != v:
            _merge_edge(graph, v, u, data)
    return graph


def _merge_edge(graph: MetaDiGraph, u: Any, v: Any, data: dict) -> None:
    if not graph.has_edge(u, v):
        graph.add_edge(u, v)
    graph.edges[u, v].update(data)


def to_networkx(graph: MetaDiGraph) -> nx.DiGraph:
    """Convert a MetaDiGraph back to a plain NetworkX DiGraph.

    Args:
        graph: The MetaDiGraph to convert.

    Returns:
        A NetworkX DiGraph with copies of graph, node and edge attributes.
    """
    nx_graph = nx.DiGraph()
    nx_graph.graph.update(graph.graph)
    nx_graph.add_nodes_from((n, dict(d)) for n, d in graph.nodes(data=True))
    nx_graph.add_edges_from((u, v, dict(d)) for u, v, d in graph.edges(data=True))
    return nx_graph
