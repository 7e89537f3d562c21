"""Directed graph with strict edge management and attachable metadata.

`MetaDiGraph` extends `networkx.DiGraph` so that graph-, vertex- and
edge-level properties can be read and written through one API
(`set_prop`/`get_prop`), and so that structural mistakes raise instead of
silently creating nodes. Flow formulations only accept this type.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import networkx as nx

from graphlp.types.dto import Edge, NodeID

AttrDict = Dict[str, Any]
# None addresses the graph itself, a node ID a vertex, a (u, v) pair an edge
PropTarget = Union[None, NodeID, Tuple[NodeID, NodeID]]


class MetaDiGraph(nx.DiGraph):
    """A directed graph with strict rules and per-element metadata.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - No duplicate ``(src, dst)`` edges (raises ValueError on duplicates).
      - Removing non-existent nodes or edges raises ValueError.
      - Edges enumerate in adjacency order (source insertion order, then
        target insertion order), so repeated enumeration of an unmodified
        graph is stable.

    Inherits from:
        networkx.DiGraph
    """

    @classmethod
    def complete(cls, n: int) -> MetaDiGraph:
        """Build the complete directed graph on vertices ``0..n-1``.

        Args:
            n: Number of vertices.

        Returns:
            MetaDiGraph: A graph with ``n * (n - 1)`` edges.
        """
        graph = cls()
        graph.add_nodes_from(range(n))
        for u in range(n):
            for v in range(n):
                if u != v:
                    graph.add_edge(u, v)
        return graph

    def copy(self, as_view: bool = False, pickle: bool = True) -> MetaDiGraph:
        """Create a copy of this graph.

        By default, use pickle-based deep copying so metadata is not shared.
        If ``pickle=False``, call the parent class's copy, which supports views.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding, **attr: Any) -> None:
        """Add several nodes; ``(node, attr_dict)`` pairs are accepted too."""
        for item in nodes_for_adding:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], dict):
                node, node_attr = item
                self.add_node(node, **{**attr, **node_attr})
            else:
                self.add_node(item, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(self, u_of_edge: NodeID, v_of_edge: NodeID, **attr: Any) -> Edge:
        """Add a directed edge from ``u_of_edge`` to ``v_of_edge``.

        Both nodes must already exist in the graph.

        Returns:
            Edge: The identity of the new edge.

        Raises:
            ValueError: If either node does not exist, or the edge already exists.
        """
        if u_of_edge not in self:
            raise ValueError(f"Source node '{u_of_edge}' does not exist.")
        if v_of_edge not in self:
            raise ValueError(f"Target node '{v_of_edge}' does not exist.")
        if self.has_edge(u_of_edge, v_of_edge):
            raise ValueError(
                f"Edge from '{u_of_edge}' to '{v_of_edge}' already exists."
            )
        super().add_edge(u_of_edge, v_of_edge, **attr)
        return Edge(u_of_edge, v_of_edge)

    def add_edges_from(self, ebunch_to_add, **attr: Any) -> None:
        """Add several edges given as ``(u, v)`` or ``(u, v, attr_dict)``."""
        for item in ebunch_to_add:
            if len(item) == 3:
                u, v, edge_attr = item
                self.add_edge(u, v, **{**attr, **edge_attr})
            else:
                u, v = item
                self.add_edge(u, v, **attr)

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge from ``u`` to ``v``.

        Raises:
            ValueError: If the nodes or the edge do not exist.
        """
        if u not in self:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:
            raise ValueError(f"Target node '{v}' does not exist.")
        if not self.has_edge(u, v):
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)

    #
    # Structure queries
    #
    def edge_count(self) -> int:
        """Return the number of edges."""
        return self.number_of_edges()

    def iter_edges(self) -> Iterator[Edge]:
        """Yield every edge as an `Edge`, in adjacency order."""
        for u, v in self.edges():
            yield Edge(u, v)

    def edge_list(self) -> List[Edge]:
        """Return every edge as an `Edge`, in adjacency order."""
        return list(self.iter_edges())

    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """Retrieve all nodes and their attributes as a dictionary."""
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[Edge, AttrDict]:
        """Retrieve all edges and their attributes, keyed by `Edge`."""
        return {Edge(u, v): data for u, v, data in self.edges(data=True)}

    #
    # Metadata
    #
    def props(self, target: PropTarget = None) -> AttrDict:
        """Return the live attribute dictionary of the graph, a node or an edge.

        Args:
            target: ``None`` for the graph itself, a node ID, or a ``(u, v)``
                edge.

        Raises:
            ValueError: If the node or edge does not exist.
        """
        if target is None:
            return self.graph
        if isinstance(target, tuple) and len(target) == 2 and target not in self:
            u, v = target
            if not self.has_edge(u, v):
                raise ValueError(f"No edge from '{u}' to '{v}'.")
            return self.edges[u, v]
        if target not in self:
            raise ValueError(f"Node '{target}' does not exist.")
        return self.nodes[target]

    def set_prop(self, target: PropTarget, name: str, value: Any) -> None:
        """Set one property on the graph, a node or an edge."""
        self.props(target)[name] = value

    def set_props(self, target: PropTarget, **values: Any) -> None:
        """Set several properties on the graph, a node or an edge."""
        self.props(target).update(values)

    def get_prop(
        self, target: PropTarget, name: str, default: Optional[Any] = None
    ) -> Any:
        """Return one property, or ``default`` when it is not set."""
        return self.props(target).get(name, default)

    def has_prop(self, target: PropTarget, name: str) -> bool:
        """Check whether a property is set on the graph, a node or an edge."""
        return name in self.props(target)

    def remove_prop(self, target: PropTarget, name: str) -> None:
        """Remove one property.

        Raises:
            KeyError: If the property is not set.
        """
        del self.props(target)[name]
