"""Builder output state for each flow formulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

from graphlp.types.dto import Edge

EdgeLike = Union[Edge, Tuple[Hashable, Hashable]]


@dataclass
class EdgeFlowState:
    """Variables and index maps of an edge-flow formulation.

    Edge indices are zero-based positions in the graph's edge enumeration at
    build time.

    Attributes:
        flows: Flow variables indexed ``[edge_index][commodity_index]``.
        index_to_edge: Maps an edge index to its `Edge`.
        edge_to_index: Reverse mapping, from an `Edge` to its index.
        commodities: Commodity labels, in column order of ``flows``.
    """

    flows: List[List[Any]]
    index_to_edge: Dict[int, Edge]
    edge_to_index: Dict[Edge, int]
    commodities: List[str] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        """``(edge_count, commodity_count)`` of the flow block."""
        return len(self.index_to_edge), len(self.commodities)

    def _commodity_index(self, commodity: str) -> int:
        try:
            return self.commodities.index(commodity)
        except ValueError:
            raise KeyError(f"Unknown commodity '{commodity}'.") from None

    def flow(self, edge: EdgeLike, commodity: Optional[str] = None) -> Any:
        """Return the flow variable of ``commodity`` on ``edge``.

        Args:
            edge: An `Edge` or a plain ``(src, dst)`` tuple.
            commodity: Commodity label; may be omitted when there is only one.

        Raises:
            KeyError: If the edge or commodity is unknown, or ``commodity`` is
                omitted while several commodities exist.
        """
        if commodity is None:
            if len(self.commodities) != 1:
                raise KeyError(
                    "A commodity label is required when several commodities exist."
                )
            c = 0
        else:
            c = self._commodity_index(commodity)
        return self.flows[self.edge_to_index[Edge(*edge)]][c]

    def edge_flows(self, edge: EdgeLike) -> Dict[str, Any]:
        """Return ``{commodity: variable}`` for one edge."""
        row = self.flows[self.edge_to_index[Edge(*edge)]]
        return dict(zip(self.commodities, row))

    def commodity_flows(self, commodity: str) -> Dict[Edge, Any]:
        """Return ``{edge: variable}`` for one commodity."""
        c = self._commodity_index(commodity)
        return {self.index_to_edge[e]: row[c] for e, row in enumerate(self.flows)}

    def values(self) -> Dict[Edge, Dict[str, Optional[float]]]:
        """Return solution values as ``{edge: {commodity: value}}``.

        Values are None for variables the solver did not assign.
        """
        return {
            self.index_to_edge[e]: {
                label: getattr(var, "varValue", None)
                for label, var in zip(self.commodities, row)
            }
            for e, row in enumerate(self.flows)
        }


@dataclass
class PathState:
    """State of a path formulation.

    Attributes:
        paths: Registered paths. Always empty: path registration is not
            implemented yet.
        delayed: Whether paths are meant to be generated after solving.
    """

    paths: List[Tuple[Hashable, ...]] = field(default_factory=list)
    delayed: bool = False


BuilderState = Union[EdgeFlowState, PathState]
