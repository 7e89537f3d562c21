"""Edge-flow formulation: one flow variable per (edge, commodity) pair."""

from __future__ import annotations

from typing import Any, Dict, List

import pulp

from graphlp.config import FORMULATION_CONFIG
from graphlp.errors import VariableCreationFailed
from graphlp.logging import get_logger
from graphlp.model.graph_model import get_graph_model
from graphlp.types.base import FlowCategory, FormulationKind
from graphlp.types.dto import Edge

from .registry import register_formulation
from .state import EdgeFlowState

logger = get_logger(__name__)


@register_formulation(FormulationKind.EDGE_FLOW)
def build_edge_flow(model: Any) -> EdgeFlowState:
    """Create the flow variables of every edge and commodity.

    Args:
        model: Host model with an attached graph model.

    Returns:
        EdgeFlowState: The ``E x C`` variable block and the edge index maps.

    Raises:
        VariableCreationFailed: If the host model rejects the variables.
    """
    graph_model = get_graph_model(model)
    graph = graph_model.graph
    commodities = graph_model.commodities
    n_edges = graph.edge_count()
    n_commodities = len(commodities)

    flows = _create_flow_block(model, n_edges, n_commodities, graph_model.flow_category)

    # Map edges and their indices in the model.
    index_to_edge: Dict[int, Edge] = dict(enumerate(graph.iter_edges()))
    edge_to_index: Dict[Edge, int] = {edge: idx for idx, edge in index_to_edge.items()}

    _name_flows(model, flows, index_to_edge, commodities)

    logger.debug(
        f"Edge-flow formulation built: {n_edges} edges x {n_commodities} commodities"
    )
    return EdgeFlowState(
        flows=flows,
        index_to_edge=index_to_edge,
        edge_to_index=edge_to_index,
        commodities=list(commodities),
    )


def _create_flow_block(
    model: Any, n_edges: int, n_commodities: int, category: FlowCategory
) -> List[List[Any]]:
    bulk = getattr(model, "add_variables", None)
    try:
        if FORMULATION_CONFIG.bulk_variable_creation and callable(bulk):
            return bulk((n_edges, n_commodities), category)
        logger.debug(
            f"Creating {n_edges * n_commodities} flow variables one at a time"
        )
        return [
            [model.add_variable(category) for _ in range(n_commodities)]
            for _ in range(n_edges)
        ]
    except VariableCreationFailed:
        raise
    except (pulp.PulpError, ValueError, TypeError) as exc:
        name = getattr(category, "name", category)
        raise VariableCreationFailed(
            f"The host model rejected {name} flow variables: {exc}",
            category=category,
        ) from exc


def _name_flows(
    model: Any,
    flows: List[List[Any]],
    index_to_edge: Dict[int, Edge],
    commodities: List[str],
) -> None:
    set_name = getattr(model, "set_variable_name", None)
    if not callable(set_name):
        logger.debug("Host model does not support variable names; skipping")
        return
    try:
        for e, edge in index_to_edge.items():
            for c, commodity in enumerate(commodities):
                set_name(
                    flows[e][c],
                    FORMULATION_CONFIG.flow_name(edge.src, edge.dst, commodity),
                )
    except NotImplementedError:
        logger.debug("Host model does not support variable names; skipping")
