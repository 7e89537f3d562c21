"""Attach graph models to optimization models.

A host model holds at most one `GraphModel` in its ``graph_model`` field.
`set_graph` fills the field and builds the formulation right away;
`remove_graph` clears it.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from graphlp.formulation import add_path, build_formulation
from graphlp.graph.meta_digraph import MetaDiGraph
from graphlp.logging import get_logger
from graphlp.model.graph_model import (
    GraphModel,
    check_formulation,
    check_graph,
    coerce_graph_model,
    get_graph,
    get_graph_model,
    has_formulation,
    has_graph,
)
from graphlp.types.base import FlowCategory, FormulationKind

logger = get_logger(__name__)

__all__ = [
    "add_path",
    "build_formulation",
    "check_formulation",
    "check_graph",
    "get_graph",
    "get_graph_model",
    "has_formulation",
    "has_graph",
    "remove_graph",
    "set_graph",
]


def set_graph(
    model: Any,
    graph: Union[GraphModel, MetaDiGraph],
    formulation: Union[FormulationKind, str, None] = None,
    delayed: Optional[bool] = None,
    flow_category: Union[FlowCategory, str, None] = None,
    commodities: Optional[List[str]] = None,
) -> GraphModel:
    """Attach a graph model to ``model`` and build its formulation.

    ``graph`` is either a ready `GraphModel`, which must come without further
    arguments, or a `MetaDiGraph` from which one is created. An existing
    attachment is replaced with a warning.

    If the build fails, the exception propagates and the graph model stays
    attached with ``builder_state`` None; the model must not be used for
    formulation-dependent operations.

    Args:
        model: Host optimization model.
        graph: A GraphModel or a MetaDiGraph.
        formulation: Flow formulation (default: EDGE_FLOW).
        delayed: Delay path generation until after solving (PATH only).
        flow_category: Domain of the flow variables (default: CONTINUOUS).
        commodities: Commodity labels (default: a single ``"default"``).

    Returns:
        The attached GraphModel, with its formulation built.

    Raises:
        UnsupportedGraphType: If ``graph`` has no metadata support; nothing
            is attached in that case.
        TypeError: If ``graph`` is a GraphModel and an option is also given.
        UnknownFormulation: If no builder exists for the formulation.
        VariableCreationFailed: If the host model rejects the flow variables.
    """
    graph_model = coerce_graph_model(
        graph,
        formulation=formulation,
        delayed=delayed,
        flow_category=flow_category,
        commodities=commodities,
    )

    if has_graph(model):
        logger.warning("Model already has an associated graph model! It will be replaced.")

    graph_model.builder_state = None
    model.graph_model = graph_model
    graph_model.builder_state = build_formulation(model)
    logger.info(
        f"Attached {graph_model.formulation.name} graph model: "
        f"{graph_model.graph.number_of_nodes()} nodes, "
        f"{graph_model.graph.edge_count()} edges, "
        f"{len(graph_model.commodities)} commodities"
    )
    return graph_model


def remove_graph(model: Any) -> None:
    """Detach the graph model of ``model``; no error if there is none."""
    if has_graph(model):
        model.graph_model = None
        logger.debug("Graph model removed")
