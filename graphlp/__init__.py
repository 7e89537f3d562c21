"""graphlp: network-flow formulations on optimization models.

graphlp attaches a directed graph to an optimization model and creates the
flow variables of a chosen formulation, such as one variable per edge and
commodity (`EDGE_FLOW`) or a path-based formulation for column generation
(`PATH`).

Primary API:
    set_graph() - Attach a graph to a model and build the formulation
    remove_graph() - Detach it
    get_graph_model() - Access the attached GraphModel and its builder state
    LpModel - PuLP-backed host model
    MetaDiGraph - Directed graph with metadata

Example:
    from graphlp import LpModel, MetaDiGraph, set_graph

    graph = MetaDiGraph.complete(4)
    model = LpModel("transport")
    graph_model = set_graph(model, graph, commodities=["A", "B"])
    var = graph_model.builder_state.flow((0, 1), "A")
"""

from __future__ import annotations

from graphlp import logging
from graphlp._version import __version__
from graphlp.attach import (
    add_path,
    build_formulation,
    check_formulation,
    check_graph,
    get_graph,
    get_graph_model,
    has_formulation,
    has_graph,
    remove_graph,
    set_graph,
)
from graphlp.config import FORMULATION_CONFIG, FormulationConfig
from graphlp.errors import (
    FormulationNotBuilt,
    GraphModelError,
    NoGraphAttached,
    UnknownFormulation,
    UnsupportedGraphType,
    UnsupportedOperation,
    VariableCreationFailed,
)
from graphlp.formulation import (
    FORMULATION_BUILDERS,
    EdgeFlowState,
    PathState,
    register_formulation,
)
from graphlp.graph import MetaDiGraph, from_networkx, to_networkx
from graphlp.model import GraphModel, LpModel, OptimizationModel
from graphlp.types import Edge, FlowCategory, FormulationKind

__all__ = [
    # Version
    "__version__",
    # Attachment
    "set_graph",
    "remove_graph",
    "has_graph",
    "check_graph",
    "get_graph",
    "get_graph_model",
    "has_formulation",
    "check_formulation",
    # Formulations
    "build_formulation",
    "add_path",
    "register_formulation",
    "FORMULATION_BUILDERS",
    "EdgeFlowState",
    "PathState",
    # Models
    "GraphModel",
    "LpModel",
    "OptimizationModel",
    # Graphs
    "MetaDiGraph",
    "from_networkx",
    "to_networkx",
    # Types
    "Edge",
    "FlowCategory",
    "FormulationKind",
    # Configuration
    "FORMULATION_CONFIG",
    "FormulationConfig",
    # Errors
    "GraphModelError",
    "NoGraphAttached",
    "FormulationNotBuilt",
    "UnsupportedGraphType",
    "UnknownFormulation",
    "UnsupportedOperation",
    "VariableCreationFailed",
    # Utilities
    "logging",
]
