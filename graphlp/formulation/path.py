"""Path formulation: only some paths of the graph are modelled.

This is the entry point for column-generation schemes, where paths are added
incrementally. Only the extension point exists so far: building creates no
variables and `add_path` validates its input, then reports that path
registration is not supported yet.
"""

from __future__ import annotations

from typing import Any, Hashable, Sequence

from graphlp.errors import UnsupportedOperation
from graphlp.logging import get_logger
from graphlp.model.graph_model import get_graph_model
from graphlp.types.base import FormulationKind

from .registry import register_formulation
from .state import PathState

logger = get_logger(__name__)


@register_formulation(FormulationKind.PATH)
def build_path(model: Any) -> PathState:
    """Build an empty path formulation."""
    graph_model = get_graph_model(model)
    if graph_model.delayed:
        logger.info("Delayed path generation requested; paths are not generated yet")
    return PathState(delayed=graph_model.delayed)


def add_path(model: Any, path: Sequence[Hashable]) -> None:
    """Add a path to the formulation of ``model``.

    Args:
        model: Host model with an attached graph model.
        path: Vertices of the path, from source to destination.

    Raises:
        NoGraphAttached: If no graph model is attached.
        UnsupportedOperation: If the formulation does not use paths.
        ValueError: If ``path`` is not a path of the attached graph.
        NotImplementedError: Always, once the path is valid.
    """
    graph_model = get_graph_model(model)
    if not _supports_path(graph_model.formulation):
        raise UnsupportedOperation(
            "add_path can only be called on graph models using a path-based "
            "formulation, such as PATH."
        )

    _check_path(graph_model.graph, path)
    # TODO: create one flow variable per commodity for the path and record it
    # in PathState.paths once column generation is designed.
    raise NotImplementedError("Path registration is not supported yet.")


def _supports_path(kind: Any) -> bool:
    try:
        return FormulationKind.coerce(kind).supports_path
    except (TypeError, ValueError):
        return False


def _check_path(graph: Any, path: Sequence[Hashable]) -> None:
    nodes = list(path)
    if len(nodes) < 2:
        raise ValueError("A path needs at least two vertices.")
    for u, v in zip(nodes, nodes[1:]):
        if not graph.has_edge(u, v):
            raise ValueError(f"No edge from '{u}' to '{v}' in the attached graph.")
