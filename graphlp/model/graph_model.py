"""Graph model state and the queries on a host model's attachment slot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional, Union

from graphlp.config import FORMULATION_CONFIG
from graphlp.errors import FormulationNotBuilt, NoGraphAttached, UnsupportedGraphType
from graphlp.graph.meta_digraph import MetaDiGraph
from graphlp.types.base import FlowCategory, FormulationKind

if TYPE_CHECKING:
    from graphlp.formulation.state import BuilderState


def _default_commodities() -> List[str]:
    return [FORMULATION_CONFIG.default_commodity]


@dataclass
class GraphModel:
    """Internal state of the graph attached to an optimization model.

    The graph is shared with the caller, not copied. It may still be changed
    before the formulation is built, but not afterwards: edge indices in the
    builder state follow the enumeration order at build time.

    Attributes:
        graph: The graph below the model. Must be a `MetaDiGraph`, since edge
            and vertex properties (such as capacities) are often needed.
        formulation: The flow formulation to build.
        delayed: For a path formulation, whether paths are computed before
            (False) or after (True) solving.
        flow_category: Domain of the flow variables.
        commodities: Labels of the flow types routed through the graph.
        builder_state: Output of the formulation builder; None until
            `build_formulation` succeeds for this model.
    """

    graph: MetaDiGraph
    formulation: FormulationKind = FormulationKind.EDGE_FLOW
    delayed: bool = False
    flow_category: FlowCategory = FlowCategory.CONTINUOUS
    commodities: List[str] = field(default_factory=_default_commodities)
    builder_state: Optional["BuilderState"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.graph, MetaDiGraph):
            raise UnsupportedGraphType(self.graph)
        self.formulation = FormulationKind.coerce(self.formulation)
        self.flow_category = FlowCategory.coerce(self.flow_category)
        if isinstance(self.commodities, str):
            raise TypeError("commodities must be a sequence of labels, not a string")
        self.commodities = list(self.commodities)
        if not self.commodities:
            raise ValueError("At least one commodity is required.")
        if len(set(self.commodities)) != len(self.commodities):
            raise ValueError(f"Duplicate commodity labels in {self.commodities!r}.")

    @property
    def is_built(self) -> bool:
        return self.builder_state is not None


# Queries on the attachment slot of a host model.


def has_graph(model: Any) -> bool:
    """Return True if a graph model is attached to ``model``."""
    return getattr(model, "graph_model", None) is not None


def check_graph(model: Any) -> None:
    """Raise `NoGraphAttached` unless a graph model is attached to ``model``."""
    if not has_graph(model):
        raise NoGraphAttached()


def get_graph_model(model: Any) -> GraphModel:
    """Return the graph model attached to ``model``.

    Raises:
        NoGraphAttached: If nothing is attached.
    """
    check_graph(model)
    return model.graph_model


def get_graph(model: Any) -> MetaDiGraph:
    """Return the graph below the graph model attached to ``model``."""
    return get_graph_model(model).graph


def has_formulation(model: Any) -> bool:
    """Return True if a graph model is attached and its formulation is built."""
    return has_graph(model) and model.graph_model.builder_state is not None


def check_formulation(model: Any) -> None:
    """Raise `FormulationNotBuilt` unless the formulation of ``model`` is built."""
    if not has_formulation(model):
        raise FormulationNotBuilt()


def coerce_graph_model(
    graph: Union[GraphModel, MetaDiGraph, Any],
    formulation: Union[FormulationKind, str, None] = None,
    delayed: Optional[bool] = None,
    flow_category: Union[FlowCategory, str, None] = None,
    commodities: Optional[List[str]] = None,
) -> GraphModel:
    """Return ``graph`` itself if it is a `GraphModel`, else build one from parts.

    Options left as None take the `GraphModel` defaults. A GraphModel already
    carries its options, so passing any option along with one is an error.

    Raises:
        UnsupportedGraphType: If ``graph`` is neither a GraphModel nor a
            MetaDiGraph.
        TypeError: If ``graph`` is a GraphModel and an option is given.
    """
    options = {
        "formulation": formulation,
        "delayed": delayed,
        "flow_category": flow_category,
        "commodities": commodities,
    }
    given = {key: value for key, value in options.items() if value is not None}
    if isinstance(graph, GraphModel):
        if given:
            raise TypeError(
                f"Options {sorted(given)} cannot be combined with a GraphModel; "
                "set them on the GraphModel instead."
            )
        return graph
    if not isinstance(graph, MetaDiGraph):
        raise UnsupportedGraphType(graph)
    return GraphModel(graph, **given)
