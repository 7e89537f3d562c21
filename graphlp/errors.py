"""Exceptions raised when attaching graphs and building flow formulations."""

from typing import Any, Optional


class GraphModelError(Exception):
    """Base exception for graph model attachment and formulation errors."""

    pass


class NoGraphAttached(GraphModelError):
    """Raised when an operation needs a graph model but the host has none."""

    def __init__(self, message: str = "The model has no associated graph model."):
        super().__init__(message)


class FormulationNotBuilt(GraphModelError):
    """Raised when an operation needs a built formulation that does not exist."""

    def __init__(
        self,
        message: str = (
            "The model has no associated graph formulation. Did you forget to "
            "call `build_formulation` or to link the graph model to the "
            "optimization model with `set_graph`?"
        ),
    ):
        super().__init__(message)


class UnsupportedGraphType(GraphModelError, TypeError):
    """Raised when a graph without metadata support is given."""

    def __init__(self, graph: Any):
        self.graph_type = type(graph).__name__
        super().__init__(
            f"graphlp only uses graphs with metadata (MetaDiGraph), got "
            f"{self.graph_type}. You can convert your graph with "
            f"`graphlp.graph.from_networkx(graph)`."
        )


class UnknownFormulation(GraphModelError):
    """Raised when no builder is registered for a formulation kind."""

    def __init__(self, formulation: Any):
        self.formulation = formulation
        super().__init__(f"No builder is registered for formulation {formulation!r}.")


class UnsupportedOperation(GraphModelError):
    """Raised when a formulation lacks the capability an operation needs."""

    pass


class VariableCreationFailed(GraphModelError):
    """Raised when the host model rejects a variable creation request."""

    def __init__(self, message: str, category: Optional[Any] = None):
        self.category = category
        super().__init__(message)
