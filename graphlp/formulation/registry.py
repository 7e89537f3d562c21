"""Registry of formulation builders and the dispatcher that uses it.

Each `FormulationKind` member maps to one builder function taking the host
model and returning that formulation's state. Adding a formulation means
adding an enum member, a state type and a builder registered with
`register_formulation`; existing builders are left untouched.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from graphlp.errors import UnknownFormulation
from graphlp.logging import get_logger
from graphlp.model.graph_model import get_graph_model
from graphlp.types.base import FormulationKind

from .state import BuilderState

logger = get_logger(__name__)

FormulationBuilder = Callable[[Any], BuilderState]

# Registry for formulation builders
FORMULATION_BUILDERS: Dict[FormulationKind, FormulationBuilder] = {}


def register_formulation(kind: FormulationKind):
    """Return a decorator that registers a builder for ``kind``.

    Args:
        kind: Formulation the decorated function builds.

    Returns:
        A function decorator that adds the builder to `FORMULATION_BUILDERS`.

    Raises:
        ValueError: If a builder is already registered for ``kind``.
    """

    def decorator(func: FormulationBuilder) -> FormulationBuilder:
        if kind in FORMULATION_BUILDERS:
            raise ValueError(f"A builder is already registered for {kind.name}.")
        FORMULATION_BUILDERS[kind] = func
        return func

    return decorator


def build_formulation(model: Any) -> BuilderState:
    """Build the formulation of the graph model attached to ``model``.

    Dispatches on the attached graph model's formulation. The returned state
    is not stored; `graphlp.attach.set_graph` writes it into the graph model.

    Raises:
        NoGraphAttached: If no graph model is attached.
        UnknownFormulation: If no builder is registered for the formulation.
    """
    graph_model = get_graph_model(model)
    try:
        kind = FormulationKind.coerce(graph_model.formulation)
        builder = FORMULATION_BUILDERS[kind]
    except (KeyError, TypeError, ValueError):
        raise UnknownFormulation(graph_model.formulation) from None
    logger.debug(f"Building {kind.name} formulation with {builder.__name__}")
    return builder(model)
