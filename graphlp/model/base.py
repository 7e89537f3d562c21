"""Interface expected from host optimization models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Tuple, runtime_checkable

from graphlp.types.base import FlowCategory

if TYPE_CHECKING:
    from graphlp.model.graph_model import GraphModel


@runtime_checkable
class OptimizationModel(Protocol):
    """Minimal surface a host model offers to the formulation builders.

    The host owns the attachment slot (``graph_model``) directly. Builders
    additionally look for two optional capabilities with ``getattr``:

    - ``add_variables(shape, category)``: bulk creation of a 2-D block,
      returned as a nested list indexed ``[row][column]``;
    - ``set_variable_name(variable, name)``: display names for diagnostics.
      It may raise ``NotImplementedError`` when the backend has no names.
    """

    graph_model: Optional["GraphModel"]

    def add_variable(self, category: FlowCategory) -> Any:
        """Create one decision variable in the given domain."""
        ...


BulkShape = Tuple[int, int]
VariableBlock = List[List[Any]]
