"""Shared enums and type aliases."""

from graphlp.types.base import FlowCategory, FormulationKind
from graphlp.types.dto import Edge, NodeID

__all__ = ["Edge", "FlowCategory", "FormulationKind", "NodeID"]
