"""Flow formulations and the builder registry.

Importing this package registers the built-in builders (`EDGE_FLOW` and
`PATH`) in `FORMULATION_BUILDERS`.
"""

from graphlp.formulation.registry import (
    FORMULATION_BUILDERS,
    build_formulation,
    register_formulation,
)
from graphlp.formulation.state import BuilderState, EdgeFlowState, PathState
from graphlp.formulation.edge_flow import build_edge_flow
from graphlp.formulation.path import add_path, build_path

__all__ = [
    "FORMULATION_BUILDERS",
    "BuilderState",
    "EdgeFlowState",
    "PathState",
    "add_path",
    "build_edge_flow",
    "build_formulation",
    "build_path",
    "register_formulation",
]
