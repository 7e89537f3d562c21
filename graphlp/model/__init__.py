"""Host optimization models and the graph model attached to them."""

from graphlp.model.base import OptimizationModel
from graphlp.model.graph_model import GraphModel
from graphlp.model.lp_model import LpModel

__all__ = ["GraphModel", "LpModel", "OptimizationModel"]
