"""Graph primitives and helpers.

This package provides the metadata graph type `MetaDiGraph` required by flow
formulations, and conversion helpers (`convert`) for plain NetworkX graphs.
"""

from graphlp.graph.convert import from_networkx, to_networkx
from graphlp.graph.meta_digraph import MetaDiGraph

__all__ = ["MetaDiGraph", "from_networkx", "to_networkx"]
