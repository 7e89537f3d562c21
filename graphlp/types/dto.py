"""Small value types shared by graphs and formulations."""

from __future__ import annotations

from typing import Hashable, NamedTuple

NodeID = Hashable


class Edge(NamedTuple):
    """Identity of a directed edge: its source and destination vertices.

    Compares equal to the plain ``(src, dst)`` tuple, so either form can be
    used to look up edge indices.
    """

    src: NodeID
    dst: NodeID
