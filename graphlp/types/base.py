"""Enums describing flow formulations and flow variable domains."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Union


class FormulationKind(IntEnum):
    """Flow formulations known to the builder registry.

    ``EDGE_FLOW`` models every edge of the graph explicitly and scales poorly
    to large graphs. ``PATH`` only models some paths and is meant for
    column-generation schemes (``delayed=True``).
    """

    EDGE_FLOW = 1
    PATH = 2

    @property
    def supports_path(self) -> bool:
        """Whether this formulation uses the notion of path (e.g. `add_path`)."""
        return _SUPPORTS_PATH[self]

    @classmethod
    def from_string(cls, value: str) -> "FormulationKind":
        """Parse a formulation name such as ``"edge_flow"`` or ``"EdgeFlow"``.

        Args:
            value: Case-insensitive name, underscores optional.

        Returns:
            The matching FormulationKind member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        key = value.replace("_", "").upper()
        for member in cls:
            if member.name.replace("_", "") == key:
                return member
        valid = ", ".join(e.name for e in cls)
        raise ValueError(
            f"Invalid formulation '{value}'. Valid values are: {valid}"
        )

    @classmethod
    def coerce(cls, value: Union["FormulationKind", str, int]) -> "FormulationKind":
        """Return ``value`` as a member.

        Strings are parsed with `from_string`; anything else goes through the
        enum constructor, so plain ints map to members.

        Raises:
            ValueError: If ``value`` names or numbers no member.
        """
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)


# Capability table: new formulations opt into path operations here
_SUPPORTS_PATH: Dict[FormulationKind, bool] = {
    FormulationKind.EDGE_FLOW: False,
    FormulationKind.PATH: True,
}


class FlowCategory(IntEnum):
    """Domain of the flow decision variables requested from the host model."""

    CONTINUOUS = 1
    INTEGER = 2
    BINARY = 3
    SEMI_CONTINUOUS = 4
    SEMI_INTEGER = 5
    #: Element of a semidefinite matrix variable.
    SDP = 6

    @classmethod
    def from_string(cls, value: str) -> "FlowCategory":
        """Parse a category name.

        Accepts member names (``"binary"``, ``"SEMI_CONTINUOUS"``) as well as
        the short symbols ``Cont``, ``Int``, ``Bin``, ``SemiCont``, ``SemiInt``
        and ``SDP``.

        Raises:
            ValueError: If the string doesn't match any category.
        """
        key = value.replace("_", "").upper()
        if key in _CATEGORY_ALIASES:
            return _CATEGORY_ALIASES[key]
        for member in cls:
            if member.name.replace("_", "") == key:
                return member
        valid = ", ".join(e.name for e in cls)
        raise ValueError(
            f"Invalid flow category '{value}'. Valid values are: {valid}"
        )

    @classmethod
    def coerce(cls, value: Union["FlowCategory", str, int]) -> "FlowCategory":
        """Return ``value`` as a member.

        Strings are parsed with `from_string`; anything else goes through the
        enum constructor, so plain ints map to members.

        Raises:
            ValueError: If ``value`` names or numbers no member.
        """
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)


_CATEGORY_ALIASES: Dict[str, FlowCategory] = {
    "CONT": FlowCategory.CONTINUOUS,
    "INT": FlowCategory.INTEGER,
    "BIN": FlowCategory.BINARY,
    "SEMICONT": FlowCategory.SEMI_CONTINUOUS,
    "SEMIINT": FlowCategory.SEMI_INTEGER,
    "SEMIDEFINITEELEMENT": FlowCategory.SDP,
}
