"""PuLP-backed host model with a graph attachment slot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import pulp

from graphlp.config import FORMULATION_CONFIG
from graphlp.errors import VariableCreationFailed
from graphlp.logging import get_logger
from graphlp.model.base import BulkShape, VariableBlock
from graphlp.types.base import FlowCategory

if TYPE_CHECKING:
    from graphlp.model.graph_model import GraphModel

logger = get_logger(__name__)

#: Variable domains PuLP can express.
PULP_CATEGORIES: Dict[FlowCategory, str] = {
    FlowCategory.CONTINUOUS: pulp.LpContinuous,
    FlowCategory.INTEGER: pulp.LpInteger,
    FlowCategory.BINARY: pulp.LpBinary,
}


class LpModel:
    """A linear program whose flow structure can be described by a graph.

    Wraps a `pulp.LpProblem`. The ``graph_model`` field is the attachment
    slot managed by `graphlp.attach.set_graph` and `remove_graph`; it holds at
    most one `GraphModel`.

    Attributes:
        problem: The underlying PuLP problem.
        graph_model: The attached graph model, or None.
    """

    def __init__(self, name: str = "graphlp", sense: int = pulp.LpMinimize) -> None:
        self.problem = pulp.LpProblem(name, sense)
        self.graph_model: Optional["GraphModel"] = None
        self._variables: List[pulp.LpVariable] = []
        self._names: Dict[str, pulp.LpVariable] = {}
        self._blocks = 0

    def __repr__(self) -> str:
        attached = "attached" if self.graph_model is not None else "no graph"
        return (
            f"LpModel(name={self.problem.name!r}, "
            f"variables={len(self._variables)}, {attached})"
        )

    #
    # Variables
    #
    def add_variable(
        self,
        category: FlowCategory,
        name: Optional[str] = None,
        low_bound: Optional[float] = None,
        up_bound: Optional[float] = None,
    ) -> pulp.LpVariable:
        """Create one decision variable.

        Raises:
            VariableCreationFailed: If PuLP cannot express ``category``.
        """
        category, cat = _pulp_category(category)
        if name is None:
            name = f"x_{len(self._variables)}"
        var = pulp.LpVariable(name, lowBound=low_bound, upBound=up_bound, cat=cat)
        self._register(var)
        return var

    def add_variables(self, shape: BulkShape, category: FlowCategory) -> VariableBlock:
        """Create a ``rows x columns`` block of variables in one call.

        Args:
            shape: ``(rows, columns)``.
            category: Domain of every variable in the block.

        Returns:
            Nested list indexed ``[row][column]``.

        Raises:
            VariableCreationFailed: If PuLP cannot express ``category`` or the
                shape is invalid.
        """
        category, cat = _pulp_category(category)
        rows, columns = shape
        if rows < 0 or columns < 0:
            raise VariableCreationFailed(
                f"Invalid variable block shape {shape!r}.", category=category
            )
        prefix = f"{FORMULATION_CONFIG.variable_block_prefix}{self._blocks}"
        self._blocks += 1
        block = pulp.LpVariable.matrix(
            prefix, (list(range(rows)), list(range(columns))), cat=cat
        )
        for row in block:
            for var in row:
                self._register(var)
        logger.debug(
            f"Created {rows}x{columns} {category.name} block '{prefix}' "
            f"in '{self.problem.name}'"
        )
        return block

    def set_variable_name(self, variable: pulp.LpVariable, name: str) -> None:
        """Rename a variable.

        PuLP replaces the characters ``-+[] ->/`` with underscores, so distinct
        names can collide once written. A rename that would collide with
        another variable of this model is skipped and the variable keeps its
        current, unique name.
        """
        old_name = variable.name
        variable.name = name
        owner = self._names.get(variable.name)
        if owner is not None and owner is not variable:
            logger.debug(
                f"Variable name '{variable.name}' is already used; keeping '{old_name}'"
            )
            variable.name = old_name
            return
        if self._names.get(old_name) is variable:
            del self._names[old_name]
        self._names[variable.name] = variable

    def _register(self, variable: pulp.LpVariable) -> None:
        self._variables.append(variable)
        self._names.setdefault(variable.name, variable)

    def variables(self) -> List[pulp.LpVariable]:
        """Return every variable created through this model, in creation order."""
        return list(self._variables)

    def num_variables(self) -> int:
        return len(self._variables)

    #
    # Constraints, objective and solve
    #
    def add_constraint(
        self, constraint: pulp.LpConstraint, name: Optional[str] = None
    ) -> None:
        self.problem += constraint, name

    def set_objective(self, expression: Any) -> None:
        self.problem.setObjective(expression)

    def solve(self, solver: Optional[Any] = None) -> str:
        """Solve the problem.

        Args:
            solver: A PuLP solver instance. Defaults to PuLP's default solver
                (CBC) with its log silenced.

        Returns:
            The PuLP status string, e.g. ``"Optimal"`` or ``"Infeasible"``.
        """
        if solver is None:
            solver = pulp.PULP_CBC_CMD(msg=False)
        status = self.problem.solve(solver)
        logger.info(f"Solved '{self.problem.name}': {pulp.LpStatus[status]}")
        return pulp.LpStatus[status]

    def objective_value(self) -> Optional[float]:
        return pulp.value(self.problem.objective)


def _pulp_category(category: Any) -> Tuple[FlowCategory, str]:
    try:
        category = FlowCategory.coerce(category)
    except (TypeError, ValueError):
        raise VariableCreationFailed(
            f"Unknown variable category {category!r}.", category=category
        ) from None
    try:
        return category, PULP_CATEGORIES[category]
    except KeyError:
        supported = ", ".join(c.name for c in PULP_CATEGORIES)
        raise VariableCreationFailed(
            f"PuLP models do not support the {category.name} "
            f"variable category. Supported categories: {supported}",
            category=category,
        ) from None
