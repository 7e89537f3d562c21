import pulp
import pytest

from graphlp.errors import VariableCreationFailed
from graphlp.model import LpModel, OptimizationModel
from graphlp.types import FlowCategory


def test_new_model_has_empty_slot(model):
    assert model.graph_model is None
    assert model.num_variables() == 0
    assert isinstance(model, OptimizationModel)


def test_add_variables_block_shape_and_category(model):
    block = model.add_variables((3, 2), FlowCategory.INTEGER)

    assert len(block) == 3
    assert all(len(row) == 2 for row in block)
    assert all(v.cat == pulp.LpInteger for row in block for v in row)
    assert model.num_variables() == 6
    assert model.variables() == [v for row in block for v in row]


def test_binary_block_is_bounded(model):
    (var,), = model.add_variables((1, 1), FlowCategory.BINARY)
    assert var.lowBound == 0
    assert var.upBound == 1


def test_blocks_get_distinct_provisional_names(model):
    first = model.add_variables((1, 1), FlowCategory.CONTINUOUS)
    second = model.add_variables((1, 1), FlowCategory.CONTINUOUS)
    assert first[0][0].name != second[0][0].name


def test_empty_block(model):
    assert model.add_variables((0, 3), FlowCategory.CONTINUOUS) == []


def test_invalid_shape(model):
    with pytest.raises(VariableCreationFailed, match="Invalid variable block shape"):
        model.add_variables((-1, 2), FlowCategory.CONTINUOUS)


@pytest.mark.parametrize(
    "category",
    [FlowCategory.SEMI_CONTINUOUS, FlowCategory.SEMI_INTEGER, FlowCategory.SDP],
)
def test_unsupported_categories_rejected(model, category):
    with pytest.raises(VariableCreationFailed, match="do not support") as exc_info:
        model.add_variables((2, 2), category)
    assert exc_info.value.category is category
    with pytest.raises(VariableCreationFailed):
        model.add_variable(category)
    assert model.num_variables() == 0


def test_set_variable_name(model):
    var = model.add_variable(FlowCategory.CONTINUOUS)
    model.set_variable_name(var, "flow_A_to_B_commodity_default")
    assert var.name == "flow_A_to_B_commodity_default"


def test_solve_small_lp(model):
    x = model.add_variable(FlowCategory.CONTINUOUS, name="x", low_bound=0)
    y = model.add_variable(FlowCategory.CONTINUOUS, name="y", low_bound=0)
    model.add_constraint(x + y >= 4, "cover")
    model.add_constraint(x <= 1, "cap_x")
    model.set_objective(3 * x + 5 * y)

    assert model.solve() == "Optimal"
    assert x.varValue == pytest.approx(1.0)
    assert y.varValue == pytest.approx(3.0)
    assert model.objective_value() == pytest.approx(18.0)


def test_repr_mentions_attachment(model):
    assert "no graph" in repr(model)


def test_integer_category_values_accepted(model):
    var = model.add_variable(3)
    block = model.add_variables((1, 2), 1)
    assert var.cat == pulp.LpInteger
    assert block[0][0].cat == pulp.LpContinuous


def test_unknown_category_value_rejected(model):
    with pytest.raises(VariableCreationFailed, match="Unknown variable category 42"):
        model.add_variable(42)
    assert model.num_variables() == 0


def test_rename_is_sanitized_by_pulp(model):
    var = model.add_variable(FlowCategory.CONTINUOUS)
    model.set_variable_name(var, "flow_a-b_to_c")
    assert var.name == "flow_a_b_to_c"


def test_rename_colliding_with_other_variable_is_skipped(model):
    first = model.add_variable(FlowCategory.CONTINUOUS)
    second = model.add_variable(FlowCategory.CONTINUOUS)
    model.set_variable_name(first, "flow a")
    model.set_variable_name(second, "flow-a")

    assert first.name == "flow_a"
    assert second.name == "x_1"


def test_renamed_away_name_can_be_reused(model):
    first = model.add_variable(FlowCategory.CONTINUOUS)
    second = model.add_variable(FlowCategory.CONTINUOUS)
    model.set_variable_name(first, "cap")
    model.set_variable_name(first, "cap_ab")
    model.set_variable_name(second, "cap")

    assert first.name == "cap_ab"
    assert second.name == "cap"
