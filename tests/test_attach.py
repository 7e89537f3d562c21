"""Tests for attaching graph models to optimization models."""

import logging

import networkx as nx
import pytest

from graphlp.attach import (
    build_formulation,
    check_formulation,
    get_graph,
    get_graph_model,
    has_formulation,
    has_graph,
    remove_graph,
    set_graph,
)
from graphlp.errors import (
    NoGraphAttached,
    UnknownFormulation,
    UnsupportedGraphType,
    VariableCreationFailed,
)
from graphlp.formulation import FORMULATION_BUILDERS, EdgeFlowState
from graphlp.graph import from_networkx
from graphlp.model import GraphModel
from graphlp.types import FlowCategory, FormulationKind


def test_set_graph_builds_formulation(model, complete4):
    gm = set_graph(model, complete4)

    assert has_graph(model)
    assert has_formulation(model)
    check_formulation(model)
    assert get_graph_model(model) is gm
    assert get_graph(model) is complete4
    assert isinstance(gm.builder_state, EdgeFlowState)
    assert gm.builder_state.shape == (12, 1)


def test_set_graph_with_graph_model(model, complete4):
    gm = GraphModel(complete4, commodities=["A", "B", "C"])
    returned = set_graph(model, gm)

    assert returned is gm
    assert model.graph_model is gm
    assert gm.builder_state.shape == (12, 3)


def test_set_graph_convenience_arguments(model, line_graph):
    gm = set_graph(
        model,
        line_graph,
        formulation="edge_flow",
        flow_category="Int",
        commodities=["x", "y"],
    )
    assert gm.formulation is FormulationKind.EDGE_FLOW
    assert gm.flow_category is FlowCategory.INTEGER
    assert gm.commodities == ["x", "y"]


def test_set_graph_twice_replaces_with_warning(model, complete4, line_graph, caplog):
    first = set_graph(model, complete4)
    with caplog.at_level(logging.WARNING, logger="graphlp"):
        second = set_graph(model, line_graph)

    assert model.graph_model is second
    assert second is not first
    assert second.builder_state.shape == (2, 1)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "will be replaced" in warnings[0].getMessage()


def test_first_attachment_does_not_warn(model, complete4, caplog):
    with caplog.at_level(logging.WARNING, logger="graphlp"):
        set_graph(model, complete4)
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_reattaching_graph_model_rebuilds(model, complete4):
    gm = set_graph(model, complete4)
    old_state = gm.builder_state
    set_graph(model, gm)

    assert gm.builder_state is not old_state
    assert model.num_variables() == 24


@pytest.mark.parametrize(
    "graph",
    [nx.complete_graph(4, create_using=nx.DiGraph), nx.Graph(), None, "A->B"],
)
def test_plain_graph_rejected_before_variables(model, graph):
    with pytest.raises(UnsupportedGraphType, match="from_networkx"):
        set_graph(model, graph)
    assert not has_graph(model)
    assert model.num_variables() == 0


def test_converted_graph_accepted(model):
    graph = from_networkx(nx.complete_graph(4, create_using=nx.DiGraph))
    gm = set_graph(model, graph)
    assert gm.builder_state.shape == (12, 1)


def test_failed_build_leaves_unbuilt_attachment(model, complete4):
    with pytest.raises(VariableCreationFailed):
        set_graph(model, complete4, flow_category=FlowCategory.SDP)

    assert has_graph(model)
    assert model.graph_model.builder_state is None
    assert not has_formulation(model)


def test_failed_rebuild_clears_previous_state(model, complete4, monkeypatch):
    gm = set_graph(model, complete4)
    monkeypatch.delitem(FORMULATION_BUILDERS, FormulationKind.EDGE_FLOW)

    with pytest.raises(UnknownFormulation):
        set_graph(model, gm)
    assert gm.builder_state is None
    assert not has_formulation(model)


def test_remove_graph(model, complete4):
    set_graph(model, complete4)
    remove_graph(model)

    assert not has_graph(model)
    assert not has_formulation(model)
    with pytest.raises(NoGraphAttached):
        get_graph_model(model)


def test_remove_graph_without_attachment(model):
    remove_graph(model)
    remove_graph(model)
    assert not has_graph(model)


def test_build_formulation_without_graph(model):
    with pytest.raises(NoGraphAttached):
        build_formulation(model)


def test_attachment_on_custom_host(bare_model, line_graph):
    gm = set_graph(bare_model, line_graph)
    assert bare_model.graph_model is gm
    assert len(bare_model.created) == 2


def test_set_graph_with_integer_options(model, line_graph):
    gm = set_graph(model, line_graph, formulation=1, flow_category=3)
    assert gm.formulation is FormulationKind.EDGE_FLOW
    assert gm.flow_category is FlowCategory.BINARY
    assert isinstance(gm.builder_state, EdgeFlowState)


def test_unknown_integer_formulation_after_construction(model, complete4):
    gm = GraphModel(complete4)
    gm.formulation = 9
    model.graph_model = gm
    with pytest.raises(UnknownFormulation):
        build_formulation(model)


@pytest.mark.parametrize(
    "options",
    [
        {"formulation": FormulationKind.PATH},
        {"delayed": False},
        {"flow_category": "Int"},
        {"commodities": ["gas"]},
    ],
)
def test_graph_model_with_options_rejected(model, complete4, options):
    gm = GraphModel(complete4)
    with pytest.raises(TypeError, match="cannot be combined with a GraphModel"):
        set_graph(model, gm, **options)
    assert not has_graph(model)
    assert model.num_variables() == 0
