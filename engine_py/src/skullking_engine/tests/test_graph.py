"""
Tests for score graph scaling and plotly rendering.
"""

import pytest
from skullking_engine.constants import EMPTY_GRAPH_MESSAGE
from skullking_engine.engine import add_player, advance_round, create_session, start_game
from skullking_engine.figures import score_figure
from skullking_engine.graph import build_graph, cumulative_scores, round_half_up


def started(*names):
    state = create_session("graph")
    for name in names:
        add_player(state, name)
    start_game(state)
    return state


def test_graph_empty_before_first_round():
    state = started("Alice", "Bob")
    graph = build_graph(state)
    assert graph.empty
    assert graph.message == EMPTY_GRAPH_MESSAGE
    assert graph.series == []


def test_graph_scaling_after_first_round():
    state = started("P1", "P2")
    advance_round(state, [(3, 3), (2, 0)])
    graph = build_graph(state)

    assert not graph.empty
    assert graph.max_score == 60
    assert graph.min_score == -50
    assert graph.score_range == 110
    assert graph.x_labels == ["R0", "R1"]

    p1, p2 = graph.series
    assert p1.values == [0, 60]
    assert p2.values == [0, -20]
    assert [pt.x for pt in p1.points] == [0.0, 1.0]
    assert p1.points[1].y == pytest.approx(0.0)
    assert p2.points[1].y == pytest.approx(1 - 30 / 110)
    assert graph.zero_y == pytest.approx(60 / 110)
    assert p1.color == state.players[0].color


def test_graph_floor_and_ceiling_for_small_scores():
    state = started("Alice", "Bob")
    advance_round(state, [(1, 1), (1, 0)])
    graph = build_graph(state)
    assert graph.max_score == 50
    assert graph.min_score == -50
    assert graph.score_range == 100
    assert graph.zero_y == pytest.approx(0.5)


def test_graph_expands_below_floor():
    state = started("Alice", "Bob")
    advance_round(state, [(0, 8), (5, 5)])
    graph = build_graph(state)
    assert graph.min_score == -80
    assert graph.max_score == 100
    assert graph.series[0].points[1].y == pytest.approx(1.0)
    assert graph.series[1].points[1].y == pytest.approx(0.0)


def test_gridlines_and_labels():
    state = started("P1", "P2")
    advance_round(state, [(3, 3), (2, 0)])
    graph = build_graph(state)
    assert [g.y for g in graph.gridlines] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert [g.value for g in graph.gridlines] == [60, 32.5, 5, -22.5, -50]
    assert [g.label for g in graph.gridlines] == ["60", "33", "5", "-22", "-50"]


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_graph_spans_all_rounds_and_is_pure():
    state = started("Alice", "Bob")
    for _ in range(10):
        advance_round(state, [(1, 1), (0, 0)])
    version = state.version

    first = build_graph(state)
    second = build_graph(state)
    assert first == second
    assert state.version == version

    assert first.x_labels == [f"R{i}" for i in range(11)]
    assert first.series[0].values == cumulative_scores(state.players[0])
    assert first.series[0].values[-1] == 200
    assert first.series[1].values[-1] == sum(10 * r for r in range(1, 11))
    xs = [pt.x for pt in first.series[0].points]
    assert xs[0] == 0.0 and xs[-1] == 1.0
    assert xs[5] == pytest.approx(0.5)


def test_figure_has_one_trace_per_player():
    state = started("Alice", "Bob", "Charlie")
    advance_round(state, [(1, 1), (0, 0), (2, 1)])
    fig = score_figure(build_graph(state), height=400)
    assert len(fig.data) == 3
    assert [t.name for t in fig.data] == ["Alice", "Bob", "Charlie"]
    assert fig.data[0].line.color == state.players[0].color
    assert fig.layout.height == 400
    assert list(fig.layout.xaxis.ticktext) == ["R0", "R1"]
    # Dashed zero line
    assert any(shape.line.dash == 'dash' and shape.y0 == 0 for shape in fig.layout.shapes)


def test_empty_figure_shows_placeholder():
    state = started("Alice", "Bob")
    fig = score_figure(build_graph(state))
    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == EMPTY_GRAPH_MESSAGE
