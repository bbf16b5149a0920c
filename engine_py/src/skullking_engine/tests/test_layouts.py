"""
Tests for the Dash layout builders.
"""

from skullking_engine.constants import EMPTY_HISTORY_MESSAGE
from skullking_engine.engine import add_player, advance_round, create_session, start_game
from skullking_engine.layouts import (
    create_game_layout,
    create_history,
    create_leaderboard_table,
    create_setup_layout,
    create_winner_body,
    score_preview_text,
)


def find_by_id(component, component_id):
    if getattr(component, 'id', None) == component_id:
        return component
    children = getattr(component, 'children', None)
    if children is None:
        return None
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        found = find_by_id(child, component_id)
        if found is not None:
            return found
    return None


def test_start_button_visible_with_two_players():
    state = create_session()
    add_player(state, "Alice")
    button = find_by_id(create_setup_layout(state), 'start-game-btn')
    assert button.style['display'] == 'none'

    add_player(state, "Bob")
    layout = create_setup_layout(state)
    assert find_by_id(layout, 'start-game-btn').style['display'] == 'inline-flex'
    assert find_by_id(layout, {'type': 'remove-player', 'index': 1}) is not None


def test_game_layout_has_inputs_per_player():
    state = create_session()
    for name in ("Alice", "Bob", "Charlie"):
        add_player(state, name)
    start_game(state)
    layout = create_game_layout(state)
    for index in range(3):
        assert find_by_id(layout, {'type': 'bet-input', 'index': index}) is not None
        assert find_by_id(layout, {'type': 'tricks-input', 'index': index}) is not None
    assert find_by_id(layout, 'score-graph') is not None
    assert find_by_id(layout, 'next-round-btn').disabled is False


def test_history_empty_state():
    state = create_session()
    assert create_history(state).children == EMPTY_HISTORY_MESSAGE


def test_leaderboard_table_rows():
    state = create_session()
    add_player(state, "Alice")
    add_player(state, "Bob")
    start_game(state)
    advance_round(state, [(2, 0), (1, 1)])
    table = create_leaderboard_table(state)
    thead, tbody = table.children
    rows = tbody.children
    assert len(rows) == 2
    assert rows[0].children[0].children == '★'
    assert rows[0].children[1].children == 'Bob'


def test_winner_body():
    state = create_session()
    add_player(state, "Alice")
    add_player(state, "Bob")
    start_game(state)
    result = None
    for _ in range(10):
        result = advance_round(state, [(1, 1), (1, 0)])
    body = create_winner_body(result.game_end)
    title, points = body.children[0], body.children[1]
    assert title.children == "Alice"
    assert points.children == "200 POINTS"
    assert create_winner_body(None) is None


def test_score_preview_text():
    assert score_preview_text(60, 60) == "+60 → TOTAL: 60"
    assert score_preview_text(-20, -40) == "-20 → TOTAL: -40"
