import logging

import dash
from dash import html, Input, Output, State, callback_context, ALL, MATCH, no_update
import dash_bootstrap_components as dbc

from skullking_engine.config import load_config
from skullking_engine.constants import PHASE_SETUP
from skullking_engine.engine import SkullKingEngine
from skullking_engine.errors import CONFIRMATION_REQUIRED
from skullking_engine.layouts import (
    create_game_layout,
    create_main_layout,
    create_setup_layout,
    create_winner_body,
    score_preview_text,
)
from skullking_engine.scoring import preview_score
from skullking_engine.validate import parse_count

config = load_config()
logging.basicConfig(level=config.logging_level)
logger = logging.getLogger(__name__)

engine = SkullKingEngine(max_sessions=config.max_sessions)

app = dash.Dash(__name__, external_stylesheets=[dbc.themes.BOOTSTRAP], suppress_callback_exceptions=True)
app.title = "Skull King Score Tracker"


def serve_layout():
    # One session per page load
    state = engine.create_session()
    logger.info(f"New browser session {state.id}")
    return create_main_layout(state.id, config.graph_height)


app.layout = serve_layout

# ===================== CALLBACKS =====================

@app.callback(
    Output('game-content', 'children'),
    [Input('session-id', 'data'),
     Input('game-version', 'data')],
    State('graph-height', 'data'),
)
def update_game_display(sid, version, graph_height):
    state = engine.get_session(sid) if sid else None
    if not state:
        return html.Div("Session expired, reload the page", className='text-muted')
    if state.phase == PHASE_SETUP:
        return create_setup_layout(state)
    return create_game_layout(state, graph_height)


@app.callback(
    [Output('game-version', 'data', allow_duplicate=True),
     Output('error-message', 'data', allow_duplicate=True),
     Output('player-name-input', 'value')],
    [Input('add-player-btn', 'n_clicks'),
     Input('player-name-input', 'n_submit')],
    [State('player-name-input', 'value'),
     State('session-id', 'data')],
    prevent_initial_call=True
)
def add_player(n_clicks, n_submit, name, sid):
    if not (n_clicks or n_submit):
        return no_update, no_update, no_update
    result = engine.add_player(sid, name)
    if not result.success:
        return no_update, result.error_message, no_update
    return result.state.version, '', ''


@app.callback(
    [Output('game-version', 'data', allow_duplicate=True),
     Output('error-message', 'data', allow_duplicate=True)],
    Input({'type': 'remove-player', 'index': ALL}, 'n_clicks'),
    State('session-id', 'data'),
    prevent_initial_call=True
)
def remove_player(clicks, sid):
    triggered = callback_context.triggered_id
    # Re-rendered buttons report n_clicks=0, only a real click removes
    if not triggered or not any(clicks):
        return no_update, no_update
    result = engine.remove_player(sid, triggered['index'])
    if not result.success:
        return no_update, result.error_message
    return result.state.version, ''


@app.callback(
    [Output('game-version', 'data', allow_duplicate=True),
     Output('error-message', 'data', allow_duplicate=True)],
    Input('start-game-btn', 'n_clicks'),
    State('session-id', 'data'),
    prevent_initial_call=True
)
def start_game(n_clicks, sid):
    if not n_clicks:
        return no_update, no_update
    result = engine.start_game(sid)
    if not result.success:
        return no_update, result.error_message
    return result.state.version, ''


@app.callback(
    Output({'type': 'score-preview', 'index': MATCH}, 'children'),
    Output({'type': 'score-preview', 'index': MATCH}, 'className'),
    [Input({'type': 'bet-input', 'index': MATCH}, 'value'),
     Input({'type': 'tricks-input', 'index': MATCH}, 'value')],
    State('session-id', 'data'),
)
def update_score_preview(bet, tricks_won, sid):
    state = engine.get_session(sid) if sid else None
    bet, tricks_won = parse_count(bet), parse_count(tricks_won)
    if not state or not state.is_active or bet is None or tricks_won is None:
        return '', 'mt-2 fw-bold'
    index = callback_context.inputs_list[0]['id']['index']
    score, new_total = preview_score(state, index, bet, tricks_won)
    return score_preview_text(score, new_total), 'mt-2 fw-bold ' + ('text-success' if score >= 0 else 'text-danger')


@app.callback(
    [Output('game-version', 'data', allow_duplicate=True),
     Output('error-message', 'data', allow_duplicate=True),
     Output('winner-modal', 'is_open', allow_duplicate=True),
     Output('winner-body', 'children')],
    Input('next-round-btn', 'n_clicks'),
    [State({'type': 'bet-input', 'index': ALL}, 'value'),
     State({'type': 'tricks-input', 'index': ALL}, 'value'),
     State('session-id', 'data')],
    prevent_initial_call=True
)
def next_round(n_clicks, bets, tricks, sid):
    if not n_clicks:
        return no_update, no_update, no_update, no_update
    result = engine.advance_round(sid, list(zip(bets, tricks)))
    if not result.success:
        return no_update, result.error_message, no_update, no_update
    if result.game_end:
        return result.state.version, '', True, create_winner_body(result.game_end)
    return result.state.version, '', no_update, no_update


@app.callback(
    [Output('game-version', 'data', allow_duplicate=True),
     Output('reset-modal', 'is_open', allow_duplicate=True)],
    Input('reset-btn', 'n_clicks'),
    State('session-id', 'data'),
    prevent_initial_call=True
)
def request_reset(n_clicks, sid):
    if not n_clicks:
        return no_update, no_update
    result = engine.reset_game(sid, confirmed=False)
    if result.error_code == CONFIRMATION_REQUIRED:
        return no_update, True
    return (result.state.version if result.success else no_update), False


@app.callback(
    [Output('game-version', 'data', allow_duplicate=True),
     Output('reset-modal', 'is_open', allow_duplicate=True),
     Output('winner-modal', 'is_open', allow_duplicate=True)],
    [Input('confirm-reset-btn', 'n_clicks'),
     Input('cancel-reset-btn', 'n_clicks'),
     Input('close-winner-modal', 'n_clicks')],
    State('session-id', 'data'),
    prevent_initial_call=True
)
def handle_reset_modals(confirm_clicks, cancel_clicks, close_winner_clicks, sid):
    triggered = callback_context.triggered_id
    if triggered == 'cancel-reset-btn':
        return no_update, False, no_update
    if triggered in ('confirm-reset-btn', 'close-winner-modal'):
        result = engine.reset_game(sid)
        return (result.state.version if result.success else no_update), False, False
    return no_update, no_update, no_update


@app.callback(
    [Output('error-toast', 'is_open'), Output('error-toast', 'children')],
    Input('error-message', 'data'),
    prevent_initial_call=True
)
def show_error(error_msg):
    if error_msg:
        return True, error_msg
    return False, ''

# ===================== RUN SERVER =====================
if __name__ == '__main__':
    app.run(debug=config.debug, host=config.host, port=config.dash_port)
