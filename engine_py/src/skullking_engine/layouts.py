"""Dash layouts for the scorekeeper UI"""

from typing import Optional

import dash_bootstrap_components as dbc
import pandas as pd
from dash import dcc, html

from .constants import EMPTY_HISTORY_MESSAGE, MAX_ROUNDS, MAX_TRICKS, MIN_TRICKS
from .figures import score_figure
from .graph import build_graph
from .history import build_history
from .models import GameEnd, Session
from .ranking import leaderboard, rank_label
from .scoring import format_points

CARD_STYLE = {'border': '3px solid #0A0A0A', 'borderRadius': '0', 'boxShadow': '6px 6px 0 #0A0A0A'}
SWATCH_STYLE = {'display': 'inline-block', 'width': '14px', 'height': '14px', 'marginRight': '8px', 'verticalAlign': 'middle'}


def color_swatch(color: str):
    return html.Span(style={**SWATCH_STYLE, 'backgroundColor': color})


def create_main_layout(session_id: str, graph_height: int = 320):
    return dbc.Container([
        dcc.Store(id='session-id', data=session_id),
        dcc.Store(id='game-version', data=0),
        dcc.Store(id='graph-height', data=graph_height),
        dcc.Store(id='error-message', data=''),
        html.H1("SKULL KING", className='mt-4 mb-0', style={'fontWeight': '900', 'letterSpacing': '0.1em'}),
        html.P("SCORE TRACKER", className='text-muted mb-4'),
        html.Div(id='game-content'),
        dbc.Toast(
            id='error-toast',
            header="Invalid action",
            icon='danger',
            is_open=False,
            dismissable=True,
            duration=4000,
            style={'position': 'fixed', 'top': 20, 'right': 20, 'zIndex': 2000},
        ),
        dbc.Modal([
            dbc.ModalHeader("New game"),
            dbc.ModalBody("Start a new game? All scores will be reset."),
            dbc.ModalFooter([
                dbc.Button("Cancel", id='cancel-reset-btn', color='secondary', n_clicks=0),
                dbc.Button("Reset", id='confirm-reset-btn', color='danger', n_clicks=0),
            ]),
        ], id='reset-modal', is_open=False),
        dbc.Modal([
            dbc.ModalHeader("GAME OVER"),
            dbc.ModalBody(id='winner-body'),
            dbc.ModalFooter(
                dbc.Button("NEW GAME", id='close-winner-modal', color='dark', n_clicks=0)
            ),
        ], id='winner-modal', is_open=False, backdrop='static', centered=True),
    ], fluid=True)


def create_setup_layout(state: Session):
    tags = []
    for index, player in enumerate(state.players):
        tags.append(dbc.Badge([
            color_swatch(player.color),
            html.Span(player.name),
            html.Button(
                "×",
                id={'type': 'remove-player', 'index': index},
                n_clicks=0,
                className='btn btn-sm btn-link text-light p-0 ms-2',
                **{'aria-label': f"Remove {player.name}"},
            ),
        ], color='dark', className='me-2 mb-2 p-2', style={'fontSize': '1rem'}))

    return dbc.Card([
        dbc.CardHeader(html.H4("PLAYERS", className='mb-0')),
        dbc.CardBody([
            dbc.InputGroup([
                dbc.Input(id='player-name-input', placeholder='Enter player name', type='text',
                          value='', maxLength=30, n_submit=0),
                dbc.Button("ADD", id='add-player-btn', color='dark', n_clicks=0),
            ], className='mb-3'),
            html.Div(tags, id='player-list', className='mb-3'),
            dbc.Button(
                "START GAME",
                id='start-game-btn',
                color='success',
                size='lg',
                n_clicks=0,
                style={'display': 'inline-flex' if state.can_start else 'none'},
            ),
        ]),
    ], style=CARD_STYLE)


def create_round_inputs(state: Session):
    cards = []
    for index, player in enumerate(state.players):
        cards.append(dbc.Col(dbc.Card([
            dbc.CardHeader([color_swatch(player.color), html.Strong(player.name)]),
            dbc.CardBody([
                dbc.Row([
                    dbc.Col([
                        dbc.Label("Bet"),
                        dbc.Input(id={'type': 'bet-input', 'index': index}, type='number',
                                  min=MIN_TRICKS, max=MAX_TRICKS, step=1, placeholder='0'),
                    ]),
                    dbc.Col([
                        dbc.Label("Won"),
                        dbc.Input(id={'type': 'tricks-input', 'index': index}, type='number',
                                  min=MIN_TRICKS, max=MAX_TRICKS, step=1, placeholder='0'),
                    ]),
                ]),
                html.Div(id={'type': 'score-preview', 'index': index}, className='mt-2 fw-bold'),
            ]),
        ], style=CARD_STYLE, className='mb-3'), md=6, lg=4))
    return dbc.Row(cards)


def score_preview_text(score: int, new_total: int) -> str:
    return f"{format_points(score)} → TOTAL: {new_total}"


def create_leaderboard_table(state: Session):
    entries = leaderboard(state)
    table_data = {
        'Rank': [rank_label(e) for e in entries],
        'Player': [e.name for e in entries],
        'Score': [e.total_score for e in entries],
    }
    return dbc.Table.from_dataframe(pd.DataFrame(table_data), striped=True, bordered=True, size='sm')


def create_history(state: Session):
    rounds = build_history(state)
    if not rounds:
        return html.Div(EMPTY_HISTORY_MESSAGE, className='text-muted text-center')

    blocks = []
    for history_round in rounds:
        items = []
        for entry in history_round.entries:
            items.append(html.Div([
                color_swatch(entry.dark_color),
                html.Span(entry.name, className='fw-bold me-2'),
                html.Span(f"BET {entry.bet} · WON {entry.tricks_won}", className='text-muted me-auto'),
                html.Span(
                    format_points(entry.score),
                    className='text-success fw-bold' if entry.score >= 0 else 'text-danger fw-bold',
                ),
            ], className=f"history-item {'success' if entry.hit else 'fail'} d-flex align-items-center mb-1"))
        blocks.append(html.Div([
            html.Div([
                dbc.Badge(f"R{history_round.round_number}", color='dark', className='me-2'),
                html.Span(f"ROUND {history_round.round_number}", className='fw-bold'),
            ], className='mb-2'),
            html.Div(items),
        ], className='history-round mb-3'))
    return html.Div(blocks, style={'maxHeight': '400px', 'overflowY': 'auto'})


def create_game_layout(state: Session, graph_height: int = 320):
    round_label = min(state.current_round, MAX_ROUNDS)
    next_round = dbc.Button(
        "NEXT ROUND" if state.current_round < MAX_ROUNDS else "FINISH GAME",
        id='next-round-btn',
        color='dark',
        size='lg',
        n_clicks=0,
        disabled=not state.is_active,
    )
    return html.Div([
        dbc.Row([
            dbc.Col(html.H3([
                "ROUND ",
                html.Span(round_label, id='current-round'),
                html.Small(f" / {MAX_ROUNDS}", className='text-muted'),
            ]), width='auto'),
            dbc.Col(dbc.Button("RESET", id='reset-btn', color='danger', outline=True, n_clicks=0),
                    width='auto', className='ms-auto'),
        ], className='mb-3 align-items-center'),
        dbc.Row([
            dbc.Col([
                dbc.Card([
                    dbc.CardHeader(html.H5(f"ROUND {round_label} SCORES", className='mb-0')),
                    dbc.CardBody([create_round_inputs(state), next_round]),
                ], style=CARD_STYLE, className='mb-4'),
                dbc.Card([
                    dbc.CardHeader(html.H5("SCORE GRAPH", className='mb-0')),
                    dbc.CardBody(dcc.Graph(
                        id='score-graph',
                        figure=score_figure(build_graph(state), height=graph_height),
                        config={'displayModeBar': False, 'responsive': True},
                    )),
                ], style=CARD_STYLE, className='mb-4'),
            ], lg=8),
            dbc.Col([
                dbc.Card([
                    dbc.CardHeader(html.H5("LEADERBOARD", className='mb-0')),
                    dbc.CardBody(create_leaderboard_table(state)),
                ], style=CARD_STYLE, className='mb-4'),
                dbc.Card([
                    dbc.CardHeader(html.H5("HISTORY", className='mb-0')),
                    dbc.CardBody(create_history(state)),
                ], style=CARD_STYLE, className='mb-4'),
            ], lg=4),
        ]),
    ])


def create_winner_body(game_end: Optional[GameEnd]):
    if game_end is None:
        return None
    winner = game_end.winner
    rows = []
    for entry in game_end.ranking:
        rows.append(html.Div([
            html.Span('★' if entry.is_leader else f"{entry.rank}.", className='me-2'),
            html.Span(entry.name, className='me-auto'),
            html.Span(entry.total_score, className='fw-bold'),
        ], className='d-flex' + (' fw-bold' if entry.is_leader else '')))
    return html.Div([
        html.H2(winner.name, className='text-center mb-0'),
        html.P(f"{winner.total_score} POINTS", className='text-center text-muted'),
        html.Hr(),
        html.Div(rows),
    ])
