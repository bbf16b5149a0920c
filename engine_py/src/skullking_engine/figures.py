"""
Plotly rendering of the score graph.
"""

import plotly.graph_objects as go

from .graph import ScoreGraph

PAPER_COLOR = '#F5F2E8'
GRID_COLOR = 'rgba(0, 0, 0, 0.1)'
ZERO_LINE_COLOR = 'rgba(0, 0, 0, 0.3)'
LABEL_COLOR = '#6b6b6b'
FONT_FAMILY = '"JetBrains Mono", monospace'


def score_figure(graph: ScoreGraph, height: int = 320) -> go.Figure:
    """Render a ScoreGraph. Safe to call repeatedly; builds a fresh figure every time."""
    fig = go.Figure()
    fig.update_layout(
        height=height,
        margin=dict(t=40, r=30, b=50, l=50),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(family=FONT_FAMILY, size=12, color=LABEL_COLOR),
        showlegend=not graph.empty,
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='left', x=0),
    )

    if graph.empty:
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False)
        fig.add_annotation(
            text=graph.message,
            x=0.5, y=0.5, xref='paper', yref='paper',
            showarrow=False,
            font=dict(size=14, color=LABEL_COLOR),
        )
        return fig

    for series in graph.series:
        fig.add_trace(go.Scatter(
            x=[p.sample for p in series.points],
            y=series.values,
            name=series.name,
            mode='lines+markers',
            line=dict(color=series.color, width=3),
            marker=dict(
                symbol='square',
                size=10,
                color=PAPER_COLOR,
                line=dict(color=series.color, width=2),
            ),
            hovertemplate=f"{series.name}<br>%{{text}}: %{{y}}<extra></extra>",
            text=[graph.x_labels[p.sample] for p in series.points],
        ))

    fig.add_hline(y=0, line=dict(color=ZERO_LINE_COLOR, width=2, dash='dash'))

    sample_count = len(graph.x_labels)
    fig.update_xaxes(
        range=[-0.2, sample_count - 0.8],
        tickmode='array',
        tickvals=list(range(sample_count)),
        ticktext=graph.x_labels,
        showgrid=False,
        zeroline=False,
    )
    fig.update_yaxes(
        range=[graph.min_score, graph.max_score],
        tickmode='array',
        tickvals=[g.value for g in graph.gridlines],
        ticktext=[g.label for g in graph.gridlines],
        showgrid=True,
        gridcolor=GRID_COLOR,
        zeroline=False,
    )
    return fig
