"""
Cumulative score graph geometry.

The graph is a pure function of the session: every call rebuilds it from
the players' recorded rounds, so it can be re-rendered at any time (for
example on a resize) without touching game state.
"""

import math
from dataclasses import dataclass, field
from typing import List

from .constants import (
    EMPTY_GRAPH_MESSAGE,
    GRAPH_DEFAULT_RANGE,
    GRAPH_DIVISIONS,
    GRAPH_MAX_FLOOR,
    GRAPH_MIN_CEILING,
)
from .models import Player, Session


@dataclass
class GraphPoint:
    sample: int  # round index, 0 = before round 1
    value: int
    x: float  # fraction of plot width from the left
    y: float  # fraction of plot height from the top


@dataclass
class GraphSeries:
    name: str
    color: str
    points: List[GraphPoint]

    @property
    def values(self) -> List[int]:
        return [p.value for p in self.points]


@dataclass
class GridLine:
    y: float
    value: float
    label: str


@dataclass
class ScoreGraph:
    series: List[GraphSeries] = field(default_factory=list)
    min_score: int = GRAPH_MAX_FLOOR
    max_score: int = GRAPH_MIN_CEILING
    score_range: int = GRAPH_MIN_CEILING - GRAPH_MAX_FLOOR
    zero_y: float = 0.5
    gridlines: List[GridLine] = field(default_factory=list)
    x_labels: List[str] = field(default_factory=list)
    empty: bool = True
    message: str = EMPTY_GRAPH_MESSAGE


def cumulative_scores(player: Player) -> List[int]:
    """Running totals starting from 0 before the first round."""
    scores = [0]
    for result in player.rounds:
        scores.append(scores[-1] + result.score)
    return scores


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def value_to_y(value: float, min_score: int, score_range: int) -> float:
    return 1 - (value - min_score) / score_range


def sample_to_x(sample: int, sample_count: int) -> float:
    if sample_count <= 1:
        return 0.0
    return sample / (sample_count - 1)


def build_graph(state: Session) -> ScoreGraph:
    """
    Build the score graph for the current session.

    Args:
        state: Session to plot

    Returns:
        ScoreGraph with one series per player in roster order. `empty` is set
        until at least one round has been recorded.
    """
    sample_count = state.current_round  # samples 0..current_round-1
    if sample_count <= 1 or not state.players:
        return ScoreGraph()

    all_series = [(player, cumulative_scores(player)[:sample_count]) for player in state.players]
    all_values = [v for _, values in all_series for v in values]

    max_score = max(all_values + [GRAPH_MIN_CEILING])
    min_score = min(all_values + [GRAPH_MAX_FLOOR])
    score_range = (max_score - min_score) or GRAPH_DEFAULT_RANGE

    series = []
    for player, values in all_series:
        points = [
            GraphPoint(
                sample=i,
                value=value,
                x=sample_to_x(i, sample_count),
                y=value_to_y(value, min_score, score_range),
            )
            for i, value in enumerate(values)
        ]
        series.append(GraphSeries(name=player.name, color=player.color, points=points))

    gridlines = []
    for i in range(GRAPH_DIVISIONS + 1):
        value = max_score - (score_range / GRAPH_DIVISIONS) * i
        gridlines.append(GridLine(
            y=i / GRAPH_DIVISIONS,
            value=value,
            label=str(round_half_up(value)),
        ))

    return ScoreGraph(
        series=series,
        min_score=min_score,
        max_score=max_score,
        score_range=score_range,
        zero_y=value_to_y(0, min_score, score_range),
        gridlines=gridlines,
        x_labels=[f"R{i}" for i in range(sample_count)],
        empty=False,
        message='',
    )
