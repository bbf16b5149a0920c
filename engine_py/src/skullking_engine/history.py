"""
Per-round history view.
"""

from dataclasses import dataclass
from typing import List

from .models import Session


@dataclass
class HistoryEntry:
    name: str
    dark_color: str
    bet: int
    tricks_won: int
    score: int
    hit: bool


@dataclass
class HistoryRound:
    round_number: int
    entries: List[HistoryEntry]


def build_history(state: Session) -> List[HistoryRound]:
    """Completed rounds, most recent first. Empty before round 1 is scored."""
    history = []
    for round_number in range(state.current_round - 1, 0, -1):
        entries = []
        for player in state.players:
            if round_number > len(player.rounds):
                continue
            result = player.rounds[round_number - 1]
            entries.append(HistoryEntry(
                name=player.name,
                dark_color=player.dark_color,
                bet=result.bet,
                tricks_won=result.tricks_won,
                score=result.score,
                hit=result.hit,
            ))
        history.append(HistoryRound(round_number=round_number, entries=entries))
    return history
