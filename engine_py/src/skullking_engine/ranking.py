# engine_py/src/skullking_engine/ranking.py

from typing import List, Optional

from .models import LeaderboardEntry, Session


def leaderboard(state: Session) -> List[LeaderboardEntry]:
    """
    Rank players by total score, highest first.

    Python's sort is stable, so players with equal totals keep their roster
    order and the earliest-added player ranks first.

    Args:
        state: The current Session.
    """
    indexed = sorted(
        enumerate(state.players),
        key=lambda pair: pair[1].total_score,
        reverse=True,
    )
    return [
        LeaderboardEntry(
            rank=position + 1,
            name=player.name,
            color=player.color,
            total_score=player.total_score,
            player_index=index,
        )
        for position, (index, player) in enumerate(indexed)
    ]


def determine_winner(state: Session) -> Optional[LeaderboardEntry]:
    ranking = leaderboard(state)
    return ranking[0] if ranking else None


def rank_label(entry: LeaderboardEntry) -> str:
    return '★' if entry.is_leader else str(entry.rank)
