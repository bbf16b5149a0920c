"""
State serialization for the presentation layer.
"""

from dataclasses import asdict
from typing import Any, Dict, Optional

from .engine import requires_reset_confirmation
from .graph import ScoreGraph, build_graph
from .history import build_history
from .models import GameEnd, LeaderboardEntry, Player, Session
from .ranking import leaderboard


def sanitize_state(state: Session) -> Dict[str, Any]:
    """
    Build a read-only, JSON-ready snapshot of a session.

    Args:
        state: Session to snapshot

    Returns:
        Everything a renderer needs: roster, round counter, leaderboard,
        history and graph data
    """
    return {
        "id": state.id,
        "version": state.version,
        "phase": state.phase,
        "current_round": state.current_round,
        "can_start": state.can_start,
        "is_active": state.is_active,
        "reset_needs_confirmation": requires_reset_confirmation(state),
        "players": [serialize_player(p) for p in state.players],
        "leaderboard": [serialize_entry(e) for e in leaderboard(state)],
        "history": [asdict(r) for r in build_history(state)],
        "graph": serialize_graph(build_graph(state)),
    }


def serialize_player(player: Player) -> Dict[str, Any]:
    return {
        "name": player.name,
        "color_index": player.color_index,
        "color": player.color,
        "dark_color": player.dark_color,
        "total_score": player.total_score,
        "rounds": [asdict(r) for r in player.rounds],
    }


def serialize_entry(entry: LeaderboardEntry) -> Dict[str, Any]:
    data = asdict(entry)
    data["is_leader"] = entry.is_leader
    return data


def serialize_graph(graph: ScoreGraph) -> Dict[str, Any]:
    return asdict(graph)


def serialize_game_end(game_end: Optional[GameEnd]) -> Optional[Dict[str, Any]]:
    if game_end is None:
        return None
    return {
        "winner": serialize_entry(game_end.winner),
        "ranking": [serialize_entry(e) for e in game_end.ranking],
    }
