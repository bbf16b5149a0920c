"""
Round scoring.
"""

from typing import Tuple

from .models import Session


def calculate_score(bet: int, tricks_won: int, round_number: int) -> int:
    """
    Score a single bet for the given round.

    A made zero bet earns 10 points per round number, any other made bet
    earns 20 points per trick. A missed bet loses 10 points per trick of
    difference, regardless of the round.

    Args:
        bet: Tricks the player predicted
        tricks_won: Tricks the player actually took
        round_number: 1-based round being scored

    Returns:
        Points earned (negative for a missed bet)
    """
    if bet == tricks_won:
        return 10 * round_number if bet == 0 else 20 * bet
    return -10 * abs(bet - tricks_won)


def preview_score(session: Session, player_index: int, bet: int, tricks_won: int) -> Tuple[int, int]:
    """Score this entry would earn in the current round, and the player's total after it."""
    player = session.players[player_index]
    score = calculate_score(bet, tricks_won, session.current_round)
    return score, player.total_score + score


def format_points(score: int) -> str:
    return f"+{score}" if score >= 0 else str(score)
