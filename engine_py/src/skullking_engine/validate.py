"""
Input validation for roster entries and round scores.
"""

from typing import Any, List, Optional, Sequence, Tuple

from .constants import MAX_TRICKS, MIN_TRICKS
from .errors import DUPLICATE_NAME, EMPTY_NAME, INVALID_INPUT, raise_error
from .models import Player, Session

RoundEntry = Tuple[Any, Any]


def validate_player_name(players: List[Player], name: Optional[str]) -> str:
    """
    Check a new player's name against the current roster.

    Args:
        players: Current roster
        name: Raw name as typed

    Returns:
        The trimmed name

    Raises:
        GameError: EMPTY_NAME or DUPLICATE_NAME
    """
    trimmed = (name or '').strip()
    if not trimmed:
        raise_error(EMPTY_NAME, "Please enter a player name")
    # Exact, case-sensitive match
    if any(p.name == trimmed for p in players):
        raise_error(DUPLICATE_NAME, f"Player name '{trimmed}' already exists")
    return trimmed


def parse_count(value: Any) -> Optional[int]:
    """
    Parse a bet or tricks-won value.

    UI inputs arrive as ints, floats or strings. Returns None when the value
    is missing, non-integral or outside the allowed range.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        parsed = int(value)
    elif isinstance(value, str):
        text = value.strip()
        # Range is 0-10, so never more than two digits
        if not text.isdecimal() or len(text) > 2:
            return None
        parsed = int(text)
    else:
        return None
    if parsed < MIN_TRICKS or parsed > MAX_TRICKS:
        return None
    return parsed


def validate_round_inputs(session: Session, entries: Sequence[RoundEntry]) -> List[Tuple[int, int]]:
    """
    Validate one (bet, tricks_won) pair per player, in roster order.

    All entries are checked before anything is returned so a single bad
    value rejects the whole round.

    Raises:
        GameError: INVALID_INPUT naming the players with bad entries
    """
    if entries is None or len(entries) != len(session.players):
        got = 0 if entries is None else len(entries)
        raise_error(
            INVALID_INPUT,
            f"Expected {len(session.players)} entries, got {got}"
        )

    parsed: List[Tuple[int, int]] = []
    bad_names = []
    for player, entry in zip(session.players, entries):
        try:
            bet_raw, tricks_raw = entry
        except (TypeError, ValueError):
            bad_names.append(player.name)
            continue
        bet = parse_count(bet_raw)
        tricks_won = parse_count(tricks_raw)
        if bet is None or tricks_won is None:
            bad_names.append(player.name)
            continue
        parsed.append((bet, tricks_won))

    if bad_names:
        raise_error(
            INVALID_INPUT,
            f"Please enter valid scores ({MIN_TRICKS}-{MAX_TRICKS}) for all players: {', '.join(bad_names)}"
        )
    return parsed
