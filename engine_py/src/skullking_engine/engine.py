"""Scorekeeping engine: roster, round advance and session lifecycle"""

import logging
import threading
from typing import Dict, Optional, Sequence

from .constants import (
    MAX_ROUNDS,
    MIN_PLAYERS,
    PALETTE,
    PHASE_ENDED,
    PHASE_IN_PROGRESS,
    PHASE_SETUP,
)
from .errors import (
    CONFIRMATION_REQUIRED,
    GAME_NOT_STARTED,
    GAME_OVER,
    INSUFFICIENT_PLAYERS,
    INVALID_INDEX,
    ROSTER_FROZEN,
    SESSION_NOT_FOUND,
    GameError,
    raise_error,
)
from .models import ActionResult, GameEnd, Player, RoundResult, Session
from .ranking import leaderboard
from .scoring import calculate_score
from .validate import RoundEntry, validate_player_name, validate_round_inputs

logger = logging.getLogger(__name__)


def create_session(session_id: Optional[str] = None) -> Session:
    if session_id:
        return Session(id=session_id)
    return Session()


def _require_setup(state: Session):
    if state.phase != PHASE_SETUP:
        raise_error(ROSTER_FROZEN, "Players cannot be changed once the game has started")


def add_player(state: Session, name: Optional[str]) -> ActionResult:
    """Append a player. Only allowed before the game starts."""
    try:
        _require_setup(state)
        trimmed = validate_player_name(state.players, name)
    except GameError as e:
        logger.debug(f"Rejected player {name!r} in session {state.id}: {e}")
        return ActionResult.error(state, e.code, e.message)

    color_index = len(state.players) % len(PALETTE)
    state.players.append(Player(name=trimmed, color_index=color_index))
    state.version += 1
    logger.info(f"Session {state.id}: added player {trimmed} (color {color_index})")
    return ActionResult.ok(state)


def remove_player(state: Session, index: int) -> ActionResult:
    """Remove the player at a 0-based roster index. Other players keep their colours."""
    try:
        _require_setup(state)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(state.players):
            raise_error(INVALID_INDEX, f"No player at position {index}")
    except GameError as e:
        return ActionResult.error(state, e.code, e.message)

    removed = state.players.pop(index)
    state.version += 1
    logger.info(f"Session {state.id}: removed player {removed.name}")
    return ActionResult.ok(state)


def start_game(state: Session) -> ActionResult:
    """Freeze the roster and begin round 1."""
    if state.phase != PHASE_SETUP:
        return ActionResult.error(state, ROSTER_FROZEN, "Game has already started")
    if len(state.players) < MIN_PLAYERS:
        return ActionResult.error(
            state, INSUFFICIENT_PLAYERS, f"Need at least {MIN_PLAYERS} players to start"
        )
    state.phase = PHASE_IN_PROGRESS
    state.version += 1
    logger.info(f"Session {state.id}: game started with {len(state.players)} players")
    return ActionResult.ok(state)


def advance_round(state: Session, entries: Sequence[RoundEntry]) -> ActionResult:
    """
    Record one round for every player.

    Entries are (bet, tricks_won) pairs in roster order. The whole round is
    validated first; on any bad entry nothing changes. Every player is scored
    against the same round number, then the round counter moves on. Scoring
    the last round ends the game and the result carries the final ranking.
    """
    try:
        if state.phase == PHASE_SETUP:
            raise_error(GAME_NOT_STARTED, "Start the game before recording rounds")
        if state.phase == PHASE_ENDED or state.current_round > MAX_ROUNDS:
            raise_error(GAME_OVER, "All rounds have been played")
        parsed = validate_round_inputs(state, entries)
    except GameError as e:
        logger.warning(f"Session {state.id}: round {state.current_round} rejected: {e}")
        return ActionResult.error(state, e.code, e.message)

    round_number = state.current_round
    for player, (bet, tricks_won) in zip(state.players, parsed):
        score = calculate_score(bet, tricks_won, round_number)
        player.rounds.append(RoundResult(
            round_number=round_number,
            bet=bet,
            tricks_won=tricks_won,
            score=score,
        ))
        player.total_score += score

    state.current_round += 1
    state.version += 1
    logger.info(f"Session {state.id}: round {round_number} recorded")

    if state.current_round > MAX_ROUNDS:
        return ActionResult.ok(state, game_end=_end_game(state))
    return ActionResult.ok(state)


def _end_game(state: Session) -> GameEnd:
    ranking = leaderboard(state)
    state.phase = PHASE_ENDED
    winner = ranking[0]
    logger.info(f"Session {state.id}: game over, {winner.name} wins with {winner.total_score}")
    return GameEnd(winner=winner, ranking=ranking)


def requires_reset_confirmation(state: Session) -> bool:
    """Resetting now would throw away players or scores the user has not finished with."""
    return state.current_round <= MAX_ROUNDS and len(state.players) > 0


def can_reset_safely(state: Session) -> bool:
    return not requires_reset_confirmation(state)


def reset_game(state: Session, confirmed: bool = True) -> ActionResult:
    """
    Discard all players and rounds and go back to setup.

    Pass confirmed=False when the user has not been asked yet; the reset is
    then refused with CONFIRMATION_REQUIRED whenever it would lose data.
    """
    if not confirmed and requires_reset_confirmation(state):
        return ActionResult.error(
            state, CONFIRMATION_REQUIRED, "Start a new game? All scores will be reset."
        )
    state.players = []
    state.current_round = 1
    state.phase = PHASE_SETUP
    state.version += 1
    logger.info(f"Session {state.id}: reset")
    return ActionResult.ok(state)


class SkullKingEngine:
    """
    Holds sessions by id. Each session has its own lock so commands apply atomically.

    With max_sessions set, creating a session past the limit drops the oldest one.
    """

    def __init__(self, max_sessions: Optional[int] = None):
        self.sessions: Dict[str, Session] = {}
        self.session_locks: Dict[str, threading.Lock] = {}
        self.registry_lock = threading.Lock()
        self.max_sessions = max_sessions

    def create_session(self, session_id: Optional[str] = None) -> Session:
        with self.registry_lock:
            if session_id and session_id in self.sessions:
                return self.sessions[session_id]
            state = create_session(session_id)
            self.sessions[state.id] = state
            self.session_locks[state.id] = threading.Lock()
            self._evict_oldest()
            return state

    def _evict_oldest(self):
        if self.max_sessions is None:
            return
        while len(self.sessions) > self.max_sessions:
            oldest = next(iter(self.sessions))
            del self.sessions[oldest]
            self.session_locks.pop(oldest, None)
            logger.info(f"Session {oldest}: evicted")

    def get_session(self, session_id: str) -> Optional[Session]:
        return self.sessions.get(session_id)

    def drop_session(self, session_id: str) -> bool:
        with self.registry_lock:
            removed = self.sessions.pop(session_id, None)
            self.session_locks.pop(session_id, None)
        return removed is not None

    def _run(self, session_id: str, command, *args) -> ActionResult:
        lock = self.session_locks.get(session_id)
        if lock is None:
            return ActionResult.error(None, SESSION_NOT_FOUND, "Session not found")
        with lock:
            state = self.get_session(session_id)
            # Dropped while waiting for the lock
            if not state:
                return ActionResult.error(None, SESSION_NOT_FOUND, "Session not found")
            return command(state, *args)

    def add_player(self, session_id: str, name: Optional[str]) -> ActionResult:
        return self._run(session_id, add_player, name)

    def remove_player(self, session_id: str, index: int) -> ActionResult:
        return self._run(session_id, remove_player, index)

    def start_game(self, session_id: str) -> ActionResult:
        return self._run(session_id, start_game)

    def advance_round(self, session_id: str, entries: Sequence[RoundEntry]) -> ActionResult:
        return self._run(session_id, advance_round, entries)

    def reset_game(self, session_id: str, confirmed: bool = True) -> ActionResult:
        return self._run(session_id, reset_game, confirmed)
