"""Game models and data structures"""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    MAX_ROUNDS,
    MIN_PLAYERS,
    PHASE_ENDED,
    PHASE_IN_PROGRESS,
    PHASE_SETUP,
    palette_color,
    palette_dark_color,
)


@dataclass(frozen=True)
class RoundResult:
    round_number: int
    bet: int
    tricks_won: int
    score: int

    @property
    def hit(self) -> bool:
        """True when the bet was made exactly."""
        return self.bet == self.tricks_won


@dataclass
class Player:
    name: str
    color_index: int
    rounds: List[RoundResult] = field(default_factory=list)
    total_score: int = 0

    @property
    def color(self) -> str:
        return palette_color(self.color_index)

    @property
    def dark_color(self) -> str:
        return palette_dark_color(self.color_index)

    def recomputed_total(self) -> int:
        return sum(r.score for r in self.rounds)


@dataclass
class Session:
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    players: List[Player] = field(default_factory=list)  # insertion order, not leaderboard order
    current_round: int = 1  # 11 once the last round is recorded
    phase: str = PHASE_SETUP  # setup|in_progress|ended
    version: int = 0

    @property
    def is_started(self) -> bool:
        return self.phase != PHASE_SETUP

    @property
    def is_over(self) -> bool:
        return self.phase == PHASE_ENDED

    @property
    def is_active(self) -> bool:
        """Whether round input is accepted."""
        return (
            self.phase == PHASE_IN_PROGRESS
            and len(self.players) >= MIN_PLAYERS
            and self.current_round <= MAX_ROUNDS
        )

    @property
    def can_start(self) -> bool:
        return self.phase == PHASE_SETUP and len(self.players) >= MIN_PLAYERS

    @property
    def completed_rounds(self) -> int:
        return self.current_round - 1


@dataclass
class LeaderboardEntry:
    rank: int
    name: str
    color: str
    total_score: int
    player_index: int  # position in the roster

    @property
    def is_leader(self) -> bool:
        return self.rank == 1


@dataclass
class GameEnd:
    """Hand-off to the presentation layer once the last round is scored."""
    winner: LeaderboardEntry
    ranking: List[LeaderboardEntry]


@dataclass
class ActionResult:
    success: bool
    state: Optional[Session] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    game_end: Optional[GameEnd] = None

    @classmethod
    def ok(cls, state: Session, game_end: Optional[GameEnd] = None) -> 'ActionResult':
        return cls(success=True, state=state, game_end=game_end)

    @classmethod
    def error(cls, state: Optional[Session], error_code: str, error_message: str) -> 'ActionResult':
        return cls(success=False, state=state, error_code=error_code, error_message=error_message)
