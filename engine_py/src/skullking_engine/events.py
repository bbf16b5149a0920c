"""
Request and error models for the JSON command API.
"""

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes returned to clients."""
    EMPTY_NAME = "EMPTY_NAME"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    INVALID_INDEX = "INVALID_INDEX"
    ROSTER_FROZEN = "ROSTER_FROZEN"
    INSUFFICIENT_PLAYERS = "INSUFFICIENT_PLAYERS"
    GAME_NOT_STARTED = "GAME_NOT_STARTED"
    GAME_OVER = "GAME_OVER"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    CONFIRMATION_REQUIRED = "CONFIRMATION_REQUIRED"


class AddPlayerRequest(BaseModel):
    """Add player command."""
    name: str = Field(..., max_length=30)


class RoundEntryModel(BaseModel):
    """One player's bet and tricks won, passed through untouched so the engine does all the checking."""
    bet: Any = None
    tricks_won: Any = None


class AdvanceRoundRequest(BaseModel):
    """Advance round command, one entry per player in roster order."""
    entries: List[RoundEntryModel]

    def as_pairs(self):
        return [(e.bet, e.tricks_won) for e in self.entries]


class ResetRequest(BaseModel):
    """Reset command. `confirmed` must be set whenever the session still has unfinished data."""
    confirmed: bool = False
