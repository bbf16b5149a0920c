# engine_py/src/skullking_engine/errors.py

class GameError(Exception):
    """Base exception for scorekeeping errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

# Roster entry
EMPTY_NAME = "EMPTY_NAME"
DUPLICATE_NAME = "DUPLICATE_NAME"
INVALID_INDEX = "INVALID_INDEX"
ROSTER_FROZEN = "ROSTER_FROZEN"
# Lifecycle
INSUFFICIENT_PLAYERS = "INSUFFICIENT_PLAYERS"
GAME_NOT_STARTED = "GAME_NOT_STARTED"
GAME_OVER = "GAME_OVER"
SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
CONFIRMATION_REQUIRED = "CONFIRMATION_REQUIRED"
# Round input
INVALID_INPUT = "INVALID_INPUT"

# Input problems the caller can fix by re-entering values
INPUT_ERRORS = frozenset({EMPTY_NAME, DUPLICATE_NAME, INVALID_INDEX, INVALID_INPUT})

# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise GameError(code, message)
