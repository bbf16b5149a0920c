"""FastAPI JSON command API for the Skull King scorekeeper"""

import logging
from typing import Any

import orjson
from fastapi import FastAPI, HTTPException, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import load_config
from .engine import SkullKingEngine
from .errors import INPUT_ERRORS, SESSION_NOT_FOUND
from .events import AddPlayerRequest, AdvanceRoundRequest, ErrorCode, ResetRequest
from .models import ActionResult
from .serialization import sanitize_state, serialize_game_end

config = load_config()

# Configure logging
logging.basicConfig(level=config.logging_level)
logger = logging.getLogger(__name__)


class OrjsonResponse(JSONResponse):
    """JSON response rendered with orjson."""

    def render(self, content: Any) -> bytes:
        return orjson.dumps(content)


app = FastAPI(
    title="Skull King Scorekeeper API",
    version="1.0.0",
    default_response_class=OrjsonResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = SkullKingEngine(max_sessions=config.max_sessions)


@app.exception_handler(RequestValidationError)
async def round_validation_handler(request: Request, exc: RequestValidationError):
    # A malformed round body is bad round input like any other
    if request.method == "POST" and request.url.path.endswith("/rounds"):
        return OrjsonResponse(
            status_code=400,
            content={"detail": {
                "code": ErrorCode.INVALID_INPUT.value,
                "message": "Round entries must be a list of {bet, tricks_won} objects",
            }},
        )
    return await request_validation_exception_handler(request, exc)


def _respond(result: ActionResult) -> dict:
    if result.success:
        return {
            "state": sanitize_state(result.state),
            "game_end": serialize_game_end(result.game_end),
        }
    if result.error_code == SESSION_NOT_FOUND:
        status = 404
    elif result.error_code in INPUT_ERRORS:
        status = 400
    else:
        status = 409
    raise HTTPException(
        status_code=status,
        detail={"code": ErrorCode(result.error_code).value, "message": result.error_message},
    )


@app.get("/")
async def root():
    return {"message": "Skull King Scorekeeper API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.post("/sessions", status_code=201)
def create_session():
    state = engine.create_session()
    logger.info(f"Created session {state.id}")
    return {"state": sanitize_state(state), "game_end": None}


@app.get("/sessions/{session_id}")
def get_session(session_id: str):
    state = engine.get_session(session_id)
    if not state:
        raise HTTPException(
            status_code=404,
            detail={"code": ErrorCode.SESSION_NOT_FOUND.value, "message": "Session not found"},
        )
    return {"state": sanitize_state(state), "game_end": None}


@app.post("/sessions/{session_id}/players")
def add_player(session_id: str, request: AddPlayerRequest):
    return _respond(engine.add_player(session_id, request.name))


@app.delete("/sessions/{session_id}/players/{index}")
def remove_player(session_id: str, index: int):
    return _respond(engine.remove_player(session_id, index))


@app.post("/sessions/{session_id}/start")
def start_game(session_id: str):
    return _respond(engine.start_game(session_id))


@app.post("/sessions/{session_id}/rounds")
def advance_round(session_id: str, request: AdvanceRoundRequest):
    return _respond(engine.advance_round(session_id, request.as_pairs()))


@app.post("/sessions/{session_id}/reset")
def reset_game(session_id: str, request: ResetRequest):
    return _respond(engine.reset_game(session_id, request.confirmed))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)
