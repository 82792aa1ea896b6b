"""REST API router for simulation sessions (start, advance, inspect, stop)."""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, HTTPException

from kickabout.api.schemas.session import (
    AdvanceRequest,
    CreateSessionRequest,
    InputIntentRequest,
    ResizeRequest,
    SessionLogResponse,
    SessionResponse,
)
from kickabout.logging import SessionLog
from kickabout.simulation import Orchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@dataclass
class _Session:
    orchestrator: Orchestrator
    log: SessionLog


# Store active sessions
_sessions: dict[str, _Session] = {}
_session_counter = 0


def _get_session(session_id: str) -> _Session:
    session = _sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def active_session_ids() -> list[str]:
    return list(_sessions)


def remove_session(session_id: str) -> bool:
    """Stop and forget a session. Returns False if it did not exist."""
    session = _sessions.pop(session_id, None)
    if session is None:
        return False
    session.orchestrator.stop()
    return True


@router.post("", response_model=SessionResponse)
async def create_session(request: Optional[CreateSessionRequest] = None) -> SessionResponse:
    """Create and start a new session."""
    global _session_counter
    _session_counter += 1
    session_id = f"session-{_session_counter}"

    if request is None:
        request = CreateSessionRequest()

    orch = Orchestrator(width=request.width, height=request.height, seed=request.seed)
    log = SessionLog(orch.event_bus)
    orch.start_session()

    _sessions[session_id] = _Session(orchestrator=orch, log=log)
    logger.info("Created %s", session_id)

    return SessionResponse(
        session_id=session_id,
        state=orch.state.to_dict(),
    )


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Get current session state."""
    session = _get_session(session_id)
    return SessionResponse(
        session_id=session_id,
        state=session.orchestrator.state.to_dict(),
    )


@router.post("/{session_id}/frames", response_model=SessionResponse)
async def advance_session(session_id: str, request: Optional[AdvanceRequest] = None) -> SessionResponse:
    """Advance the session, holding the same input for every frame."""
    session = _get_session(session_id)
    if request is None:
        request = AdvanceRequest()

    orch = session.orchestrator
    if not orch.running:
        raise HTTPException(status_code=409, detail="Session is stopped")

    intent = (request.input or InputIntentRequest()).to_intent()
    events = []
    for _ in range(request.frames):
        result = orch.advance(intent)
        events.extend(e.to_dict() for e in result.events)

    return SessionResponse(
        session_id=session_id,
        state=orch.state.to_dict(),
        events=events,
    )


@router.post("/{session_id}/resize", response_model=SessionResponse)
async def resize_session(session_id: str, request: ResizeRequest) -> SessionResponse:
    """Resize the field; the goal follows the right touchline."""
    session = _get_session(session_id)
    session.orchestrator.resize(request.width, request.height)
    return SessionResponse(
        session_id=session_id,
        state=session.orchestrator.state.to_dict(),
    )


@router.get("/{session_id}/log", response_model=SessionLogResponse)
async def get_session_log(session_id: str) -> SessionLogResponse:
    """Session summary and log entries."""
    session = _get_session(session_id)
    return SessionLogResponse(
        session_id=session_id,
        summary=session.log.format_summary(),
        entries=[entry.format() for entry in session.log.entries],
    )


@router.delete("/{session_id}")
async def delete_session(session_id: str) -> dict:
    """Stop and delete a session."""
    return {"deleted": remove_session(session_id)}
