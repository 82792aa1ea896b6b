"""API request/response schemas."""

from kickabout.api.schemas.session import (
    AdvanceRequest,
    CreateSessionRequest,
    InputIntentRequest,
    PointerModel,
    ResizeRequest,
    SessionLogResponse,
    SessionResponse,
)

__all__ = [
    "AdvanceRequest",
    "CreateSessionRequest",
    "InputIntentRequest",
    "PointerModel",
    "ResizeRequest",
    "SessionLogResponse",
    "SessionResponse",
]
