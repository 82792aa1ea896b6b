"""Pydantic schemas for simulation sessions."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from kickabout.simulation.core.field import DEFAULT_FIELD_HEIGHT, DEFAULT_FIELD_WIDTH
from kickabout.simulation.core.input import InputIntent
from kickabout.simulation.core.vec2 import Vec2


class PointerModel(BaseModel):
    """Pointer position in field coordinates."""
    x: float
    y: float


class InputIntentRequest(BaseModel):
    """Input levels for the frames being advanced.

    Every field is optional; anything omitted means "not pressed".
    """
    pointer: Optional[PointerModel] = None
    sprint: bool = False
    shoot_held: bool = False
    pass_held: bool = False
    dodge_held: bool = False

    @field_validator("pointer", mode="before")
    @classmethod
    def _pointer_or_none(cls, value: Any) -> Any:
        # A partial or non-numeric pointer means no steering target.
        if isinstance(value, PointerModel):
            return value
        if not isinstance(value, dict):
            return None
        for key in ("x", "y"):
            coord = value.get(key)
            if isinstance(coord, bool) or not isinstance(coord, (int, float)):
                return None
        return value

    @field_validator("sprint", "shoot_held", "pass_held", "dodge_held", mode="before")
    @classmethod
    def _flag_or_false(cls, value: Any) -> bool:
        return value if isinstance(value, bool) else False

    def to_intent(self) -> InputIntent:
        return InputIntent(
            pointer=Vec2(self.pointer.x, self.pointer.y) if self.pointer else None,
            sprint=self.sprint,
            shoot_held=self.shoot_held,
            pass_held=self.pass_held,
            dodge_held=self.dodge_held,
        )


class CreateSessionRequest(BaseModel):
    """Request to start a simulation session."""
    width: float = Field(default=DEFAULT_FIELD_WIDTH, gt=0)
    height: float = Field(default=DEFAULT_FIELD_HEIGHT, gt=0)
    seed: Optional[int] = None


class AdvanceRequest(BaseModel):
    """Advance a session by some frames holding the same input."""
    frames: int = Field(default=1, ge=1, le=600)
    input: Optional[InputIntentRequest] = Field(default_factory=InputIntentRequest)

    @field_validator("input", mode="before")
    @classmethod
    def _input_or_default(cls, value: Any) -> Any:
        # Anything that is not an intent object is treated as no input.
        if value is None or not isinstance(value, (dict, InputIntentRequest)):
            return InputIntentRequest()
        return value


class ResizeRequest(BaseModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)


class SessionResponse(BaseModel):
    """Session state plus any events from the request."""
    session_id: str
    state: dict[str, Any]
    events: list[dict[str, Any]] = Field(default_factory=list)


class SessionLogResponse(BaseModel):
    session_id: str
    summary: str
    entries: list[str]
