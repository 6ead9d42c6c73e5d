"""Push-to-talk input gate models."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PTT_KEY = " "


class GatePhase(StrEnum):
    """Push-to-talk gate states."""

    IDLE = "idle"
    PUSHED = "pushed"


@dataclass(frozen=True)
class KeyEvent:
    """A raw keyboard event delivered by the UI layer."""

    key: str
    repeat: bool = False
    target_is_text_entry: bool = False  # input, textarea or contenteditable has focus


class PushToTalkSettings(BaseModel):
    """Process-wide push-to-talk configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    key: str = Field(default=DEFAULT_PTT_KEY, min_length=1)


class InputGateState(BaseModel):
    """Observable state of a push-to-talk arbiter."""

    model_config = ConfigDict(frozen=True)

    bound_key: str
    enabled: bool
    pushed: bool
