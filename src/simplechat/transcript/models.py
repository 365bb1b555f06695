"""Data models for the chat transcript.

These models define what a single chat turn is, independent of how the
transcript is stored or rendered.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who produced a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """One message entry in the transcript.

    Turns are immutable once created.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender = Field(description="Who produced the turn: 'user' or 'assistant'")
    text: str = Field(description="Displayable content of the turn")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.sender == Sender.USER
