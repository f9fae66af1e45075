from enum import Enum
from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ReactionKind(str, Enum):
    THUMBS_UP = "thumbs_up"
    THUMBS_DOWN = "thumbs_down"


class Reactions(BaseModel):
    thumbs_up: bool = False
    thumbs_down: bool = False


class ChatMessage(BaseModel):
    id: int
    role: ChatRole
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    reactions: Optional[Reactions] = None
    is_error: bool = False


class QuickAction(BaseModel):
    label: str
    message: str


# Request bodies for the chat routes
class ChatRequest(BaseModel):
    message: str


class ReactionRequest(BaseModel):
    kind: ReactionKind
