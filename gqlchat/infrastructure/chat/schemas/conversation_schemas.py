from datetime import datetime

from pydantic import BaseModel, Field


class MessageProjection(BaseModel):
    id: str = Field(..., description="Message id")
    author_id: str = Field(..., description="Id of the author")
    content: str = Field(..., max_length=100, description="Message text")
    published_at: datetime


class ConversationProjection(BaseModel):
    """Schema for returning a conversation with its messages."""

    id: str = Field(..., description="Conversation id")
    members: list[str] = Field(default_factory=list, description="Member ids, in join order")
    messages: list[MessageProjection] = Field(default_factory=list)
