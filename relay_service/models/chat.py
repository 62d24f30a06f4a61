from typing import Any

from pydantic import BaseModel, Field


class JoinRequest(BaseModel):
    # Loosely typed so that presence and type checks produce the relay's own
    # error messages instead of a schema error.
    username: Any = None
    place_id: Any = Field(alias="placeId", default=None)
    job_id: Any = Field(alias="jobId", default=None)

    model_config = {"populate_by_name": True}


class SendMessageRequest(BaseModel):
    content: Any = None


class Session(BaseModel):
    token: str
    username: str
    place_id: int
    job_id: str
    expires_at: float


class ChatMessage(BaseModel):
    username: str
    content: str
    timestamp: int
