from typing import Any

from pydantic import BaseModel


class PostMessageRequest(BaseModel):
    user: Any = None
    text: Any = None


class BoardMessage(BaseModel):
    user: str
    text: str
    time: str
