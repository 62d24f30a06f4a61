from .chat import JoinRequest, SendMessageRequest, Session, ChatMessage
from .board import PostMessageRequest, BoardMessage
from .beacon import BeaconRequest

__all__ = [
    "JoinRequest",
    "SendMessageRequest",
    "Session",
    "ChatMessage",
    "PostMessageRequest",
    "BoardMessage",
    "BeaconRequest",
]
