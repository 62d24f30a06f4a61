from .beacon_service import BeaconCounter
from .message_service import BoardLog, MessageLog, parse_since
from .session_service import SessionRegistry
from .sweeper import SessionSweeper

__all__ = [
    "BeaconCounter",
    "BoardLog",
    "MessageLog",
    "parse_since",
    "SessionRegistry",
    "SessionSweeper",
]
