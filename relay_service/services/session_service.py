import logging
import time
import uuid
from typing import Any, Callable

from ..errors import BadRequestError, UnauthorizedError
from ..models.chat import Session

logger = logging.getLogger(__name__)


def _coerce_place_id(value: Any) -> int:
    """Accept ints, integral floats and digit strings; reject everything else."""
    if isinstance(value, bool):
        raise BadRequestError("placeId must be numeric")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise BadRequestError("placeId must be numeric")


class SessionRegistry:
    """Token -> session map for the chat deployment."""

    def __init__(self, ttl_seconds: int = 3600, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, token: str) -> bool:
        return token in self._sessions

    def join(self, username: Any, place_id: Any, job_id: Any) -> Session:
        """Register a player and hand out a fresh token.

        Older tokens held by the same player stay valid until they expire.
        """
        if not username or not place_id or not job_id:
            raise BadRequestError("Missing username / placeId / jobId")
        if not isinstance(username, str) or not isinstance(job_id, str):
            raise BadRequestError("username and jobId must be strings")

        session = Session(
            token=str(uuid.uuid4()),
            username=username,
            place_id=_coerce_place_id(place_id),
            job_id=job_id,
            expires_at=self._clock() + self.ttl_seconds,
        )
        self._sessions[session.token] = session
        logger.info("Player %s joined job %s (place %d)", username, job_id, session.place_id)
        return session

    def authenticate(self, token: str) -> Session:
        """Return the live session for a token.

        Expiry is checked here as well, so a token stops working at its
        nominal expiry rather than at the next sweep.
        """
        session = self._sessions.get(token)
        if session is None or session.expires_at <= self._clock():
            raise UnauthorizedError("Invalid or expired token")
        return session

    def sweep(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = self._clock()
        expired = [tok for tok, s in self._sessions.items() if s.expires_at <= now]
        for tok in expired:
            del self._sessions[tok]
        if expired:
            logger.debug("Swept %d expired session(s), %d remaining", len(expired), len(self._sessions))
        return len(expired)
