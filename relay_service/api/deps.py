import json

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError

from ..errors import BadRequestError, UnauthorizedError
from ..models.chat import Session


def _get_store(request: Request, name: str, label: str):
    store = getattr(request.app.state, name, None)
    if store is None:
        raise HTTPException(status_code=503, detail=f"{label} not available")
    return store


def get_session_registry(request: Request):
    return _get_store(request, "session_registry", "Session registry")


def get_message_log(request: Request):
    return _get_store(request, "message_log", "Message log")


def get_board_log(request: Request):
    return _get_store(request, "board_log", "Message board")


def get_beacon_counter(request: Request):
    return _get_store(request, "beacon_counter", "Beacon counter")


async def require_session(request: Request) -> Session:
    """Resolve the caller's session from an ``Authorization: Bearer`` header."""
    auth = request.headers.get("authorization", "")
    if not auth.startswith("Bearer "):
        raise UnauthorizedError("Missing Authorization header")
    return get_session_registry(request).authenticate(auth[7:])


async def read_body(request: Request, model: type[BaseModel]) -> BaseModel:
    """Parse the JSON body into ``model`` after other checks have run.

    An empty body is treated as ``{}`` so that missing fields are reported
    by the store rather than as a malformed request.
    """
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else {}
        return model.model_validate(data)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError):
        raise BadRequestError("Invalid request body")
