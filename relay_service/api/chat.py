from typing import Optional

from fastapi import APIRouter, Depends, Request

from ..models.chat import JoinRequest, SendMessageRequest, Session
from ..services.message_service import parse_since
from .deps import get_message_log, get_session_registry, read_body, require_session

router = APIRouter()


@router.post("/join")
async def join(request: Request, body: JoinRequest):
    registry = get_session_registry(request)
    session = registry.join(body.username, body.place_id, body.job_id)
    return {"success": True, "token": session.token}


@router.post("/message")
async def send_message(request: Request, session: Session = Depends(require_session)):
    # Body is read only after the token check so a bad token is always a 401.
    body = await read_body(request, SendMessageRequest)
    log = get_message_log(request)
    log.append(session.username, body.content)
    return {"success": True}


@router.get("/messages")
async def list_messages(
    request: Request,
    since: Optional[str] = None,
    session: Session = Depends(require_session),
):
    log = get_message_log(request)
    messages = log.list_since(parse_since(since))
    return {"success": True, "messages": [m.model_dump() for m in messages]}
