from fastapi import APIRouter, Request

from ..models.board import PostMessageRequest
from .deps import get_board_log

router = APIRouter(prefix="/messages")


@router.get("")
async def list_messages(request: Request):
    log = get_board_log(request)
    return [m.model_dump() for m in log.list()]


@router.post("")
async def post_message(request: Request, body: PostMessageRequest):
    log = get_board_log(request)
    message = log.append(body.user, body.text)
    return {"success": True, "message": message.model_dump()}
