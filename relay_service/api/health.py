from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()

_STORES = ("session_registry", "message_log", "board_log", "beacon_counter")


@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "pong"


@router.get("/health")
async def health(request: Request):
    state = request.app.state
    sizes = {}
    for name in _STORES:
        store = getattr(state, name, None)
        if store is not None:
            sizes[name] = len(store)

    return {
        "status": "ok",
        "mode": state.settings.relay_mode,
        "stores": sizes,
    }
