from fastapi import APIRouter

from .beacon import router as beacon_router
from .board import router as board_router
from .chat import router as chat_router
from .health import router as health_router

# Both deployments serve /messages with different contracts, so a process
# mounts exactly one of these.
chat_api_router = APIRouter()
chat_api_router.include_router(health_router, tags=["health"])
chat_api_router.include_router(chat_router, tags=["chat"])

board_api_router = APIRouter()
board_api_router.include_router(health_router, tags=["health"])
board_api_router.include_router(board_router, tags=["board"])
board_api_router.include_router(beacon_router, tags=["beacon"])
