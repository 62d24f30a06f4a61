from .router import board_api_router, chat_api_router

__all__ = ["board_api_router", "chat_api_router"]
