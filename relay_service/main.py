import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .config import RelaySettings
from .errors import RelayError
from .services.beacon_service import BeaconCounter
from .services.message_service import BoardLog, MessageLog
from .services.session_service import SessionRegistry
from .services.sweeper import SessionSweeper
from .api import board_api_router, chat_api_router
from .api.error_handlers import relay_error_handler, validation_error_handler

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def install_stores(app: FastAPI, settings: RelaySettings) -> None:
    """Create the in-memory stores for the configured mode on ``app.state``."""
    app.state.session_registry = None
    app.state.message_log = None
    app.state.board_log = None
    app.state.beacon_counter = None

    if settings.is_chat:
        app.state.session_registry = SessionRegistry(ttl_seconds=settings.session_ttl_seconds)
        app.state.message_log = MessageLog(
            max_length=settings.message_max_length,
            cap=settings.message_log_cap,
        )
    else:
        app.state.board_log = BoardLog()
        app.state.beacon_counter = BeaconCounter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logging.getLogger().setLevel(settings.log_level)

    install_stores(app, settings)

    sweeper = None
    if settings.is_chat:
        sweeper = SessionSweeper(app.state.session_registry, settings.sweep_interval_seconds)
        sweeper.start()
    app.state.sweeper = sweeper

    logger.info("Relay service listening on %d (%s mode)", settings.port, settings.relay_mode)

    yield

    # Shutdown
    if sweeper:
        await sweeper.stop()


def create_app(settings: Optional[RelaySettings] = None) -> FastAPI:
    settings = settings or RelaySettings()

    app = FastAPI(
        title="Relay Service",
        version="0.1.0",
        description="Ephemeral in-memory chat relay and presence beacon counter",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(chat_api_router if settings.is_chat else board_api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)
