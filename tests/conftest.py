"""Test configuration and shared fixtures for relay service tests.

Stores are installed on ``app.state`` directly with a controllable clock,
so no lifespan, listener or wall-clock waiting is involved.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from relay_service.config import RelaySettings
from relay_service.main import create_app
from relay_service.services import BeaconCounter, BoardLog, MessageLog, SessionRegistry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_settings(**overrides) -> RelaySettings:
    defaults = {
        "relay_mode": "chat",
        "host": "127.0.0.1",
        "port": 3000,
        "session_ttl_seconds": 3600,
        "sweep_interval_seconds": 60.0,
        "message_max_length": 200,
        "message_log_cap": 500,
    }
    defaults.update(overrides)
    return RelaySettings(**defaults)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

@pytest.fixture
def settings():
    return _make_settings()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return SessionRegistry(ttl_seconds=3600, clock=clock)


@pytest.fixture
def message_log(clock):
    return MessageLog(max_length=200, cap=500, clock=clock)


@pytest.fixture
def board_log(clock):
    return BoardLog(clock=clock)


@pytest.fixture
def beacon_counter():
    return BeaconCounter()


# ---------------------------------------------------------------------------
# Apps & clients
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def chat_app(registry, message_log):
    """Chat deployment with fresh stores."""
    app = create_app(_make_settings(relay_mode="chat"))
    app.state.session_registry = registry
    app.state.message_log = message_log
    yield app


@pytest_asyncio.fixture
async def board_app(board_log, beacon_counter):
    """Board deployment with fresh stores."""
    app = create_app(_make_settings(relay_mode="board"))
    app.state.board_log = board_log
    app.state.beacon_counter = beacon_counter
    yield app


@pytest_asyncio.fixture
async def client(chat_app):
    """AsyncClient hitting the chat deployment."""
    transport = ASGITransport(app=chat_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def board_client(board_app):
    """AsyncClient hitting the board deployment."""
    transport = ASGITransport(app=board_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def token(client):
    """Token for a freshly joined player."""
    resp = await client.post("/join", json={"username": "Alice", "placeId": 123, "jobId": "j1"})
    return resp.json()["token"]
