import asyncio
import logging

from .session_service import SessionRegistry

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Background task that purges expired sessions on a fixed interval."""

    def __init__(self, registry: SessionRegistry, interval: float = 60.0):
        self.registry = registry
        self.interval = interval
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="session-sweeper")
        logger.info("Session sweeper started (every %.0fs)", self.interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session sweeper stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.registry.sweep()
            except Exception:
                logger.exception("Session sweep failed")
