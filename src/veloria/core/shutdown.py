"""In-flight request tracking so shutdown can wait for open requests."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.veloria.core.logging import get_logger

logger = get_logger(__name__)


class RequestTracker:
    """Counts in-flight requests and signals once they drain after shutdown starts."""

    def __init__(self) -> None:
        self._in_flight = 0
        self._shutting_down = False
        self._drained = asyncio.Event()

    @property
    def is_shutting_down(self) -> bool:
        return self._shutting_down

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    @asynccontextmanager
    async def track_request(self) -> AsyncGenerator[None]:
        # Single event loop; increments between awaits cannot interleave
        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1
            if self._in_flight == 0 and self._shutting_down:
                self._drained.set()

    async def start_shutdown(self) -> None:
        self._shutting_down = True
        if self._in_flight == 0:
            self._drained.set()
        else:
            logger.info("Waiting for in-flight requests", in_flight=self._in_flight)

    async def wait_for_drain(self, timeout: float) -> bool:
        """Wait for in-flight requests. Returns False if the timeout expires first."""
        try:
            await asyncio.wait_for(self._drained.wait(), timeout=timeout)
        except TimeoutError:
            logger.warning(
                "Shutdown timeout with requests still in flight",
                timeout=timeout,
                in_flight=self._in_flight,
            )
            return False
        logger.info("All requests drained")
        return True

    def reset(self) -> None:
        """Reset tracker state. For tests only."""
        self._in_flight = 0
        self._shutting_down = False
        self._drained = asyncio.Event()


request_tracker = RequestTracker()
