"""Calendar event loaders for the dashboard.

The bookings calendar gives a failing fetch a fixed number of attempts, each
retry after a fixed delay. Once the attempts are used up the loader stays in
its error state until the range changes or ``retry()`` is called.

Only the newest load may update the loader: starting another load, or
``close()``, supersedes one still waiting on the network or a retry delay.
"""

import asyncio
import datetime as dt
from typing import Any

from src.veloria.client.http import ApiClient, ApiError
from src.veloria.core.config import get_client_settings
from src.veloria.core.logging import get_logger

logger = get_logger(__name__)

BOOKINGS_CALENDAR_PATH = "/bookings/admin/calendar"
PROJECTS_CALENDAR_PATH = "/projects/admin/calendar"


class CalendarLoader:
    """Events for one calendar view.

    ``retry_limit`` is the number of failed attempts after which the loader
    gives up; ``retry_count`` counts failures since the budget was last reset.
    """

    def __init__(
        self,
        client: ApiClient,
        path: str = BOOKINGS_CALENDAR_PATH,
        *,
        retry_limit: int | None = None,
        retry_delay: float | None = None,
        error_message: str = "Failed to fetch booking events. Please try again.",
    ):
        settings = get_client_settings()
        self.client = client
        self.path = path
        self.retry_limit = settings.calendar_retry_limit if retry_limit is None else retry_limit
        self.retry_delay = settings.calendar_retry_delay if retry_delay is None else retry_delay
        self.error_message = error_message

        self.events: list[dict[str, Any]] = []
        self.error: str | None = None
        self.retry_count = 0
        self.attempts = 0
        self.start: dt.date | None = None
        self.end: dt.date | None = None
        self._generation = 0

    @property
    def exhausted(self) -> bool:
        return self.error is not None and self.retry_count >= self.retry_limit

    def _superseded(self, generation: int) -> bool:
        return generation != self._generation

    async def load(self, start: dt.date, end: dt.date) -> list[dict[str, Any]]:
        """Fetch events for ``[start, end]``, retrying as configured.

        Returns the events; on terminal failure returns the previous events
        and leaves ``error`` set. A superseded load returns the current events
        without changing any state.
        """
        self._generation += 1
        generation = self._generation
        self.start, self.end = start, end
        params = {"start": start.isoformat(), "end": end.isoformat()}

        while True:
            self.attempts += 1
            try:
                events = await self.client.get(
                    self.path, params=params, fallback=self.error_message
                )
            except ApiError as e:
                if self._superseded(generation):
                    return self.events
                self.error = self.error_message
                self.retry_count += 1
                logger.warning(
                    "Calendar fetch failed",
                    path=self.path,
                    status_code=e.status_code,
                    retry_count=self.retry_count,
                )
                if self.retry_count >= self.retry_limit:
                    return self.events
                logger.info(
                    "Retrying calendar fetch",
                    attempt=self.retry_count + 1,
                    limit=self.retry_limit,
                )
                await asyncio.sleep(self.retry_delay)
                if self._superseded(generation):
                    return self.events
                continue

            if self._superseded(generation):
                return self.events
            self.events = events
            self.error = None
            return self.events

    async def change_range(self, start: dt.date, end: dt.date) -> list[dict[str, Any]]:
        """New visible range: the retry budget starts over."""
        self.retry_count = 0
        return await self.load(start, end)

    async def retry(self) -> list[dict[str, Any]]:
        """Manual retry after the automatic ones ran out."""
        if self.start is None or self.end is None:
            raise RuntimeError("Nothing to retry, call load() first")
        self.retry_count = 0
        return await self.load(self.start, self.end)

    def close(self) -> None:
        """Detach from any load still in flight; its result is dropped."""
        self._generation += 1


def projects_calendar(client: ApiClient) -> CalendarLoader:
    """Loader for the projects calendar, which does not retry."""
    return CalendarLoader(
        client,
        PROJECTS_CALENDAR_PATH,
        retry_limit=1,
        error_message="Failed to load calendar events",
    )
