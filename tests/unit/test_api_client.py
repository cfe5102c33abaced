"""Tests for the API client error handling and calendar retries."""

import asyncio
import datetime as dt

import httpx
import pytest

from src.veloria.client.calendar import CalendarLoader, projects_calendar
from src.veloria.client.http import ApiClient, ApiError, error_message

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]

START = dt.date(2025, 6, 1)
END = dt.date(2025, 6, 30)
EVENT = {"id": "b1", "title": "📹 Sam: Blog", "start": "2025-06-10T09:00:00"}


class Server:
    """MockTransport handler failing a set number of times before succeeding."""

    def __init__(self, failures: int, status_code: int = 500):
        self.failures = failures
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self.requests) <= self.failures:
            return httpx.Response(self.status_code, json={"message": "Server error"})
        return httpx.Response(200, json=[EVENT])


def _client(handler) -> ApiClient:
    return ApiClient("http://test/api", transport=httpx.MockTransport(handler))


class TestErrorMessage:
    async def test_precedence(self):
        assert error_message({"message": "m", "detail": "d"}, "f") == "m"
        assert error_message({"detail": "d"}, "f") == "d"
        assert error_message({"detail": [{"msg": "bad"}]}, "f") == "f"
        assert error_message(None, "f") == "f"

    async def test_network_error_has_no_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get("/projects/admin", fallback="Failed to load")

        assert exc_info.value.status_code is None
        assert exc_info.value.message == "Failed to load"

    async def test_http_error_carries_status_and_message(self):
        async with _client(Server(failures=1, status_code=404)) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.get("/projects/admin/x")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Server error"


class TestCalendarLoader:
    async def test_sends_range_as_dates(self):
        server = Server(failures=0)
        async with _client(server) as client:
            events = await CalendarLoader(client, retry_delay=0).load(START, END)

        assert events == [EVENT]
        params = server.requests[0].url.params
        assert server.requests[0].url.path == "/api/bookings/admin/calendar"
        assert (params["start"], params["end"]) == ("2025-06-01", "2025-06-30")

    async def test_recovers_within_retry_budget(self):
        server = Server(failures=2)
        async with _client(server) as client:
            loader = CalendarLoader(client, retry_delay=0)
            events = await loader.load(START, END)

        assert events == [EVENT]
        assert len(server.requests) == 3
        assert loader.error is None
        assert not loader.exhausted

    async def test_gives_up_after_three_failed_attempts(self):
        server = Server(failures=10)
        async with _client(server) as client:
            loader = CalendarLoader(client, retry_delay=0)
            events = await loader.load(START, END)

        assert events == []
        assert len(server.requests) == 3
        assert loader.retry_count == 3
        assert loader.exhausted
        assert loader.error == "Failed to fetch booking events. Please try again."

    async def test_new_range_resets_retry_budget(self):
        server = Server(failures=3)
        async with _client(server) as client:
            loader = CalendarLoader(client, retry_delay=0)
            await loader.load(START, END)
            assert loader.exhausted

            events = await loader.change_range(dt.date(2025, 7, 1), dt.date(2025, 7, 31))

        assert events == [EVENT]
        assert loader.retry_count == 0
        assert not loader.exhausted

    async def test_manual_retry(self):
        server = Server(failures=3)
        async with _client(server) as client:
            loader = CalendarLoader(client, retry_delay=0)
            await loader.load(START, END)

            assert await loader.retry() == [EVENT]

    async def test_projects_calendar_does_not_retry(self):
        server = Server(failures=10)
        async with _client(server) as client:
            loader = projects_calendar(client)
            await loader.load(START, END)

        assert len(server.requests) == 1
        assert loader.exhausted
        assert server.requests[0].url.path == "/api/projects/admin/calendar"

    async def test_explicit_load_after_giving_up_does_not_retry(self):
        server = Server(failures=10)
        async with _client(server) as client:
            loader = CalendarLoader(client, retry_delay=0)
            await loader.load(START, END)
            assert loader.exhausted

            await loader.load(START, END)

        assert len(server.requests) == 4
        assert loader.retry_count == 4

    async def test_range_change_supersedes_pending_retry(self):
        june: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params["start"] == START.isoformat():
                june.append(request)
                return httpx.Response(503, json={"message": "Unavailable"})
            return httpx.Response(200, json=[EVENT])

        async with _client(handler) as client:
            loader = CalendarLoader(client, retry_delay=0.05)
            stale = asyncio.create_task(loader.load(START, END))
            while not june:
                await asyncio.sleep(0)

            events = await loader.change_range(dt.date(2025, 7, 1), dt.date(2025, 7, 31))
            await stale

        assert events == [EVENT]
        assert len(june) == 1
        assert loader.events == [EVENT]
        assert loader.error is None
        assert loader.retry_count == 0
        assert loader.start == dt.date(2025, 7, 1)

    async def test_close_drops_result_of_pending_load(self):
        server = Server(failures=1)
        async with _client(server) as client:
            loader = CalendarLoader(client, retry_delay=0.05)
            pending = asyncio.create_task(loader.load(START, END))
            while not server.requests:
                await asyncio.sleep(0)

            loader.close()
            assert await pending == []

        assert len(server.requests) == 1
        assert loader.events == []
