"""Tests for the finance overview endpoint."""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from src.veloria.core.cache import FINANCE_OVERVIEW_KEY
from tests.factories import ProjectFactory, payment

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def _seed(db_session: AsyncSession) -> None:
    today = date.today()
    db_session.add(
        ProjectFactory.accepted(
            project_name="Bakery",
            project_value=3000,
            payment_schedule=[
                payment("Deposit", 1000, today - timedelta(days=20), "paid", today - timedelta(days=19)),
                payment("Final", 2000, today + timedelta(days=10)),
            ],
        )
    )
    db_session.add(ProjectFactory.build(status="declined", project_value=9999))
    await db_session.commit()


async def test_overview_totals(
    client: AsyncClient, db_session: AsyncSession, admin_headers: dict
) -> None:
    await _seed(db_session)

    response = await client.get("/api/finance/admin/overview", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["financials"]["totalRevenue"] == 3000
    assert data["financials"]["receivedPayments"] == 1000
    assert data["financials"]["pendingPayments"] == 2000
    assert [p["paymentName"] for p in data["recentPayments"]] == ["Deposit"]
    assert [p["paymentName"] for p in data["upcomingPayments"]] == ["Final"]
    assert data["upcomingPayments"][0]["projectName"] == "Bakery"


async def test_editor_cannot_see_finances(client: AsyncClient, editor_headers: dict) -> None:
    response = await client.get("/api/finance/admin/overview", headers=editor_headers)

    assert response.status_code == 403


async def test_overview_is_cached_and_invalidated_on_project_change(
    client: AsyncClient,
    db_session: AsyncSession,
    admin_headers: dict,
    mock_redis: Redis,
) -> None:
    await _seed(db_session)

    first = await client.get("/api/finance/admin/overview", headers=admin_headers)
    assert await mock_redis.get(FINANCE_OVERVIEW_KEY) is not None

    project_id = first.json()["upcomingPayments"][0]["projectId"]
    await client.patch(
        f"/api/projects/admin/{project_id}", json={"projectValue": 5000}, headers=admin_headers
    )
    assert await mock_redis.get(FINANCE_OVERVIEW_KEY) is None

    second = await client.get("/api/finance/admin/overview", headers=admin_headers)
    assert second.json()["financials"]["totalRevenue"] == 5000
