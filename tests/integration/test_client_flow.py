"""The dashboard client library driven against the real app."""

from collections.abc import AsyncGenerator
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

from src.veloria.client import (
    ApiClient,
    ApiError,
    AuthSession,
    CalendarLoader,
    LocalStorage,
    ProjectForm,
    load_dashboard,
)
from src.veloria.client.public import submit_contact_form, submit_project_form
from src.veloria.main import create_app

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def api(engine: AsyncEngine) -> AsyncGenerator[ApiClient]:
    transport = ASGITransport(app=create_app())
    async with ApiClient("http://test/api", transport=transport) as api:
        yield api


async def test_login_then_authorized_calls(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    session = AuthSession(api, storage)

    assert await session.login(admin_user["email"], admin_user["password"]) is True

    assert session.is_authenticated
    assert storage.get_item("token") == session.token
    assert api.token == session.token
    assert await api.get("/projects/admin") == []


async def test_failed_login_keeps_server_message(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    session = AuthSession(api, storage)

    assert await session.login(admin_user["email"], "wrong") is False

    assert session.error == "Invalid credentials"
    assert not session.is_authenticated
    assert storage.get_item("token") is None
    with pytest.raises(ApiError) as exc_info:
        await api.get("/projects/admin")
    assert exc_info.value.status_code == 401


async def test_restored_session_is_authorized(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    await AuthSession(api, storage).login(admin_user["email"], admin_user["password"])
    api.set_token(None)

    restored = AuthSession(api, LocalStorage(storage.path))

    assert restored.restore() is True
    assert (await api.get("/auth/me"))["email"] == admin_user["email"]


async def test_project_form_create_and_update(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    await AuthSession(api, storage).login(admin_user["email"], admin_user["password"])
    form = ProjectForm(api)
    form.update_field("projectName", "Bakery shop")
    form.update_field("projectDescription", "Online ordering")
    form.update_field("companyName", "Crumbs & Co")
    form.update_field("name", "Jane Baker")
    form.update_field("email", "jane@example.com")
    form.set_goal(0, "Sell online")
    form.add_goal()
    form.add_color("#ff5733")
    payment = form.add_payment("Deposit", 500, "2025-06-01")

    await form.save()

    assert form.project_id is not None
    assert form.project["projectGoals"] == ["Sell online"]
    assert form.project["projectValue"] == 500

    await form.update_item_status("payment", payment["id"], "paid")
    assert form.project["paymentSchedule"][0]["status"] == "paid"

    form.update_nested_field("hosting", "provider", "Netlify")
    await form.save()

    reloaded = await ProjectForm.fetch(api, form.project_id)
    assert reloaded.project["hosting"]["provider"] == "Netlify"
    assert reloaded.project["designChoices"]["colorPalette"][0]["color"] == "#ff5733"

    assert await reloaded.delete(confirm=True) is True


async def test_failed_save_sets_error_and_keeps_edits(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    form = ProjectForm(api)
    for field, value in {
        "projectName": "Bakery shop",
        "projectDescription": "Online ordering",
        "companyName": "Crumbs & Co",
        "name": "Jane Baker",
        "email": "jane@example.com",
    }.items():
        form.update_field(field, value)
    form.set_goal(0, "Sell online")

    # Not logged in
    with pytest.raises(ApiError):
        await form.save()

    assert form.error == "Not authorized, no token"
    assert form.project["projectName"] == "Bakery shop"
    assert form.is_new


async def test_public_forms_and_dashboard(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    await submit_contact_form(
        api, {"name": "Alex", "email": "alex@example.com", "message": "Hello"}
    )
    await submit_project_form(
        api,
        {
            "serviceType": "blog",
            "projectName": "Travel blog",
            "projectDescription": "A blog",
            "projectGoals": ["Grow readership"],
            "budget": "$2,000",
            "timeline": "relaxed",
            "companyName": "Wander",
            "industry": "Travel",
            "targetAudience": "Backpackers",
            "name": "Kai",
            "email": "kai@example.com",
        },
    )
    await AuthSession(api, storage).login(admin_user["email"], admin_user["password"])

    summary = await load_dashboard(api)

    assert summary.contacts.total == 1
    assert summary.contacts.unattended == 1
    assert summary.projects.unattended == 1
    assert summary.bookings.total == 0


async def test_bookings_calendar_loader(
    api: ApiClient, storage: LocalStorage, admin_user: dict
) -> None:
    await AuthSession(api, storage).login(admin_user["email"], admin_user["password"])
    loader = CalendarLoader(api, retry_delay=0)

    events = await loader.load(date(2025, 6, 1), date(2025, 6, 30))

    assert events == []
    assert loader.error is None
    assert loader.attempts == 1
