"""Calls made by the public marketing site."""

from typing import Any

from src.veloria.client.http import ApiClient, ApiError


async def submit_project_form(client: ApiClient, form_data: dict[str, Any]) -> dict[str, Any]:
    return await client.post(
        "/projects", json=form_data, fallback="Error submitting project form"
    )


async def schedule_discovery_call(
    client: ApiClient, booking_data: dict[str, Any]
) -> dict[str, Any]:
    return await client.post(
        "/bookings", json=booking_data, fallback="Error scheduling discovery call"
    )


async def cancel_booking(client: ApiClient, booking_id: str, email: str) -> dict[str, Any]:
    return await client.patch(
        f"/bookings/cancel/{booking_id}",
        json={"email": email},
        fallback="Error cancelling booking",
    )


async def submit_contact_form(client: ApiClient, contact_data: dict[str, Any]) -> dict[str, Any]:
    return await client.post(
        "/contact", json=contact_data, fallback="Error submitting contact form"
    )


__all__ = [
    "ApiError",
    "cancel_booking",
    "schedule_discovery_call",
    "submit_contact_form",
    "submit_project_form",
]
