"""
Tests for booking endpoints: creation, listing and the cancel variants.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_book_normalizes_input(client: AsyncClient):
    """Email is lowercased and an out-of-range quantity is clamped."""
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "A@B.com",
        "quantity": 15,
    })
    assert response.status_code == 201
    data = response.json()
    assert data["ok"] is True
    booking = data["booking"]
    assert booking["eventTitle"] == "Jazz Night"
    assert booking["userEmail"] == "a@b.com"
    assert booking["quantity"] == 10
    assert booking["status"] == "confirmed"
    assert booking["eventId"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "extra, expected",
    [({}, 1), ({"qty": "3"}, 3), ({"tickets": "lots"}, 1), ({"numTickets": -2}, 1), ({"ticketCount": 4.8}, 4)],
)
async def test_book_quantity_aliases(client: AsyncClient, extra, expected):
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "fan@example.com",
        **extra,
    })
    assert response.status_code == 201
    assert response.json()["booking"]["quantity"] == expected


@pytest.mark.asyncio
async def test_book_with_event_id(client: AsyncClient, test_event):
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "fan@example.com",
        "eventId": test_event.id,
    })
    assert response.status_code == 201
    assert response.json()["booking"]["eventId"] == test_event.id


@pytest.mark.asyncio
async def test_book_missing_fields(client: AsyncClient):
    response = await client.post("/api/book", json={"eventTitle": "  "})
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "eventTitle and userEmail are required"}


@pytest.mark.asyncio
async def test_book_without_body(client: AsyncClient):
    response = await client.post("/api/book")
    assert response.status_code == 400
    assert response.json()["ok"] is False


@pytest.mark.asyncio
async def test_book_invalid_email(client: AsyncClient):
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "not an email",
    })
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Invalid email"}


@pytest.mark.asyncio
async def test_book_non_object_body(client: AsyncClient):
    response = await client.post("/api/book", json=["Jazz Night"])
    assert response.status_code == 400
    assert response.json()["ok"] is False


@pytest.mark.asyncio
async def test_list_bookings_requires_email(client: AsyncClient):
    response = await client.get("/api/bookings")
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "userEmail query param is required"}


@pytest.mark.asyncio
async def test_list_bookings_empty(client: AsyncClient):
    response = await client.get("/api/bookings", params={"userEmail": "nobody@example.com"})
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_bookings_shape(client: AsyncClient, make_booking):
    await make_booking(event_title="Rock Fest")
    newest = await make_booking()

    response = await client.get("/api/bookings", params={"userEmail": "FAN@example.com"})
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    assert data[0]["id"] == newest.id
    assert data[0]["date"] == data[0]["createdAt"]
    assert set(data[0]) >= {"id", "eventId", "eventTitle", "userEmail", "quantity", "status", "createdAt", "date"}


@pytest.mark.asyncio
async def test_cancel_by_path_id_twice(client: AsyncClient, make_booking):
    booking = await make_booking()

    first = await client.delete(f"/api/booking/{booking.id}")
    second = await client.delete(f"/api/booking/{booking.id}")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["booking"]["status"] == "cancelled"


@pytest.mark.asyncio
async def test_cancel_by_path_id_not_found(client: AsyncClient):
    response = await client.delete("/api/booking/missing")
    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Booking not found"}


@pytest.mark.asyncio
async def test_cancel_by_query_booking_id(client: AsyncClient, make_booking):
    booking = await make_booking()
    response = await client.delete("/api/booking", params={"bookingId": booking.id})
    assert response.status_code == 200
    assert response.json()["booking"]["id"] == booking.id
    assert response.json()["booking"]["status"] == "cancelled"


@pytest.mark.asyncio
async def test_cancel_by_query_user_and_title(client: AsyncClient, make_booking):
    await make_booking()
    params = {"userEmail": "Fan@Example.com", "eventTitle": " Jazz Night "}

    first = await client.delete("/api/booking", params=params)
    assert first.status_code == 200
    assert first.json()["booking"]["status"] == "cancelled"

    second = await client.delete("/api/booking", params=params)
    assert second.status_code == 404


@pytest.mark.asyncio
async def test_cancel_by_query_requires_filter(client: AsyncClient):
    response = await client.delete("/api/booking", params={"userEmail": "fan@example.com"})
    assert response.status_code == 400
    assert response.json() == {
        "ok": False,
        "error": "Provide bookingId or (userEmail and eventTitle) to cancel",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("id_field", ["bookingId", "_id", "id"])
async def test_cancel_post_by_id_aliases(client: AsyncClient, make_booking, id_field):
    booking = await make_booking()
    response = await client.post("/api/cancel", json={id_field: booking.id})
    assert response.status_code == 200
    assert response.json()["booking"]["status"] == "cancelled"


@pytest.mark.asyncio
async def test_cancel_post_by_user_and_title(client: AsyncClient, make_booking):
    await make_booking()
    body = {"userEmail": "fan@example.com", "eventTitle": "Jazz Night"}

    assert (await client.post("/api/cancel", json=body)).status_code == 200
    assert (await client.post("/api/cancel", json=body)).status_code == 404


@pytest.mark.asyncio
async def test_cancel_post_requires_filter(client: AsyncClient):
    response = await client.post("/api/cancel", json={})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_book_quantity_too_large_for_float(client: AsyncClient):
    """An integer beyond float range falls back to the default quantity."""
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "a@b.com",
        "quantity": 10**400,
    })
    assert response.status_code == 201
    assert response.json()["booking"]["quantity"] == 1


@pytest.mark.asyncio
async def test_book_accepts_long_event_reference(client: AsyncClient):
    event_id = "x" * 50
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "a@b.com",
        "eventId": event_id,
    })
    assert response.status_code == 201
    assert response.json()["booking"]["eventId"] == event_id


@pytest.mark.asyncio
async def test_book_rejects_oversized_event_reference(client: AsyncClient):
    response = await client.post("/api/book", json={
        "eventTitle": "Jazz Night",
        "userEmail": "a@b.com",
        "eventId": "x" * 201,
    })
    assert response.status_code == 400
    assert response.json()["ok"] is False
