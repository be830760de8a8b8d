"""Integration tests for the orders REST API."""

from unittest.mock import AsyncMock

import pytest

from northwind.domain.errors import OrderErrorKind, Result
from northwind.domain.repositories import OrderRepository
from northwind.settings import get_app_settings
from webapi.deps import get_order_repository
from webapi.main import app


ORDER_PAYLOAD = {
    "customerId": "VINET",
    "employeeId": 5,
    "orderDate": "1996-07-04T00:00:00",
    "requiredDate": "1996-08-01T00:00:00",
    "shippedDate": "1996-07-16T00:00:00",
    "shipperId": 1,
    "freight": "32.38",
    "shipName": "Vins et alcools Chevalier",
    "shipAddress": "59 rue de l'Abbaye",
    "shipCity": "Reims",
    "shipPostalCode": "51100",
    "shipCountry": "France",
}


async def _create(client, **overrides) -> int:
    response = await client.post("/api/orders", json={**ORDER_PAYLOAD, **overrides})
    assert response.status_code == 201
    return response.json()["orderId"]


@pytest.mark.asyncio
async def test_health(api_client):
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_create_order(api_client):
    response = await api_client.post("/api/orders", json=ORDER_PAYLOAD)

    assert response.status_code == 201
    order_id = response.json()["orderId"]
    assert order_id > 0
    assert response.headers["location"] == f"/api/orders/{order_id}"


@pytest.mark.asyncio
async def test_get_order(api_client):
    order_id = await _create(api_client)

    response = await api_client.get(f"/api/orders/{order_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == order_id
    assert data["customerId"] == "VINET"
    assert data["customer"] == {"code": "VINET", "companyName": ""}
    assert data["employee"]["id"] == 5
    assert data["shipper"] == {"id": 1, "companyName": "Speedy Express"}
    assert data["freight"] == "32.38"
    assert data["shipRegion"] == ""
    assert data["orderDetails"] == []


@pytest.mark.asyncio
async def test_get_missing_order_returns_404(api_client):
    response = await api_client.get("/api/orders/99999")

    assert response.status_code == 404
    assert "99999" in response.json()["detail"]


@pytest.mark.asyncio
async def test_list_orders(api_client):
    first = await _create(api_client)
    second = await _create(api_client)
    third = await _create(api_client)

    response = await api_client.get("/api/orders", params={"skip": 1, "count": 2})

    assert response.status_code == 200
    data = response.json()
    assert [o["id"] for o in data] == [second, third]
    assert "orderDetails" not in data[0]
    assert first < second


@pytest.mark.asyncio
async def test_list_orders_defaults(api_client):
    for _ in range(12):
        await _create(api_client)

    response = await api_client.get("/api/orders")

    assert response.status_code == 200
    assert len(response.json()) == 10


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"skip": -1}, {"count": 0}])
async def test_list_invalid_range_returns_400(api_client, params):
    response = await api_client.get("/api/orders", params=params)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_malformed_order_returns_400(api_client):
    response = await api_client.post("/api/orders", json={**ORDER_PAYLOAD, "customerId": "vinet"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_missing_field_returns_400(api_client):
    payload = {k: v for k, v in ORDER_PAYLOAD.items() if k != "orderDate"}

    response = await api_client.post("/api/orders", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request"


@pytest.mark.asyncio
async def test_create_with_unknown_shipper_returns_opaque_500(api_client):
    response = await api_client.post("/api/orders", json={**ORDER_PAYLOAD, "shipperId": 99})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


@pytest.mark.asyncio
async def test_update_order(api_client):
    order_id = await _create(api_client)

    response = await api_client.put(
        f"/api/orders/{order_id}",
        json={**ORDER_PAYLOAD, "id": order_id, "shipperId": 2, "freight": "11.61"},
    )

    assert response.status_code == 204
    assert response.content == b""
    data = (await api_client.get(f"/api/orders/{order_id}")).json()
    assert data["shipperId"] == 2
    assert data["freight"] == "11.61"


@pytest.mark.asyncio
async def test_update_missing_order_returns_404(api_client):
    response = await api_client.put("/api/orders/424242", json={**ORDER_PAYLOAD, "id": 424242})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_mismatched_identity_returns_400(api_client):
    order_id = await _create(api_client)

    response = await api_client.put(f"/api/orders/{order_id}", json={**ORDER_PAYLOAD, "id": order_id + 1})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_remove_order(api_client):
    order_id = await _create(api_client)

    response = await api_client.delete(f"/api/orders/{order_id}")

    assert response.status_code == 204
    assert (await api_client.get(f"/api/orders/{order_id}")).status_code == 404


@pytest.mark.asyncio
async def test_remove_missing_order_returns_404(api_client):
    response = await api_client.delete("/api/orders/31337")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unexpected_failure_is_opaque(api_client):
    repository = AsyncMock(spec=OrderRepository)
    repository.get_order.return_value = Result.failure(
        OrderErrorKind.UNEXPECTED, "Unexpected error retrieving order", cause=RuntimeError("secret")
    )
    app.dependency_overrides[get_order_repository] = lambda: repository

    response = await api_client.get("/api/orders/1")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


@pytest.mark.asyncio
async def test_create_with_mixed_timezone_dates(api_client):
    order_id = await _create(
        api_client,
        orderDate="1996-07-04T02:00:00+02:00",
        requiredDate="1996-08-01T00:00:00",
        shippedDate="1996-07-16T00:00:00Z",
    )

    data = (await api_client.get(f"/api/orders/{order_id}")).json()
    assert data["orderDate"] == "1996-07-04T00:00:00"
    assert data["requiredDate"] == "1996-08-01T00:00:00"
    assert data["shippedDate"] == "1996-07-16T00:00:00"


@pytest.mark.asyncio
async def test_aware_required_date_before_order_date_returns_400(api_client):
    response = await api_client.post(
        "/api/orders",
        json={**ORDER_PAYLOAD, "requiredDate": "1996-07-04T01:00:00+02:00"},
    )

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("freight", ["12.345", "123456789.00"])
async def test_freight_outside_column_precision_returns_400(api_client, freight):
    response = await api_client.post("/api/orders", json={**ORDER_PAYLOAD, "freight": freight})

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [{"skip": 100000000000000000000, "count": 2}, {"count": 2**63}],
)
async def test_list_oversized_range_returns_400(api_client, params):
    response = await api_client.get("/api/orders", params=params)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_default_page_size_follows_settings(api_client, monkeypatch):
    for _ in range(4):
        await _create(api_client)

    monkeypatch.setenv("API_DEFAULT_PAGE_SIZE", "3")
    get_app_settings.cache_clear()
    try:
        response = await api_client.get("/api/orders")
    finally:
        monkeypatch.delenv("API_DEFAULT_PAGE_SIZE")
        get_app_settings.cache_clear()

    assert response.status_code == 200
    assert len(response.json()) == 3
