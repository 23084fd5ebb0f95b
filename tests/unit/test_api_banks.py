from __future__ import annotations

from datetime import datetime

import httpx
import pytest

from src.adapters.api.dependencies import get_bank_service
from src.adapters.persistence import InMemoryBankRepository
from src.app.services.bank_service import BankService
from src.domain.models import GeoPoint
from src.main import app


def _seeded_service() -> BankService:
    repo = InMemoryBankRepository()
    repo.add(
        name="Banco de Bogotá",
        address="Calle 72 # 10-07, Bogotá",
        location=GeoPoint(lat=4.7110, lon=-74.0721),
    )
    repo.add(
        name="Banco de Medellín",
        address="Carrera 64C # 78-580, Medellín",
        location=GeoPoint(lat=6.2442, lon=-75.5812),
    )
    return BankService(repository=repo)


async def _request(
    service: BankService, method: str, url: str, **kwargs
) -> httpx.Response:
    app.dependency_overrides[get_bank_service] = lambda: service

    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(
            transport=transport, base_url="http://test"
        ) as client:
            return await client.request(method, url, **kwargs)
    finally:
        app.dependency_overrides.clear()


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_nearest_returns_bank_and_distance() -> None:
    resp = await _request(
        _seeded_service(),
        "GET",
        "/banks/nearest",
        params={"lat": 4.7110, "lon": -74.0721},
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["bank"]["name"] == "Banco de Bogotá"
    assert payload["bank"]["location"] == {"lat": 4.711, "lon": -74.0721}
    assert payload["distance_km"] == 0.0
    assert payload["exceeds_limit"] is False
    assert payload["limit_km"] == 10.0


@pytest.mark.unit
@pytest.mark.anyio
async def test_nearest_flags_exceeded_limit() -> None:
    resp = await _request(
        _seeded_service(),
        "GET",
        "/banks/nearest",
        params={"lat": -34.6037, "lon": -58.3816, "limit_km": 25},
    )

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["exceeds_limit"] is True
    assert payload["limit_km"] == 25.0
    assert payload["distance_km"] == 4670.52


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize(
    "params",
    [
        {},
        {"lat": 4.7},
        {"lon": -74.0},
        {"lat": "abc", "lon": -74.0},
        {"lat": 4.7, "lon": "north"},
        {"lat": "", "lon": ""},
    ],
)
async def test_nearest_requires_both_coordinates(params: dict) -> None:
    resp = await _request(_seeded_service(), "GET", "/banks/nearest", params=params)

    assert resp.status_code == 400
    assert "required" in resp.json()["detail"]


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize(
    "params",
    [
        {"lat": 91, "lon": 0},
        {"lat": 0, "lon": 181},
        {"lat": 0, "lon": 0, "limit_km": -5},
        {"lat": 0, "lon": 0, "limit_km": "far"},
    ],
)
async def test_nearest_rejects_invalid_values(params: dict) -> None:
    resp = await _request(_seeded_service(), "GET", "/banks/nearest", params=params)
    assert resp.status_code == 400


@pytest.mark.unit
@pytest.mark.anyio
async def test_nearest_with_empty_catalog_is_404() -> None:
    service = BankService(repository=InMemoryBankRepository())
    resp = await _request(
        service, "GET", "/banks/nearest", params={"lat": 4.7110, "lon": -74.0721}
    )

    assert resp.status_code == 404
    assert resp.json()["detail"] == "No banks available"


@pytest.mark.unit
@pytest.mark.anyio
async def test_create_then_get_bank() -> None:
    service = BankService(repository=InMemoryBankRepository())

    created = await _request(
        service,
        "POST",
        "/banks",
        json={
            "name": "Banco de Cali",
            "address": "Calle 15 # 30-25, Cali",
            "lat": 3.4516,
            "lon": -76.532,
        },
    )
    assert created.status_code == 201
    bank_id = created.json()["id"]

    fetched = await _request(service, "GET", f"/banks/{bank_id}")
    assert fetched.status_code == 200
    assert fetched.json() == created.json()
    raw_created_at = created.json()["created_at"].replace("Z", "+00:00")
    created_at = datetime.fromisoformat(raw_created_at)
    assert created_at.tzinfo is not None
    assert created_at == service.get_bank(bank_id=bank_id).created_at  # type: ignore[union-attr]


@pytest.mark.unit
@pytest.mark.anyio
async def test_create_bank_validation_error() -> None:
    resp = await _request(
        BankService(repository=InMemoryBankRepository()),
        "POST",
        "/banks",
        json={"name": "B", "address": "Calle 1", "lat": 100.0, "lon": 0.0},
    )
    assert resp.status_code == 422


@pytest.mark.unit
@pytest.mark.anyio
async def test_create_bank_blank_name_after_strip() -> None:
    resp = await _request(
        BankService(repository=InMemoryBankRepository()),
        "POST",
        "/banks",
        json={"name": "     ", "address": "Calle 15 # 30-25", "lat": 0.0, "lon": 0.0},
    )
    assert resp.status_code == 422
    assert resp.json()["detail"] == ["name is required"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_unknown_bank_is_404() -> None:
    resp = await _request(_seeded_service(), "GET", "/banks/404")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Bank not found"


@pytest.mark.unit
@pytest.mark.anyio
async def test_stats_counts_banks() -> None:
    resp = await _request(_seeded_service(), "GET", "/stats")

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["total_banks"] == 2
    assert payload["generated_at"]


@pytest.mark.unit
@pytest.mark.anyio
async def test_unexpected_errors_are_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BANKLOCATOR_REVEAL_ERRORS", raising=False)

    class _BrokenService:
        def statistics(self):
            raise RuntimeError("table scan failed")

    app.dependency_overrides[get_bank_service] = lambda: _BrokenService()

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/stats")

    app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_nearest_blank_limit_uses_default() -> None:
    resp = await _request(
        _seeded_service(),
        "GET",
        "/banks/nearest",
        params={"lat": 4.7110, "lon": -74.0721, "limit_km": ""},
    )

    assert resp.status_code == 200
    assert resp.json()["limit_km"] == 10.0
