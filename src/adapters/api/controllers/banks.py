from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.adapters.api.dependencies import get_bank_service
from src.adapters.api.schemas.banks import (
    BankCreateSchema,
    BankSchema,
    GeoPointSchema,
    NearestBankSchema,
)
from src.app.services.bank_service import BankService
from src.domain.exceptions import InvalidBank, InvalidCoordinates, InvalidLimit
from src.domain.models import Bank

router = APIRouter(prefix="/banks", tags=["banks"])


def _bank_to_schema(bank: Bank) -> BankSchema:
    return BankSchema(
        id=bank.id,
        name=bank.name,
        address=bank.address,
        location=GeoPointSchema(lat=bank.location.lat, lon=bank.location.lon),
        created_at=bank.created_at,
    )


def _parse_float(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@router.post("", response_model=BankSchema, status_code=status.HTTP_201_CREATED)
def create_bank(
    req: BankCreateSchema,
    service: BankService = Depends(get_bank_service),
) -> BankSchema:
    try:
        bank = service.create_bank(
            name=req.name, address=req.address, lat=req.lat, lon=req.lon
        )
    except InvalidBank as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=list(exc.errors)
        ) from exc
    return _bank_to_schema(bank)


# Declared before /{bank_id} so "nearest" is not captured as an id.
@router.get("/nearest", response_model=NearestBankSchema)
def nearest_bank(
    lat: str | None = Query(default=None),
    lon: str | None = Query(default=None),
    limit_km: str | None = Query(default=None),
    service: BankService = Depends(get_bank_service),
) -> NearestBankSchema:
    # Blank or non-numeric coordinates count as missing.
    query_lat = _parse_float(lat)
    query_lon = _parse_float(lon)
    if query_lat is None or query_lon is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameters lat and lon are required",
        )

    limit = _parse_float(limit_km)
    if limit is None and limit_km is not None and limit_km.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter limit_km must be a number",
        )

    try:
        result = service.find_nearest(lat=query_lat, lon=query_lon, limit_km=limit)
    except (InvalidCoordinates, InvalidLimit) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No banks available"
        )

    return NearestBankSchema(
        bank=_bank_to_schema(result.bank),
        distance_km=result.distance_km,
        exceeds_limit=result.exceeds_limit,
        limit_km=result.limit_km,
    )


@router.get("/{bank_id}", response_model=BankSchema)
def get_bank(
    bank_id: str,
    service: BankService = Depends(get_bank_service),
) -> BankSchema:
    bank = service.get_bank(bank_id=bank_id)
    if bank is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Bank not found"
        )
    return _bank_to_schema(bank)
