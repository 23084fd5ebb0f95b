from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class BankCreateSchema(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    address: str = Field(..., min_length=5, max_length=200)
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class BankSchema(BaseModel):
    id: str
    name: str
    address: str
    location: GeoPointSchema
    created_at: datetime


class NearestBankSchema(BaseModel):
    bank: BankSchema
    distance_km: float
    exceeds_limit: bool
    limit_km: float


class StatisticsSchema(BaseModel):
    total_banks: int
    generated_at: datetime
