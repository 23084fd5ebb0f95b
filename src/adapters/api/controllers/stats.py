from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_bank_service
from src.adapters.api.schemas.banks import StatisticsSchema
from src.app.services.bank_service import BankService

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatisticsSchema)
def statistics(
    service: BankService = Depends(get_bank_service),
) -> StatisticsSchema:
    stats = service.statistics()
    return StatisticsSchema(
        total_banks=stats.total_banks,
        generated_at=datetime.now(timezone.utc),
    )
