from fastapi import APIRouter

from crypto_portfolio_tracker.interfaces.dtos.health_status_dto import HealthStatusDto

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/status")
async def health_check():
    return HealthStatusDto()
