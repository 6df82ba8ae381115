from __future__ import annotations

from fastapi import APIRouter

from uniswap_dashboard.api.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")
