from datetime import datetime, timezone
from fastapi import APIRouter
from app.schemas.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def health_check():
    """Liveness check. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        message="Translation API is operational",
        timestamp=datetime.now(timezone.utc),
    )
