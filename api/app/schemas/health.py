from pydantic import BaseModel
from datetime import datetime


class HealthResponse(BaseModel):
    """Liveness response schema."""
    status: str
    message: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Error body returned for client and server errors."""
    error: str
