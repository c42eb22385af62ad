"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from app.api.v1.endpoints import health, languages, vocabulary, learning_tips
from app.schemas.health import ErrorResponse

api_router = APIRouter(responses={500: {"model": ErrorResponse}})

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(health.router)
api_router.include_router(languages.router)
api_router.include_router(vocabulary.router)
api_router.include_router(learning_tips.router)
