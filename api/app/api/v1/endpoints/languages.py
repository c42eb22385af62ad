from fastapi import APIRouter, Depends, Response
from sqlmodel import Session
from typing import List
from app.core.database import get_session
from app.schemas.language import LanguageResponse
from app.services.language_service import list_languages
from app.api.v1.endpoints.utils import start_timer, format_duration, set_response_headers
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/languages", tags=["languages"])

LANGUAGES_MAX_AGE = 300


@router.get("", response_model=List[LanguageResponse])
def get_languages(
    response: Response,
    session: Session = Depends(get_session)
):
    """Get all active languages, popular first, then by name."""
    start = start_timer()
    languages = list_languages(session)
    result = [LanguageResponse.model_validate(lang) for lang in languages]

    duration = format_duration(start)
    logger.debug(f"Languages query completed in {duration}")
    set_response_headers(response, LANGUAGES_MAX_AGE, duration)
    return result
