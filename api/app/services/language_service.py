"""
Language service for reading the language catalog.
"""
from typing import Sequence
from sqlmodel import Session, select, col

from app.core.database import fetch_all
from app.models import Language


def list_languages(session: Session) -> Sequence[Language]:
    """Return all active languages, popular ones first, then by name."""
    query = (
        select(Language)
        .where(col(Language.is_active).is_(True))
        .order_by(col(Language.is_popular).desc(), col(Language.name).asc())
    )
    return fetch_all(session, query, operation="fetch languages")
