"""
Learning tip service.
"""
from typing import Sequence
from sqlmodel import Session, select, col

from app.core.database import fetch_all
from app.models import LearningTip

LEARNING_TIPS_LIMIT = 20


def list_learning_tips(session: Session) -> Sequence[LearningTip]:
    """Return featured tips first, newest first within each group."""
    query = (
        select(LearningTip)
        .order_by(col(LearningTip.is_featured).desc(), col(LearningTip.created_at).desc())
        .limit(LEARNING_TIPS_LIMIT)
    )
    return fetch_all(session, query, operation="fetch learning tips")
