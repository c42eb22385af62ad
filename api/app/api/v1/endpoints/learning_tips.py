from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.core.database import get_session
from app.schemas.learning_tip import LearningTipResponse, LearningTipsResponse
from app.services.learning_tip_service import list_learning_tips

router = APIRouter(prefix="/learning-tips", tags=["learning-tips"])


@router.get("", response_model=LearningTipsResponse)
def get_learning_tips(
    session: Session = Depends(get_session)
):
    """Get learning tips, featured first, newest first."""
    tips = [LearningTipResponse.model_validate(tip) for tip in list_learning_tips(session)]
    return LearningTipsResponse(tips=tips, total=len(tips))
