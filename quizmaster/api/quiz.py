# quizmaster/api/quiz.py - Quiz sessions
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from quizmaster.api.deps import (
    StandardResponse, get_aggregator, get_optional_user, get_question_store, raise_for_result
)
from quizmaster.database import get_db
from quizmaster.models.user import User
from quizmaster.schemas import Difficulty
from quizmaster.services import quiz_service, settings_service
from quizmaster.services.progress_service import ProgressAggregator
from quizmaster.stores import QuestionStore

router = APIRouter()
logger = logging.getLogger(__name__)


# REQUEST MODELS
class QuizStartRequest(BaseModel):
    category: Optional[str] = None
    difficulty: Optional[Difficulty] = None


class QuizAnswerRequest(BaseModel):
    selected_answer: int


def _user_id(user: Optional[User]) -> Optional[int]:
    return user.id if user else None


# QUIZ SESSION ENDPOINTS

@router.post("/start", response_model=StandardResponse)
async def start_quiz(
        quiz_request: QuizStartRequest,
        current_user: Optional[User] = Depends(get_optional_user),
        question_store: QuestionStore = Depends(get_question_store),
        db: Session = Depends(get_db)
):
    """Start new quiz session"""
    app_settings = settings_service.get_app_settings(db)

    result = quiz_service.start_quiz(
        db=db,
        question_store=question_store,
        app_settings=app_settings,
        user_id=_user_id(current_user),
        category=quiz_request.category,
        difficulty=quiz_request.difficulty
    )
    raise_for_result(result)

    return StandardResponse(
        status_code=201,
        is_success=True,
        details=result["message"],
        data=quiz_service.session_summary(result["engine"], app_settings)
    )


@router.get("/{quiz_id}", response_model=StandardResponse)
async def get_quiz(
        quiz_id: str,
        current_user: Optional[User] = Depends(get_optional_user),
        db: Session = Depends(get_db)
):
    """Current state of a quiz session"""
    result = quiz_service.get_session(db, quiz_id, _user_id(current_user))
    raise_for_result(result)

    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data=quiz_service.session_summary(result["engine"], settings_service.get_app_settings(db))
    )


@router.post("/{quiz_id}/answer", response_model=StandardResponse)
async def submit_answer(
        quiz_id: str,
        answer_request: QuizAnswerRequest,
        current_user: Optional[User] = Depends(get_optional_user),
        aggregator: ProgressAggregator = Depends(get_aggregator),
        db: Session = Depends(get_db)
):
    """Submit answer to current question"""
    result = quiz_service.submit_answer(
        db=db,
        session_id=quiz_id,
        selected_index=answer_request.selected_answer,
        user_id=_user_id(current_user),
        aggregator=aggregator
    )
    raise_for_result(result)

    feedback = result["feedback"]
    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Correct!" if feedback["is_correct"] else "Incorrect",
        data=feedback
    )


@router.post("/{quiz_id}/abandon", response_model=StandardResponse)
async def abandon_quiz(
        quiz_id: str,
        current_user: Optional[User] = Depends(get_optional_user),
        db: Session = Depends(get_db)
):
    """Leave a quiz early; no attempt is recorded"""
    result = quiz_service.abandon_quiz(db, quiz_id, _user_id(current_user))
    raise_for_result(result)

    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data={"quiz_id": quiz_id, "status": "abandoned"}
    )
