# quizmaster/api/questions.py - Question catalog
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from quizmaster.api.deps import (
    StandardResponse, get_optional_user, get_question_store, raise_for_result, require_admin
)
from quizmaster.models.user import User
from quizmaster.schemas import Difficulty
from quizmaster.services import question_service, quiz_service
from quizmaster.stores import QuestionStore

router = APIRouter()
logger = logging.getLogger(__name__)


# ================================
# REQUEST MODELS
# ================================

class QuestionCreateRequest(BaseModel):
    question: str
    options: List[str]
    correct_answer: int
    difficulty: str = "medium"
    category: str
    explanation: str = ""


class QuestionUpdateRequest(BaseModel):
    question: Optional[str] = None
    options: Optional[List[str]] = None
    correct_answer: Optional[int] = None
    difficulty: Optional[str] = None
    category: Optional[str] = None
    explanation: Optional[str] = None


# ================================
# ENDPOINTS
# ================================

@router.get("", response_model=StandardResponse)
async def list_questions(
        category: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
        limit: int = Query(50, ge=0, le=1000),
        current_user: Optional[User] = Depends(get_optional_user),
        question_store: QuestionStore = Depends(get_question_store)
):
    """List questions, newest first. Answer keys are only shown to admins"""
    try:
        questions = question_service.list_questions(question_store, category, difficulty, limit)
    except Exception as e:
        logger.error(f"❌ Error listing questions: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to load questions")

    is_admin = current_user is not None and current_user.role == "admin"
    items = [
        q.model_dump(mode="json") if is_admin else quiz_service.public_question(q)
        for q in questions
    ]

    return StandardResponse(
        status_code=200,
        is_success=True,
        details=f"Found {len(items)} questions",
        data={"questions": items, "total": len(items)}
    )


@router.get("/categories", response_model=StandardResponse)
async def list_categories(question_store: QuestionStore = Depends(get_question_store)):
    categories = quiz_service.list_categories(question_store)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Categories retrieved successfully",
        data={"categories": categories}
    )


@router.post("", response_model=StandardResponse)
async def create_question(
        request: QuestionCreateRequest,
        admin: User = Depends(require_admin),
        question_store: QuestionStore = Depends(get_question_store)
):
    result = question_service.create_question(question_store, request.model_dump())
    raise_for_result(result)

    return StandardResponse(
        status_code=201,
        is_success=True,
        details=result["message"],
        data={"question_id": result["question_id"]}
    )


@router.put("/{question_id}", response_model=StandardResponse)
async def update_question(
        question_id: str,
        request: QuestionUpdateRequest,
        admin: User = Depends(require_admin),
        question_store: QuestionStore = Depends(get_question_store)
):
    result = question_service.update_question(question_store, question_id, request.model_dump(exclude_unset=True))
    raise_for_result(result)

    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data={"question_id": question_id}
    )


@router.delete("/{question_id}", response_model=StandardResponse)
async def delete_question(
        question_id: str,
        admin: User = Depends(require_admin),
        question_store: QuestionStore = Depends(get_question_store)
):
    result = question_service.delete_question(question_store, question_id)
    raise_for_result(result)

    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data={"question_id": question_id}
    )
