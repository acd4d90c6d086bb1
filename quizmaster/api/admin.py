# quizmaster/api/admin.py - App settings and catalog import/export
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from quizmaster.api.deps import StandardResponse, get_question_store, raise_for_result, require_admin
from quizmaster.database import get_db
from quizmaster.models.user import User
from quizmaster.services import question_service, settings_service
from quizmaster.stores import QuestionStore

router = APIRouter()
logger = logging.getLogger(__name__)


# ================================
# REQUEST MODELS
# ================================

class SettingsUpdateRequest(BaseModel):
    app_name: Optional[str] = None
    app_description: Optional[str] = None
    max_questions_per_quiz: Optional[int] = None
    enable_timer: Optional[bool] = None
    timer_duration: Optional[int] = None
    show_explanations: Optional[bool] = None
    allow_guest_play: Optional[bool] = None
    maintenance_mode: Optional[bool] = None
    adaptive_difficulty_enabled: Optional[bool] = None
    difficulty_threshold_easy: Optional[int] = None
    difficulty_threshold_hard: Optional[int] = None


class ImportRequest(BaseModel):
    content: str


# ================================
# SETTINGS
# ================================

@router.get("/settings", response_model=StandardResponse)
async def get_settings(admin: User = Depends(require_admin), db: Session = Depends(get_db)):
    app_settings = settings_service.get_app_settings(db)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Settings retrieved successfully",
        data={"settings": app_settings.model_dump()}
    )


@router.put("/settings", response_model=StandardResponse)
async def update_settings(
        request: SettingsUpdateRequest,
        admin: User = Depends(require_admin),
        db: Session = Depends(get_db)
):
    result = settings_service.update_app_settings(db, request.model_dump(exclude_unset=True))
    raise_for_result(result)

    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data={"settings": result["settings"].model_dump()}
    )


# ================================
# IMPORT / EXPORT
# ================================

@router.get("/questions/export", response_class=PlainTextResponse)
async def export_questions(
        admin: User = Depends(require_admin),
        question_store: QuestionStore = Depends(get_question_store)
):
    """Whole catalog in the plain-text export layout"""
    try:
        content = question_service.export_questions(question_store)
    except Exception as e:
        logger.error(f"❌ Export failed: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to export questions")

    return PlainTextResponse(
        content,
        headers={"Content-Disposition": 'attachment; filename="quiz-questions.txt"'}
    )


@router.post("/questions/import", response_model=StandardResponse)
async def import_questions(
        request: ImportRequest,
        admin: User = Depends(require_admin),
        question_store: QuestionStore = Depends(get_question_store)
):
    """Import questions from export text; a malformed block rejects the whole batch"""
    result = question_service.import_questions(question_store, request.content)
    raise_for_result(result)

    return StandardResponse(
        status_code=201,
        is_success=True,
        details=result["message"],
        data={"imported": result["imported"]}
    )
