# quizmaster/api/deps.py - Shared dependencies and response models
import logging
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from quizmaster.config import settings
from quizmaster.core.security import verify_token
from quizmaster.database import get_db
from quizmaster.models.user import User
from quizmaster.services.progress_service import ProgressAggregator
from quizmaster.services.tutor import TutorResolver, build_providers
from quizmaster.stores import QuestionStore, SqlQuestionStore, SqlUserStore, UserStore

logger = logging.getLogger(__name__)


# ================================
# SHARED RESPONSE MODELS
# ================================

class StandardResponse(BaseModel):
    status_code: int
    is_success: bool
    details: str
    data: Optional[dict] = None


def raise_for_result(result: dict):
    """Map a failed service result to the matching HTTP error"""
    if result["success"]:
        return

    message = result["message"]
    lowered = message.lower()
    if "not found" in lowered:
        raise HTTPException(status_code=404, detail=message)
    elif "not authorized" in lowered:
        raise HTTPException(status_code=403, detail=message)
    elif "maintenance" in lowered:
        raise HTTPException(status_code=503, detail=message)
    else:
        raise HTTPException(status_code=400, detail=message)


# ================================
# AUTHENTICATION
# ================================

def _user_id_from_header(authorization: Optional[str]) -> int:
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header missing")

    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization format")

    token = authorization.split(" ", 1)[1]
    user_id = verify_token(token)

    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return user_id


def get_current_user(authorization: Annotated[str | None, Header()] = None,
                     db: Session = Depends(get_db)) -> User:
    """Extract and verify the bearer token, then load the user"""
    user_id = _user_id_from_header(authorization)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def get_optional_user(authorization: Annotated[str | None, Header()] = None,
                      db: Session = Depends(get_db)) -> Optional[User]:
    """Same as get_current_user, but guests get None"""
    if not authorization:
        return None
    return get_current_user(authorization, db)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "admin":
        raise HTTPException(status_code=403, detail="Not authorized: admin role required")
    return current_user


# ================================
# COLLABORATORS
# ================================

def get_question_store(db: Session = Depends(get_db)) -> QuestionStore:
    return SqlQuestionStore(db)


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return SqlUserStore(db)


def get_aggregator(user_store: UserStore = Depends(get_user_store)) -> ProgressAggregator:
    return ProgressAggregator(user_store)


def get_tutor_resolver() -> TutorResolver:
    return TutorResolver(build_providers(settings))
