# quizmaster/api/chat.py - AI tutor
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from quizmaster.api.deps import StandardResponse, get_current_user, get_tutor_resolver, get_user_store
from quizmaster.models.user import User
from quizmaster.services.tutor import TutorResolver, generate_recommendations
from quizmaster.stores import UserStore

router = APIRouter()
logger = logging.getLogger(__name__)

HISTORY_LIMIT = 10


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=2000)


def _context(user_store: UserStore, user_id: int):
    """Profile and recent attempts, or empty context when the store is unavailable"""
    try:
        return user_store.get_user(user_id), user_store.list_user_attempts(user_id, HISTORY_LIMIT)
    except Exception as e:
        logger.warning(f"⚠️ Could not load tutor context for user {user_id}: {str(e)}")
        return None, []


@router.post("", response_model=StandardResponse)
async def chat(
        request: ChatRequest,
        current_user: User = Depends(get_current_user),
        user_store: UserStore = Depends(get_user_store),
        resolver: TutorResolver = Depends(get_tutor_resolver)
):
    """Reply to a tutor message"""
    profile, attempts = _context(user_store, current_user.id)
    reply = await resolver.respond(request.message, profile, attempts)

    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Reply generated",
        data={"response": reply}
    )


@router.post("/recommendations", response_model=StandardResponse)
async def recommendations(
        request: ChatRequest,
        current_user: User = Depends(get_current_user),
        user_store: UserStore = Depends(get_user_store)
):
    profile, attempts = _context(user_store, current_user.id)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Recommendations generated",
        data={"recommendations": generate_recommendations(profile, attempts, request.message)}
    )
