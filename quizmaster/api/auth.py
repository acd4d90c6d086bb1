# quizmaster/api/auth.py - Registration, login and profile
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr
from sqlalchemy.orm import Session

from quizmaster.api.deps import StandardResponse, get_current_user, raise_for_result
from quizmaster.database import get_db
from quizmaster.models.user import User
from quizmaster.schemas import Role, UserRecord
from quizmaster.services import auth_service

router = APIRouter()
logger = logging.getLogger(__name__)


# ================================
# REQUEST MODELS
# ================================

class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    name: str
    role: Role = "student"


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ProfileUpdateRequest(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    favorite_categories: Optional[List[str]] = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str


class AuthResponse(BaseModel):
    status_code: int
    details: str
    is_success: bool
    token: Optional[str] = None


def user_payload(user: User) -> dict:
    return UserRecord.model_validate(user).model_dump(mode="json")


# ================================
# ENDPOINTS
# ================================

@router.post("/register", response_model=AuthResponse)
async def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account and return a bearer token"""
    try:
        result = auth_service.register_user(db, request.email, request.password, request.name, request.role)
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Registration error: {str(e)}")
        raise HTTPException(status_code=500, detail="Registration failed")

    raise_for_result(result)
    return AuthResponse(status_code=201, details=result["message"], is_success=True, token=result["token"])


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, db: Session = Depends(get_db)):
    result = auth_service.login_user(db, request.email, request.password)
    if not result["success"]:
        raise HTTPException(status_code=401, detail=result["message"])

    return AuthResponse(status_code=200, details=result["message"], is_success=True, token=result["token"])


@router.get("/me", response_model=StandardResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    """Get current user profile and stats"""
    return StandardResponse(
        status_code=200,
        is_success=True,
        details="Profile retrieved successfully",
        data={"user": user_payload(current_user)}
    )


@router.put("/me", response_model=StandardResponse)
async def update_profile(
        request: ProfileUpdateRequest,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    """Update name, bio, location or favorite categories"""
    try:
        result = auth_service.update_profile(db, current_user, request.model_dump(exclude_unset=True))
    except Exception as e:
        db.rollback()
        logger.error(f"❌ Profile update error: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update profile")

    raise_for_result(result)
    return StandardResponse(
        status_code=200,
        is_success=True,
        details=result["message"],
        data={"user": user_payload(result["user"])}
    )


@router.post("/change-password", response_model=AuthResponse)
async def change_password(
        request: ChangePasswordRequest,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
):
    result = auth_service.change_password(db, current_user, request.current_password, request.new_password)
    raise_for_result(result)
    return AuthResponse(status_code=200, details=result["message"], is_success=True, token=result["token"])
