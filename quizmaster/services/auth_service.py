# quizmaster/services/auth_service.py
import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from quizmaster.core.security import create_access_token, hash_password, verify_password
from quizmaster.models.user import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
PROFILE_FIELDS = ("name", "bio", "location", "favorite_categories")


def register_user(db: Session, email: str, password: str, name: str, role: str = "student") -> dict:
    """Register new user"""
    email = email.lower().strip()

    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        return {"success": False, "message": "Email already registered"}

    # Validate password
    if len(password) < MIN_PASSWORD_LENGTH:
        return {"success": False, "message": f"Password must be at least {MIN_PASSWORD_LENGTH} characters"}

    if not name or not name.strip():
        return {"success": False, "message": "Name is required"}

    # New users start at level 1 with empty stats
    user = User(
        email=email,
        password=hash_password(password),
        name=name.strip(),
        role=role,
        favorite_categories=[],
        achievements=[],
        total_points=0,
        level=1,
        streak=0,
        quizzes_taken=0,
        average_score=0
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"✅ Registered user {user.id} ({role})")

    token = create_access_token(user.id, user.role)
    return {"success": True, "message": "Registration successful", "token": token, "user": user}


def login_user(db: Session, email: str, password: str) -> dict:
    """Login user"""
    user = db.query(User).filter(User.email == email.lower().strip()).first()
    if not user:
        return {"success": False, "message": "Invalid email or password"}

    # Check password
    if not verify_password(password, user.password):
        return {"success": False, "message": "Invalid email or password"}

    token = create_access_token(user.id, user.role)
    return {"success": True, "message": "Login successful", "token": token, "user": user}


def update_profile(db: Session, user: User, data: Dict[str, Any]) -> dict:
    """Merge profile fields into the user"""
    if "name" in data and data["name"] is not None and not data["name"].strip():
        return {"success": False, "message": "Name cannot be empty"}

    for field in PROFILE_FIELDS:
        if field in data and data[field] is not None:
            setattr(user, field, data[field])

    db.commit()
    db.refresh(user)
    return {"success": True, "message": "Profile updated successfully", "user": user}


def change_password(db: Session, user: User, current_password: str, new_password: str) -> dict:
    if not verify_password(current_password, user.password):
        return {"success": False, "message": "Current password is incorrect"}

    if len(new_password) < MIN_PASSWORD_LENGTH:
        return {"success": False, "message": f"Password must be at least {MIN_PASSWORD_LENGTH} characters"}

    user.password = hash_password(new_password)
    db.commit()

    token = create_access_token(user.id, user.role)
    return {"success": True, "message": "Password changed successfully", "token": token}


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()
