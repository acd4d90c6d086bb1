# quizmaster/models/user.py
from sqlalchemy import Column, Integer, String, DateTime, Text, Float, JSON
from sqlalchemy.sql import func
from quizmaster.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String, default="student")  # student, admin

    # PROFILE
    bio = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    favorite_categories = Column(JSON, default=list)
    achievements = Column(JSON, default=list)

    # AGGREGATE STATS
    total_points = Column(Integer, default=0, index=True)
    level = Column(Integer, default=1)
    streak = Column(Integer, default=0)
    quizzes_taken = Column(Integer, default=0)
    average_score = Column(Float, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
