# quizmaster/models/progress.py
from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey, UniqueConstraint
from quizmaster.database import Base


class UserProgress(Base):
    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category = Column(String, nullable=False)

    total_attempts = Column(Integer, default=0)
    average_score = Column(Float, default=0)
    best_score = Column(Float, default=0)
    total_time_spent = Column(Integer, default=0)
    last_attempt_at = Column(DateTime(timezone=True), nullable=True)

    # One running record per category per user
    __table_args__ = (UniqueConstraint('user_id', 'category', name='_unique_user_category'),)
