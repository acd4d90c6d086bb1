"""
QuizMaster boundary records

Every row that leaves a store is converted into one of the models below, so
the quiz engine, the progress aggregator and the tutor never see raw rows or
loosely shaped dictionaries. Malformed data is rejected here with a pydantic
ValidationError.

Records:
- QuestionRecord: one multiple-choice question
- UserRecord: profile plus aggregate stats
- AttemptRecord: one completed quiz run (append-only)
- ProgressRecord: running statistics for one (user, category) pair
- AppSettingsRecord: the process-wide settings singleton
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Difficulty = Literal["easy", "medium", "hard"]
Role = Literal["student", "admin"]

DIFFICULTIES = ("easy", "medium", "hard")


class QuestionRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    question: str
    options: List[str] = Field(..., min_length=2)
    correct_answer: int
    difficulty: Difficulty = "medium"
    category: str
    explanation: str = ""
    created_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _answer_in_range(self):
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is not a valid index into {len(self.options)} options"
            )
        return self


class UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: Role = "student"
    total_points: int = Field(0, ge=0)
    level: int = 1
    streak: int = Field(0, ge=0)
    quizzes_taken: int = Field(0, ge=0)
    average_score: float = Field(0, ge=0, le=100)
    favorite_categories: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AttemptRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    user_id: int
    session_id: Optional[str] = None
    score: float = Field(..., ge=0, le=100)
    total_questions: int = Field(0, ge=0)
    category: str
    difficulty: str = "medium"
    answers: List[Dict[str, Any]] = Field(default_factory=list)
    time_spent: int = Field(0, ge=0)
    completed_at: Optional[datetime] = None


class ProgressRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    category: str
    total_attempts: int = Field(0, ge=0)
    average_score: float = 0
    best_score: float = 0
    total_time_spent: int = 0
    last_attempt_at: Optional[datetime] = None


class AppSettingsRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    app_name: str = "QuizMaster"
    app_description: str = "An interactive quiz application for learning and fun"
    max_questions_per_quiz: int = Field(10, ge=1, le=100)
    enable_timer: bool = False
    timer_duration: int = Field(30, ge=1)
    show_explanations: bool = True
    allow_guest_play: bool = True
    maintenance_mode: bool = False
    adaptive_difficulty_enabled: bool = True
    difficulty_threshold_easy: int = Field(50, ge=0, le=100)
    difficulty_threshold_hard: int = Field(80, ge=0, le=100)

    @model_validator(mode="after")
    def _thresholds_ordered(self):
        if self.difficulty_threshold_easy >= self.difficulty_threshold_hard:
            raise ValueError("Easy threshold must be lower than hard threshold")
        return self
