# quizmaster/services/progress_service.py
import logging
import math
from collections import Counter, defaultdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from quizmaster.core.utils import derive_level, round_half_up
from quizmaster.schemas import AttemptRecord, ProgressRecord, UserRecord
from quizmaster.stores.base import UserStore

logger = logging.getLogger(__name__)

FIRST_QUIZ_BADGE = "first-step"
HUNDRED_QUIZZES_BADGE = "knowledge-seeker"
PERFECT_SCORE_BADGE = "perfect-score"

RECOMMENDATION_THRESHOLD = 75
DASHBOARD_RECENT_ATTEMPTS = 10
DASHBOARD_RECENT_ACTIVITY = 4
IMPROVEMENT_WINDOW = 5


def points_for(percentage_score: float) -> int:
    """One point per full ten percent"""
    return int(math.floor(percentage_score / 10))


def award_achievements(existing: List[str], quizzes_taken: int, percentage_score: float) -> List[str]:
    achievements = list(existing)
    earned = []
    if quizzes_taken >= 1:
        earned.append(FIRST_QUIZ_BADGE)
    if quizzes_taken >= 100:
        earned.append(HUNDRED_QUIZZES_BADGE)
    if percentage_score >= 100:
        earned.append(PERFECT_SCORE_BADGE)

    for badge in earned:
        if badge not in achievements:
            achievements.append(badge)
    return achievements


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0


class ProgressAggregator:
    """
    Folds completed quiz attempts into per-category progress and the user's
    aggregate stats.

    The attempt log is the source of truth. Progress records and the user
    aggregate are caches derived from it: they are updated at most once per
    attempt, and a failed update is logged rather than retried. Use
    rebuild_aggregates() to recompute them from the log.
    """

    def __init__(self, user_store: UserStore):
        self.user_store = user_store

    # ================================
    # RECORDING
    # ================================

    def record_attempt(self, user_id: int, category: str, percentage_score: float, time_spent_seconds: int,
                       *, total_questions: int = 0, difficulty: str = "medium",
                       answers: Optional[List[Dict[str, Any]]] = None,
                       session_id: Optional[str] = None) -> Optional[int]:
        """Append the attempt and update aggregates. Returns the attempt id, or None if the append failed"""
        try:
            attempt_id, created = self.user_store.append_quiz_attempt({
                "user_id": user_id,
                "session_id": session_id,
                "score": percentage_score,
                "total_questions": total_questions,
                "category": category,
                "difficulty": difficulty,
                "answers": answers or [],
                "time_spent": time_spent_seconds
            })
        except Exception as e:
            logger.error(f"❌ Failed to record attempt for user {user_id}: {str(e)}")
            return None

        if not created:
            return attempt_id

        now = datetime.now(timezone.utc)

        try:
            self._update_progress(user_id, category, percentage_score, time_spent_seconds, now)
        except Exception as e:
            logger.error(f"❌ Failed to update {category} progress for user {user_id}: {str(e)}")

        try:
            self._update_user(user_id, percentage_score)
        except Exception as e:
            logger.error(f"❌ Failed to update stats for user {user_id}: {str(e)}")

        logger.info(f"✅ Recorded attempt {attempt_id} for user {user_id}: {category} {percentage_score}%")
        return attempt_id

    def _find_progress(self, user_id: int, category: str) -> Optional[ProgressRecord]:
        for record in self.user_store.get_user_progress(user_id):
            if record.category == category:
                return record
        return None

    def _update_progress(self, user_id: int, category: str, percentage_score: float,
                         time_spent_seconds: int, attempted_at: datetime):
        existing = self._find_progress(user_id, category)

        if existing is None:
            data = {
                "total_attempts": 1,
                "average_score": percentage_score,
                "best_score": percentage_score,
                "total_time_spent": time_spent_seconds,
                "last_attempt_at": attempted_at
            }
        else:
            new_total = existing.total_attempts + 1
            data = {
                "total_attempts": new_total,
                "average_score": (existing.average_score * existing.total_attempts + percentage_score) / new_total,
                "best_score": max(existing.best_score, percentage_score),
                "total_time_spent": existing.total_time_spent + time_spent_seconds,
                "last_attempt_at": attempted_at
            }

        self.user_store.upsert_user_progress(user_id, category, data)

    def _update_user(self, user_id: int, percentage_score: float):
        user = self.user_store.get_user(user_id)
        if user is None:
            raise KeyError(f"User {user_id} not found")

        quizzes_taken = user.quizzes_taken + 1
        average_score = round_half_up((user.average_score * user.quizzes_taken + percentage_score) / quizzes_taken)
        total_points = user.total_points + points_for(percentage_score)

        self.user_store.merge_update_user(user_id, {
            "quizzes_taken": quizzes_taken,
            "average_score": average_score,
            "total_points": total_points,
            "level": max(user.level, derive_level(total_points)),
            "achievements": award_achievements(user.achievements, quizzes_taken, percentage_score)
        })

    def rebuild_aggregates(self, user_id: int) -> Dict:
        """Recompute progress records and user stats from the full attempt log"""
        user = self.user_store.get_user(user_id)
        if user is None:
            return {"success": False, "message": "User not found"}

        attempts = self.user_store.list_all_user_attempts(user_id)

        by_category: Dict[str, List[AttemptRecord]] = defaultdict(list)
        for attempt in attempts:
            by_category[attempt.category].append(attempt)

        for category, category_attempts in by_category.items():
            scores = [a.score for a in category_attempts]
            dates = [a.completed_at for a in category_attempts if a.completed_at]
            self.user_store.upsert_user_progress(user_id, category, {
                "total_attempts": len(scores),
                "average_score": _mean(scores),
                "best_score": max(scores),
                "total_time_spent": sum(a.time_spent for a in category_attempts),
                "last_attempt_at": max(dates) if dates else None
            })

        scores = [a.score for a in attempts]
        total_points = sum(points_for(score) for score in scores)
        achievements = list(user.achievements)
        for count, score in enumerate(reversed(scores), start=1):
            achievements = award_achievements(achievements, count, score)

        self.user_store.merge_update_user(user_id, {
            "quizzes_taken": len(scores),
            "average_score": round_half_up(_mean(scores)),
            "total_points": total_points,
            "level": max(user.level, derive_level(total_points)),
            "achievements": achievements
        })

        logger.info(f"✅ Rebuilt aggregates for user {user_id} from {len(attempts)} attempts")
        return {
            "success": True,
            "message": "Aggregates rebuilt successfully",
            "attempts": len(attempts),
            "categories": len(by_category)
        }

    # ================================
    # READ MODELS
    # ================================

    def get_leaderboard(self, limit: int = 50, search: Optional[str] = None) -> List[Dict[str, Any]]:
        """Top users by points. Ranks are assigned before the name filter"""
        users = self.user_store.list_top_users(limit)
        entries = [
            {
                "rank": rank,
                "user_id": user.id,
                "name": user.name,
                "points": user.total_points,
                "level": user.level,
                "streak": user.streak,
                "quizzes_taken": user.quizzes_taken,
                "average_score": user.average_score
            }
            for rank, user in enumerate(users, start=1)
        ]

        if search:
            needle = search.lower()
            entries = [entry for entry in entries if needle in entry["name"].lower()]
        return entries

    def get_dashboard(self, user_id: int) -> Optional[Dict[str, Any]]:
        user = self.user_store.get_user(user_id)
        if user is None:
            return None

        recent = self.user_store.list_user_attempts(user_id, DASHBOARD_RECENT_ATTEMPTS)
        progress = self.user_store.get_user_progress(user_id)

        return {
            "user": _user_stats(user),
            "recent_attempts": [a.model_dump(mode="json") for a in recent],
            "score_history": [{"attempt": index, "score": a.score} for index, a in enumerate(reversed(recent), start=1)],
            "category_stats": [
                {"category": p.category, "average_score": p.average_score, "quizzes": p.total_attempts}
                for p in progress
            ],
            "recent_activity": [
                {
                    "title": f"{a.category} Quiz",
                    "score": a.score,
                    "date": a.completed_at.date().isoformat() if a.completed_at else None
                }
                for a in recent[:DASHBOARD_RECENT_ACTIVITY]
            ],
            "recommended_categories": recommend_categories(progress)
        }

    def get_analytics(self, user_id: int) -> Dict[str, Any]:
        attempts = self.user_store.list_all_user_attempts(user_id)
        scores = [a.score for a in attempts]

        return {
            "total_quizzes": len(attempts),
            "average_score": _mean(scores),
            "favorite_category": most_frequent_category(attempts),
            "improvement": calculate_improvement(scores),
            "monthly_progress": monthly_progress(attempts)
        }


# ================================
# HELPERS
# ================================

def _user_stats(user: UserRecord) -> Dict[str, Any]:
    return {
        "name": user.name,
        "total_points": user.total_points,
        "level": user.level,
        "next_level_at": user.level * 1000,
        "streak": user.streak,
        "quizzes_taken": user.quizzes_taken,
        "average_score": user.average_score,
        "achievements": user.achievements
    }


def recommend_categories(progress: List[ProgressRecord], limit: int = 3) -> List[Dict[str, Any]]:
    """Categories still below mastery, in progress order"""
    recommended = []
    for record in progress:
        if record.average_score >= RECOMMENDATION_THRESHOLD:
            continue

        if record.average_score < 50:
            level = "Beginner"
        elif record.average_score < 70:
            level = "Intermediate"
        else:
            level = "Advanced"

        recommended.append({
            "title": f"{record.category} Mastery",
            "category": record.category,
            "difficulty": level,
            "progress": round_half_up(record.average_score)
        })
        if len(recommended) >= limit:
            break
    return recommended


def most_frequent_category(attempts: List[AttemptRecord]) -> str:
    counts = Counter(a.category for a in attempts)
    if not counts:
        return "General"
    # most_common keeps first-seen order for ties
    return counts.most_common(1)[0][0]


def calculate_improvement(scores: List[float]) -> float:
    """Mean of the newest scores minus mean of the oldest (scores newest first)"""
    if len(scores) < 2:
        return 0
    window = min(IMPROVEMENT_WINDOW, len(scores))
    recent = sum(scores[:window]) / window
    older = sum(scores[-window:]) / window
    return recent - older


def monthly_progress(attempts: List[AttemptRecord]) -> List[Dict[str, Any]]:
    months: Dict[str, List[float]] = defaultdict(list)
    for attempt in attempts:
        if attempt.completed_at:
            months[attempt.completed_at.strftime("%Y-%m")].append(attempt.score)

    return [
        {"month": month, "quizzes": len(scores), "average_score": _mean(scores)}
        for month, scores in sorted(months.items())
    ]
