from datetime import datetime, timezone

import pytest

from quizmaster.services.progress_service import (
    ProgressAggregator,
    award_achievements,
    calculate_improvement,
    points_for,
)
from tests.fakes import FlakyProgressUserStore

USER_ID = 1


def progress_for(store, category):
    return next(p for p in store.get_user_progress(USER_ID) if p.category == category)


# ================================
# RECORDING
# ================================

def test_first_quiz_creates_progress_and_updates_user(user_store):
    aggregator = ProgressAggregator(user_store)

    attempt_id = aggregator.record_attempt(USER_ID, "Math", 70, 120, total_questions=10)

    user = user_store.get_user(USER_ID)
    assert attempt_id == 1
    assert user.quizzes_taken == 1
    assert user.average_score == 70
    assert user.total_points == 7

    progress = progress_for(user_store, "Math")
    assert progress.total_attempts == 1
    assert progress.average_score == 70
    assert progress.best_score == 70
    assert progress.total_time_spent == 120


def test_second_quiz_updates_running_means(user_store):
    aggregator = ProgressAggregator(user_store)
    aggregator.record_attempt(USER_ID, "Math", 70, 120, total_questions=10)
    aggregator.record_attempt(USER_ID, "Math", 90, 100, total_questions=10)

    user = user_store.get_user(USER_ID)
    assert user.quizzes_taken == 2
    assert user.average_score == 80
    assert user.total_points == 16

    progress = progress_for(user_store, "Math")
    assert progress.total_attempts == 2
    assert progress.average_score == 80
    assert progress.best_score == 90
    assert progress.total_time_spent == 220


def test_progress_mean_does_not_depend_on_order(user_store):
    scores = [40, 95, 70, 85]

    forward = ProgressAggregator(user_store)
    for score in scores:
        forward.record_attempt(USER_ID, "Math", score, 60)
    for score in reversed(scores):
        forward.record_attempt(USER_ID, "Science", score, 60)

    math, science = progress_for(user_store, "Math"), progress_for(user_store, "Science")
    assert math.average_score == pytest.approx(72.5)
    assert science.average_score == pytest.approx(math.average_score)
    assert math.best_score == science.best_score == 95


def test_user_average_is_rounded(user_store):
    aggregator = ProgressAggregator(user_store)
    aggregator.record_attempt(USER_ID, "Math", 67, 60)
    aggregator.record_attempt(USER_ID, "Math", 100, 60)

    # (67 + 100) / 2 = 83.5
    assert user_store.get_user(USER_ID).average_score == 84
    assert progress_for(user_store, "Math").average_score == pytest.approx(83.5)


def test_same_session_is_only_counted_once(user_store):
    aggregator = ProgressAggregator(user_store)

    first = aggregator.record_attempt(USER_ID, "Math", 80, 60, session_id="abc")
    second = aggregator.record_attempt(USER_ID, "Math", 80, 60, session_id="abc")

    assert first == second
    assert len(user_store.attempts) == 1
    assert user_store.get_user(USER_ID).quizzes_taken == 1
    assert progress_for(user_store, "Math").total_attempts == 1


def test_attempt_stores_quiz_details(user_store):
    aggregator = ProgressAggregator(user_store)
    answers = [{"question_id": "1", "selected_answer": 2, "correct": True}]

    aggregator.record_attempt(USER_ID, "Math", 100, 45, total_questions=1, difficulty="hard",
                              answers=answers, session_id="s-1")

    attempt = user_store.list_user_attempts(USER_ID)[0]
    assert attempt.difficulty == "hard"
    assert attempt.total_questions == 1
    assert attempt.answers == answers
    assert attempt.time_spent == 45


def test_failed_progress_write_keeps_attempt_and_user_stats():
    store = FlakyProgressUserStore()
    store.create_user({"email": "a@example.com", "name": "A"})
    aggregator = ProgressAggregator(store)

    attempt_id = aggregator.record_attempt(USER_ID, "Math", 70, 60)

    assert attempt_id == 1
    assert len(store.attempts) == 1
    assert store.get_user(USER_ID).quizzes_taken == 1
    assert store.get_user_progress(USER_ID) == []


def test_unknown_user_still_appends_attempt(user_store):
    aggregator = ProgressAggregator(user_store)

    assert aggregator.record_attempt(42, "Math", 70, 60) == 1
    assert user_store.get_user(42) is None


def test_rebuild_repairs_aggregates_from_attempt_log(user_store):
    aggregator = ProgressAggregator(user_store)
    aggregator.record_attempt(USER_ID, "Math", 70, 60)
    aggregator.record_attempt(USER_ID, "Math", 90, 60)
    aggregator.record_attempt(USER_ID, "Science", 100, 30)

    # Simulate lost updates
    user_store.merge_update_user(USER_ID, {"quizzes_taken": 1, "average_score": 10, "total_points": 0})
    user_store.upsert_user_progress(USER_ID, "Math", {"total_attempts": 1, "average_score": 70})

    result = aggregator.rebuild_aggregates(USER_ID)

    assert result["success"] is True
    assert result["attempts"] == 3
    user = user_store.get_user(USER_ID)
    assert user.quizzes_taken == 3
    assert user.average_score == 87
    assert user.total_points == 26

    math = progress_for(user_store, "Math")
    assert math.total_attempts == 2
    assert math.average_score == 80
    assert math.best_score == 90


def test_rebuild_unknown_user():
    aggregator = ProgressAggregator(FlakyProgressUserStore())
    assert aggregator.rebuild_aggregates(99)["success"] is False


# ================================
# POINTS, LEVELS, ACHIEVEMENTS
# ================================

def test_points_are_floor_of_tenths():
    assert points_for(0) == 0
    assert points_for(67) == 6
    assert points_for(99.9) == 9
    assert points_for(100) == 10


def test_level_follows_points(user_store):
    user_store.merge_update_user(USER_ID, {"total_points": 995})
    ProgressAggregator(user_store).record_attempt(USER_ID, "Math", 100, 60)

    user = user_store.get_user(USER_ID)
    assert user.total_points == 1005
    assert user.level == 2


def test_achievements_are_awarded_once(user_store):
    aggregator = ProgressAggregator(user_store)
    aggregator.record_attempt(USER_ID, "Math", 100, 60)
    aggregator.record_attempt(USER_ID, "Math", 100, 60)

    assert user_store.get_user(USER_ID).achievements == ["first-step", "perfect-score"]


def test_hundredth_quiz_badge():
    assert "knowledge-seeker" in award_achievements(["first-step"], 100, 50)
    assert "knowledge-seeker" not in award_achievements(["first-step"], 99, 50)


# ================================
# READ MODELS
# ================================

def test_leaderboard_ranks_before_search(user_store):
    user_store.merge_update_user(USER_ID, {"total_points": 50})
    user_store.create_user({"email": "b@example.com", "name": "Bea Top", "total_points": 500})
    user_store.create_user({"email": "c@example.com", "name": "Cal", "total_points": 10})
    aggregator = ProgressAggregator(user_store)

    board = aggregator.get_leaderboard()
    assert [entry["name"] for entry in board] == ["Bea Top", "Sam Student", "Cal"]
    assert [entry["rank"] for entry in board] == [1, 2, 3]

    filtered = aggregator.get_leaderboard(search="sam")
    assert len(filtered) == 1
    assert filtered[0]["rank"] == 2


def test_dashboard_recommends_weak_categories(user_store):
    aggregator = ProgressAggregator(user_store)
    aggregator.record_attempt(USER_ID, "Math", 40, 60)
    aggregator.record_attempt(USER_ID, "History", 72, 60)
    aggregator.record_attempt(USER_ID, "Science", 95, 60)

    dashboard = aggregator.get_dashboard(USER_ID)

    assert dashboard["user"]["quizzes_taken"] == 3
    assert len(dashboard["recent_attempts"]) == 3
    assert len(dashboard["recent_activity"]) == 3
    recommended = {item["category"]: item["difficulty"] for item in dashboard["recommended_categories"]}
    assert recommended == {"Math": "Beginner", "History": "Advanced"}


def test_dashboard_for_missing_user(user_store):
    assert ProgressAggregator(user_store).get_dashboard(99) is None


def test_analytics(user_store):
    aggregator = ProgressAggregator(user_store)
    for category, score in [("Math", 50), ("Math", 60), ("Science", 90)]:
        aggregator.record_attempt(USER_ID, category, score, 60)

    analytics = aggregator.get_analytics(USER_ID)

    assert analytics["total_quizzes"] == 3
    assert analytics["average_score"] == pytest.approx(200 / 3)
    assert analytics["favorite_category"] == "Math"
    assert analytics["monthly_progress"] == [
        {"month": "2024-01", "quizzes": 3, "average_score": pytest.approx(200 / 3)}
    ]


def test_analytics_without_attempts(user_store):
    analytics = ProgressAggregator(user_store).get_analytics(USER_ID)

    assert analytics["total_quizzes"] == 0
    assert analytics["average_score"] == 0
    assert analytics["favorite_category"] == "General"
    assert analytics["improvement"] == 0
    assert analytics["monthly_progress"] == []


def test_improvement_compares_newest_and_oldest_five():
    # newest first
    scores = [90, 90, 90, 90, 90, 50, 50, 50, 50, 50]
    assert calculate_improvement(scores) == 40
    assert calculate_improvement([80]) == 0
