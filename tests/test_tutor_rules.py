from datetime import datetime, timedelta, timezone

from quizmaster.schemas import AttemptRecord, UserRecord
from quizmaster.services.tutor.rules import (
    WELCOME_MESSAGE,
    generate_recommendations,
    static_response,
    weak_categories,
)

START = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)


def attempt(category, score, hours_ago=0):
    return AttemptRecord(user_id=1, category=category, score=score,
                         completed_at=START - timedelta(hours=hours_ago))


def user(**overrides):
    data = {"id": 1, "email": "sam@example.com", "name": "Sam", "quizzes_taken": 3,
            "average_score": 63, "streak": 2, "total_points": 18}
    data.update(overrides)
    return UserRecord(**data)


SCENARIO_ATTEMPTS = [attempt("Math", 40), attempt("Math", 60, 1), attempt("History", 90, 2)]


def test_study_next_recommends_weakest_category():
    reply = static_response("What topics should I study next?", user(), SCENARIO_ATTEMPTS)

    assert "1. **Math** - Your recent average is 50% (2 attempts)" in reply
    assert "Would you like to start a quiz in Math?" in reply
    assert "History" not in reply


def test_weak_categories_sorted_ascending():
    attempts = [attempt("History", 65), attempt("Math", 40), attempt("Art", 55)]
    assert [item["category"] for item in weak_categories(attempts)] == ["Math", "Art", "History"]


def test_study_next_without_weak_categories_encourages_challenge():
    reply = static_response("what topics next?", user(streak=5), [attempt("Math", 95)])

    assert "Challenge yourself" in reply
    assert "Keep your 5-day streak going!" in reply


def test_greeting_for_new_and_returning_users():
    new_user = user(quizzes_taken=0, average_score=0)
    assert "You haven't taken any quizzes yet" in static_response("Hello!", new_user, [])

    reply = static_response("hey there", user(), SCENARIO_ATTEMPTS)
    assert "With 3 quizzes completed and a 63% average" in reply


def test_improve_math_uses_math_average():
    reply = static_response("How can I improve at math?", user(), SCENARIO_ATTEMPTS)

    assert reply.startswith("To improve your math scores")
    assert "with 50% math average" in reply


def test_improve_math_without_math_attempts_uses_overall_average():
    reply = static_response("improve my math", user(average_score=72), [attempt("History", 90)])
    assert "with 72% math average" in reply


def test_physics_explainer():
    reply = static_response("Explain quantum entanglement", user(), [])
    assert reply.startswith("**Quantum Mechanics Explained Simply:**")


def test_streak_counts_distinct_days():
    attempts = [attempt("Math", 70, 0), attempt("Math", 70, 1), attempt("Math", 70, 24), attempt("Math", 70, 48)]
    reply = static_response("Any streak advice?", user(), attempts)

    assert "You're currently on a 3-day streak - keep it up!" in reply


def test_streak_without_attempts():
    reply = static_response("streak", user(), [])
    assert "You're currently on a 0-day streak - start today!" in reply


def test_study_strategy():
    reply = static_response("What study techniques work best?", user(), [])
    assert "**📚 Active Recall**" in reply


def test_progress_summary_trend():
    reply = static_response("How am I doing?", user(average_score=60), [attempt("Math", 80), attempt("Math", 90)])

    assert "- Recent Performance: 85% (last 5 quizzes)" in reply
    assert "Your recent scores are improving" in reply
    assert "Good progress!" in reply
    assert "- Total Points: 18" in reply


def test_generic_help_lists_contextual_suggestions():
    reply = static_response("Can you explain atoms?", user(), SCENARIO_ATTEMPTS)

    assert (
        "Based on your progress, I can help with: getting started with quizzes, improving your scores, "
        "building a learning streak, exploring new subjects."
    ) in reply


def test_generic_help_for_experienced_user():
    attempts = [attempt("Math", 90), attempt("Science", 90), attempt("History", 90)]
    reply = static_response("Can you explain atoms?", user(quizzes_taken=20, average_score=90, streak=10), attempts)

    assert "I can help with study recommendations, explanations, and learning strategies." in reply


def test_empty_message_gets_welcome():
    assert static_response("", user(), []) == WELCOME_MESSAGE
    assert static_response(None, None, []) == WELCOME_MESSAGE


def test_replies_are_deterministic():
    for message in ["What topics should I study next?", "How am I doing?", "streak tips", "anything"]:
        first = static_response(message, user(), SCENARIO_ATTEMPTS)
        second = static_response(message, user(), SCENARIO_ATTEMPTS)
        assert first == second


def test_replies_without_user_profile():
    reply = static_response("How am I doing?", None, [])
    assert "- Total Quizzes: 0" in reply


# ================================
# RECOMMENDATIONS
# ================================

def test_recommendations_for_struggling_user():
    recs = generate_recommendations(user(streak=2), SCENARIO_ATTEMPTS, "I need help")

    assert [r["type"] for r in recs] == ["study", "motivation", "tips"]
    assert "consider reviewing Math concepts" in recs[0]["content"]
    assert "Your average score in this area is 50%." in recs[0]["content"]
    assert recs[0]["priority"] == "high"


def test_recommendations_for_strong_recent_scores():
    attempts = [attempt("Math", 90), attempt("Math", 95), attempt("Science", 88)]
    recs = generate_recommendations(user(streak=10), attempts, "")

    assert [r["type"] for r in recs] == ["progression"]


def test_default_recommendation():
    recs = generate_recommendations(user(streak=10), [attempt("Math", 80)], "hello")

    assert recs == [{
        "type": "general",
        "title": "Keep Learning!",
        "content": "You're doing great! Continue taking quizzes regularly to maintain and improve your skills.",
        "priority": "low",
    }]


def test_greeting_needs_a_whole_word():
    reply = static_response("Which topics should I study next?", user(), SCENARIO_ATTEMPTS)
    assert "1. **Math**" in reply

    reply = static_response("I think this history quiz was hard", user(), SCENARIO_ATTEMPTS)
    assert not reply.startswith("Welcome")
    assert "With 3 quizzes completed" not in reply

    assert "With 3 quizzes completed" in static_response("Hi!", user(), SCENARIO_ATTEMPTS)
