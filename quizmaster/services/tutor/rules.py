# quizmaster/services/tutor/rules.py
"""
Rule-based tutor replies

Used whenever no language-model provider is configured or every provider
failed. Replies are a pure function of the message, the user's stats and
their attempts (newest first); the first matching intent wins.
"""

import re
from collections import OrderedDict
from typing import Any, Dict, List, Optional

from quizmaster.core.utils import round_half_up
from quizmaster.schemas import AttemptRecord, UserRecord

WEAK_SCORE = 70
GREETING = re.compile(r"\b(hi|hello|hey)\b")
RECENT_WINDOW = 5

WELCOME_MESSAGE = (
    "Hello! I'm your AI learning tutor. I can help you with explanations, study tips, course "
    "recommendations, and learning strategies. What would you like help with today?"
)


def _num(value: float):
    """Render whole numbers without a trailing .0"""
    return int(value) if float(value).is_integer() else value


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0


def category_performance(attempts: List[AttemptRecord]) -> "OrderedDict[str, Dict[str, Any]]":
    """Per-category totals, plus the scores that fall in the most recent window"""
    recent_ids = {id(a) for a in attempts[:RECENT_WINDOW]}
    performance: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()

    for attempt in attempts:
        entry = performance.setdefault(attempt.category, {"total": 0.0, "count": 0, "recent": []})
        entry["total"] += attempt.score
        entry["count"] += 1
        if id(attempt) in recent_ids:
            entry["recent"].append(attempt.score)
    return performance


def weak_categories(attempts: List[AttemptRecord]) -> List[Dict[str, Any]]:
    """Categories under the weak threshold, weakest first"""
    ranked = []
    for category, data in category_performance(attempts).items():
        average = data["total"] / data["count"]
        recent_avg = _mean(data["recent"])
        if average < WEAK_SCORE or (data["recent"] and recent_avg < WEAK_SCORE):
            ranked.append({
                "category": category,
                "average": average,
                "attempts": data["count"],
                "recent_avg": recent_avg
            })

    # sorted() is stable, so ties keep first-seen order
    return sorted(ranked, key=lambda item: item["recent_avg"] or item["average"])


# ================================
# INTENTS
# ================================

def _greeting(total_quizzes: int, average_score) -> str:
    if total_quizzes == 0:
        return (
            "Welcome to your learning journey! I'm here to help you succeed. You haven't taken any "
            "quizzes yet - would you like to start with a general knowledge quiz to get familiar with "
            "the platform?"
        )
    return (
        f"Hello! Great to see you back! With {total_quizzes} quizzes completed and a {average_score}% "
        f"average, you're doing fantastic! How can I help you with your learning today?"
    )


def _improve_math(attempts: List[AttemptRecord], total_quizzes: int, average_score) -> str:
    math_scores = [a.score for a in attempts if "math" in a.category.lower()]
    math_average = _mean(math_scores) if math_scores else float(average_score)

    return (
        "To improve your math scores, I recommend:\n\n"
        "1. **Focus on fundamentals** - Review basic concepts before moving to advanced topics\n"
        "2. **Practice regularly** - Solve 5-10 problems daily\n"
        "3. **Understand, don't memorize** - Make sure you understand the 'why' behind each formula\n"
        "4. **Use our adaptive quizzes** - They adjust to your level automatically\n\n"
        f"Based on your {total_quizzes} quizzes with {round_half_up(math_average)}% math average, "
        "you're doing great! Would you like me to recommend specific math topics to focus on?"
    )


def _study_next(attempts: List[AttemptRecord], total_quizzes: int, average_score, streak: int) -> str:
    weak = weak_categories(attempts)
    if weak:
        top = weak[0]
        recent_score = round_half_up(top["recent_avg"] if top["recent_avg"] > 0 else top["average"])
        return (
            f"Based on your recent performance ({total_quizzes} quizzes, {average_score}% average), "
            "I recommend studying these topics next:\n\n"
            f"1. **{top['category']}** - Your recent average is {recent_score}% ({top['attempts']} attempts). "
            "Focus here first!\n"
            "2. **Practice regularly** - Take daily quizzes to improve\n"
            "3. **Review explanations** - Pay attention to the detailed explanations after each quiz\n\n"
            f"Would you like to start a quiz in {top['category']}?"
        )

    return (
        f"Based on your excellent performance ({total_quizzes} quizzes, {average_score}% average), I recommend:\n\n"
        "1. **Challenge yourself** - Try expert-level quizzes\n"
        "2. **Explore new categories** - Branch out to subjects you haven't tried\n"
        f"3. **Maintain consistency** - Keep your {streak}-day streak going!\n\n"
        "What category interests you most?"
    )


def _physics(total_quizzes: int, average_score) -> str:
    return (
        "**Quantum Mechanics Explained Simply:**\n\n"
        "Quantum mechanics is the science of the very small - atoms and subatomic particles. "
        "Here are key concepts:\n\n"
        "- **Superposition** - Particles can exist in multiple states simultaneously until observed\n"
        "- **Entanglement** - Particles can be mysteriously connected across distances\n"
        "- **Wave-particle duality** - Things can behave like both waves and particles\n\n"
        f"It's counterintuitive but amazing! With your {average_score}% average across {total_quizzes} "
        "quizzes, you're well-prepared to explore this further with our quantum mechanics course?"
    )


def _streak_tips(attempts: List[AttemptRecord]) -> str:
    # Distinct calendar days among the last ten attempts
    days = {a.completed_at.date() for a in attempts[:10] if a.completed_at}
    active_days = len(days)
    suffix = " - keep it up!" if active_days > 0 else " - start today!"

    return (
        "Great question! Here are tips to maintain your learning streak:\n\n"
        "1. **Set a daily goal** - Even 15-20 minutes counts\n"
        "2. **Schedule learning time** - Make it part of your routine\n"
        "3. **Start with easier quizzes** - Build momentum gradually\n"
        "4. **Take a break if needed** - Rest is part of learning\n"
        "5. **Share your goal** - Tell friends about your streak for motivation\n\n"
        f"You're currently on a {active_days}-day streak{suffix}"
    )


def _study_strategy(total_quizzes: int, average_score) -> str:
    return (
        "Excellent question! Here are proven study strategies to boost your learning:\n\n"
        "**📚 Active Recall**\n"
        "- Test yourself on material before looking at answers\n"
        "- Use flashcards or quiz yourself regularly\n\n"
        "**🔄 Spaced Repetition**\n"
        "- Review material at increasing intervals (1 day, 3 days, 1 week, etc.)\n"
        "- Our platform uses this automatically!\n\n"
        "**🎯 Focused Sessions**\n"
        "- Use the Pomodoro technique: 25 minutes study + 5 minute break\n"
        "- Avoid multitasking - focus on one topic at a time\n\n"
        "**📝 Active Learning**\n"
        "- Take notes in your own words\n"
        "- Teach concepts to someone else (or imagine teaching)\n"
        "- Create mind maps and diagrams\n\n"
        "**🎮 Gamification**\n"
        "- Turn learning into a game with rewards\n"
        "- Set daily goals and track progress\n\n"
        f"Based on your {total_quizzes} quizzes with {average_score}% average, I'd recommend starting "
        "with active recall techniques. What specific subject are you working on?"
    )


def _progress_summary(attempts: List[AttemptRecord], user: Optional[UserRecord], total_quizzes: int,
                      average_score, streak: int) -> str:
    recent_average = _mean([a.score for a in attempts[:RECENT_WINDOW]])
    overall = float(average_score)

    if recent_average > overall:
        trend = "improving"
    elif recent_average < overall:
        trend = "needs attention"
    else:
        trend = "steady"

    if overall >= 85:
        analysis = "Outstanding! You're performing at an expert level."
    elif overall >= 75:
        analysis = "Excellent work! You're performing at a high level."
    elif overall >= 60:
        analysis = "Good progress! Keep practicing to reach the next level."
    else:
        analysis = "You're on the right track! Focus on understanding concepts and regular practice."

    total_points = user.total_points if user else 0
    return (
        "Let's review your progress! 📊\n\n"
        "**Your Stats:**\n"
        f"- Total Quizzes: {total_quizzes}\n"
        f"- Average Score: {average_score}%\n"
        f"- Recent Performance: {round_half_up(recent_average)}% (last 5 quizzes)\n"
        f"- Current Streak: {streak} days\n"
        f"- Total Points: {total_points}\n\n"
        "**Performance Analysis:**\n"
        f"{analysis}\n\n"
        f"**Trend:** Your recent scores are {trend} compared to your overall average.\n\n"
        "Would you like specific recommendations for improvement?"
    )


def generic_help(attempts: List[AttemptRecord], total_quizzes: int, average_score, streak: int) -> str:
    topics = []
    if total_quizzes < 5:
        topics.append("getting started with quizzes")
    if float(average_score) < 70:
        topics.append("improving your scores")
    if streak < 3:
        topics.append("building a learning streak")
    if len({a.category for a in attempts}) < 3:
        topics.append("exploring new subjects")

    if topics:
        help_text = f"Based on your progress, I can help with: {', '.join(topics)}."
    else:
        help_text = "I can help with study recommendations, explanations, and learning strategies."

    return (
        f"That's a great question! I'm here to help you succeed. {help_text}\n\n"
        "Here's what I can assist with:\n\n"
        f"- **Study recommendations** based on your performance ({total_quizzes} quizzes completed, "
        f"{average_score}% average)\n"
        "- **Explanations** of difficult concepts\n"
        "- **Tips** for improving your scores\n"
        "- **Course suggestions** tailored to your interests\n"
        "- **Learning strategies** to optimize your study time\n\n"
        "What would you like help with today?"
    )


def _user_numbers(user: Optional[UserRecord]):
    if user is None:
        return 0, 0, 0
    return user.quizzes_taken, _num(user.average_score), user.streak


def static_response(message: Optional[str], user: Optional[UserRecord], attempts: List[AttemptRecord]) -> str:
    if not message or not isinstance(message, str):
        return WELCOME_MESSAGE

    text = message.lower()
    total_quizzes, average_score, streak = _user_numbers(user)

    if GREETING.search(text):
        return _greeting(total_quizzes, average_score)

    if "improve" in text and "math" in text:
        return _improve_math(attempts, total_quizzes, average_score)

    if "what topics" in text or "study next" in text:
        return _study_next(attempts, total_quizzes, average_score, streak)

    if "quantum" in text or "physics" in text:
        return _physics(total_quizzes, average_score)

    if "streak" in text:
        return _streak_tips(attempts)

    if "study" in text and ("strategy" in text or "technique" in text or "method" in text):
        return _study_strategy(total_quizzes, average_score)

    if "how am i doing" in text or "my progress" in text:
        return _progress_summary(attempts, user, total_quizzes, average_score, streak)

    return generic_help(attempts, total_quizzes, average_score, streak)


# ================================
# RECOMMENDATIONS
# ================================

def generate_recommendations(user: Optional[UserRecord], attempts: List[AttemptRecord],
                             message: str = "") -> List[Dict[str, str]]:
    """Structured study recommendations shown next to the chat"""
    recommendations = []

    averages = [
        (category, data["total"] / data["count"])
        for category, data in category_performance(attempts).items()
    ]
    weak = sorted([item for item in averages if item[1] < WEAK_SCORE], key=lambda item: item[1])

    if weak:
        category, average = weak[0]
        recommendations.append({
            "type": "study",
            "title": "Focus on Weak Areas",
            "content": (
                f"Based on your recent performance, consider reviewing {category} concepts. "
                f"Your average score in this area is {round_half_up(average)}%."
            ),
            "priority": "high"
        })

    streak = user.streak if user else 0
    if streak < 7:
        recommendations.append({
            "type": "motivation",
            "title": "Build Your Streak",
            "content": "You're close to a 7-day learning streak! Taking one quiz today will help maintain your momentum.",
            "priority": "medium"
        })

    recent_scores = [a.score for a in attempts[:3]]
    if recent_scores and _mean(recent_scores) > 85:
        recommendations.append({
            "type": "progression",
            "title": "Ready for Harder Challenges",
            "content": "Your recent scores are excellent! Try some harder difficulty quizzes to continue growing.",
            "priority": "medium"
        })

    lowered = (message or "").lower()
    if "help" in lowered or "improve" in lowered:
        recommendations.append({
            "type": "tips",
            "title": "Study Tips",
            "content": (
                "Try the Pomodoro technique: 25 minutes of focused study followed by a 5-minute break. "
                "Also, teach concepts to others to reinforce your understanding."
            ),
            "priority": "low"
        })

    if not recommendations:
        recommendations.append({
            "type": "general",
            "title": "Keep Learning!",
            "content": "You're doing great! Continue taking quizzes regularly to maintain and improve your skills.",
            "priority": "low"
        })

    return recommendations
