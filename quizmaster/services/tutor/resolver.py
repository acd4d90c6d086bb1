# quizmaster/services/tutor/resolver.py
import logging
from typing import Any, List, Optional, Sequence, Union

from quizmaster.schemas import AttemptRecord, UserRecord
from quizmaster.services.tutor.base import ProviderError, ProviderRequest, TutorProvider
from quizmaster.services.tutor.rules import generic_help, static_response

logger = logging.getLogger(__name__)

PROMPT_ATTEMPTS = 5

GUIDELINES = [
    "Be encouraging and supportive",
    "Provide specific, actionable advice",
    "Reference their actual performance data when relevant",
    "Suggest next steps based on their progress",
    "Keep responses conversational but informative",
    "If they ask about improving scores, analyze their weak areas",
    "If they ask about study topics, recommend based on their performance",
    "Always end with a question to continue the conversation",
]


def _score(value: float):
    return int(value) if float(value).is_integer() else value


def build_system_prompt(user: Optional[UserRecord], attempts: List[AttemptRecord]) -> str:
    if user is not None:
        user_context = "\n".join([
            "User Profile:",
            f"- Name: {user.name}",
            f"- Total Quizzes: {user.quizzes_taken}",
            f"- Average Score: {_score(user.average_score)}%",
            f"- Current Streak: {user.streak} days",
            f"- Total Points: {user.total_points}",
            f"- Level: {user.level}",
        ])
    else:
        user_context = "New user, no quiz history yet."

    history = "\n".join(
        f"- {a.category}: {_score(a.score)}% ({a.completed_at.strftime('%m/%d/%Y') if a.completed_at else 'unknown date'})"
        for a in attempts[:PROMPT_ATTEMPTS]
    )
    guidelines = "\n".join(f"- {line}" for line in GUIDELINES)

    return (
        "You are an AI learning tutor for a quiz platform. Provide helpful, personalized responses "
        "based on the user's profile and quiz history.\n\n"
        f"{user_context}\n\n"
        "Recent Quiz Attempts:\n"
        f"{history or 'No recent attempts'}\n\n"
        "Guidelines:\n"
        f"{guidelines}"
    )


def _as_attempt(entry: Union[AttemptRecord, Any]) -> AttemptRecord:
    if isinstance(entry, AttemptRecord):
        return entry
    # Raises ValidationError for malformed history entries
    return AttemptRecord.model_validate(entry)


class TutorResolver:
    """
    Produces tutor replies.

    Configured providers are tried in priority order and the first non-empty
    reply wins. When none is configured or all of them fail, the rule-based
    generator answers instead. respond() never raises.
    """

    def __init__(self, providers: Sequence[TutorProvider]):
        self.providers = list(providers)

    def configured_providers(self) -> List[TutorProvider]:
        return [provider for provider in self.providers if provider.is_configured()]

    async def respond(self, message: str, user_profile: Optional[UserRecord] = None,
                      recent_attempts: Optional[Sequence[Any]] = None) -> str:
        try:
            attempts = [_as_attempt(entry) for entry in (recent_attempts or [])]

            providers = self.configured_providers()
            if not providers:
                logger.info("🤖 No tutor providers configured, using rule-based tutor")
                return static_response(message, user_profile, attempts)

            request = ProviderRequest(
                system_instruction=build_system_prompt(user_profile, attempts),
                user_message=message
            )

            for provider in providers:
                try:
                    result = await provider.generate(request)
                    logger.info(f"✅ Tutor reply from {provider.name}")
                    return result.text
                except ProviderError as e:
                    logger.warning(f"⚠️ Tutor provider failed, trying next: {str(e)}")
                except Exception as e:
                    logger.warning(f"⚠️ Tutor provider {provider.name} raised unexpectedly: {str(e)}")

            logger.warning("⚠️ All tutor providers failed, using rule-based tutor")
            return static_response(message, user_profile, attempts)

        except Exception as e:
            logger.error(f"❌ Tutor error, sending generic help: {str(e)}")
            return generic_help([], 0, 0, 0)
