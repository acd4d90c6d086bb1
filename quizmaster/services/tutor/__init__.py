# quizmaster/services/tutor/__init__.py
"""
Tutor replies: language-model providers with a rule-based fallback
"""

from quizmaster.services.tutor.base import ProviderError, ProviderRequest, ProviderResult, TutorProvider
from quizmaster.services.tutor.providers import (
    AnthropicProvider,
    HttpTutorProvider,
    OpenAIProvider,
    TogetherProvider,
    build_providers,
)
from quizmaster.services.tutor.resolver import TutorResolver, build_system_prompt
from quizmaster.services.tutor.rules import generate_recommendations, static_response

__all__ = [
    "ProviderError",
    "ProviderRequest",
    "ProviderResult",
    "TutorProvider",
    "HttpTutorProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "TogetherProvider",
    "build_providers",
    "TutorResolver",
    "build_system_prompt",
    "generate_recommendations",
    "static_response",
]
