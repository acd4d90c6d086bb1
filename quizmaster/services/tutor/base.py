# quizmaster/services/tutor/base.py
from abc import ABC, abstractmethod
from dataclasses import dataclass


class ProviderError(Exception):
    """A tutor provider could not produce a reply"""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")


@dataclass(frozen=True)
class ProviderRequest:
    system_instruction: str
    user_message: str


@dataclass(frozen=True)
class ProviderResult:
    text: str
    provider: str


class TutorProvider(ABC):
    """Abstract base class for language-model providers"""

    name: str = "provider"

    @abstractmethod
    def is_configured(self) -> bool:
        """True when the provider's credential is present and well formed"""
        pass

    @abstractmethod
    async def generate(self, request: ProviderRequest) -> ProviderResult:
        """Return the completion text, or raise ProviderError"""
        pass
