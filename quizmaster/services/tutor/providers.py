# quizmaster/services/tutor/providers.py
import logging
from abc import abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from quizmaster.config import Settings, settings
from quizmaster.services.tutor.base import ProviderError, ProviderRequest, ProviderResult, TutorProvider

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"


class HttpTutorProvider(TutorProvider):
    """Shared plumbing for providers reached over HTTPS"""

    key_prefix = "sk-"

    def __init__(self, api_key: str, model: str, base_url: str, *, max_tokens: int = 500,
                 temperature: float = 0.7, timeout: float = 20.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key or ""
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.transport = transport

    def is_configured(self) -> bool:
        return self.api_key.startswith(self.key_prefix)

    @abstractmethod
    def _endpoint(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def _headers(self) -> Dict[str, str]:
        raise NotImplementedError

    @abstractmethod
    def _payload(self, request: ProviderRequest) -> Dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def _extract_text(self, data: Dict[str, Any]) -> str:
        raise NotImplementedError

    async def generate(self, request: ProviderRequest) -> ProviderResult:
        if not self.is_configured():
            raise ProviderError(self.name, "API key not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}{self._endpoint()}",
                    json=self._payload(request),
                    headers=self._headers()
                )
                response.raise_for_status()
                text = self._extract_text(response.json())
        except httpx.TimeoutException as e:
            raise ProviderError(self.name, f"timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise ProviderError(self.name, f"HTTP {e.response.status_code}: {e.response.text[:200]}") from e
        except httpx.RequestError as e:
            raise ProviderError(self.name, f"request failed: {str(e)}") from e
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(self.name, f"unexpected response: {str(e)}") from e

        if not text or not text.strip():
            raise ProviderError(self.name, "empty response")

        return ProviderResult(text=text, provider=self.name)


class OpenAIProvider(HttpTutorProvider):
    """Chat completions API"""

    name = "openai"

    def _endpoint(self) -> str:
        return "/chat/completions"

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def _payload(self, request: ProviderRequest) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": request.system_instruction},
                {"role": "user", "content": request.user_message}
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature
        }

    def _extract_text(self, data: Dict[str, Any]) -> str:
        return data["choices"][0]["message"]["content"] or ""


class AnthropicProvider(HttpTutorProvider):
    """Messages API"""

    name = "anthropic"
    key_prefix = "sk-ant-"

    def _endpoint(self) -> str:
        return "/messages"

    def _headers(self) -> Dict[str, str]:
        return {"x-api-key": self.api_key, "anthropic-version": ANTHROPIC_VERSION}

    def _payload(self, request: ProviderRequest) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "system": request.system_instruction,
            "messages": [{"role": "user", "content": request.user_message}]
        }

    def _extract_text(self, data: Dict[str, Any]) -> str:
        block = data["content"][0]
        return block["text"] if block.get("type") == "text" else ""


class TogetherProvider(OpenAIProvider):
    """OpenAI-compatible endpoint hosted by Together"""

    name = "together"


def build_providers(config: Settings = settings,
                    transport: Optional[httpx.AsyncBaseTransport] = None) -> List[TutorProvider]:
    """Providers in priority order"""
    common = {
        "max_tokens": config.tutor_max_tokens,
        "temperature": config.tutor_temperature,
        "timeout": config.tutor_timeout_seconds,
        "transport": transport
    }
    return [
        OpenAIProvider(config.openai_api_key, config.openai_model, config.openai_base_url, **common),
        AnthropicProvider(config.anthropic_api_key, config.anthropic_model, config.anthropic_base_url, **common),
        TogetherProvider(config.together_api_key, config.together_model, config.together_base_url, **common),
    ]
