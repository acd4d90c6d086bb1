import asyncio
import json
from datetime import datetime, timezone

import httpx

from quizmaster.config import Settings
from quizmaster.schemas import AttemptRecord, UserRecord
from quizmaster.services.tutor import (
    AnthropicProvider,
    HttpTutorProvider,
    OpenAIProvider,
    ProviderError,
    ProviderRequest,
    TutorResolver,
    build_providers,
    build_system_prompt,
    static_response,
)

USER = UserRecord(id=1, email="sam@example.com", name="Sam", quizzes_taken=3, average_score=63,
                  streak=2, total_points=18, level=1)
ATTEMPTS = [
    AttemptRecord(user_id=1, category="Math", score=40, completed_at=datetime(2024, 1, 2, tzinfo=timezone.utc)),
    AttemptRecord(user_id=1, category="History", score=90, completed_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
]


def make_settings(**keys):
    values = {
        "openai_api_key": "",
        "anthropic_api_key": "",
        "together_api_key": "",
        "openai_base_url": "https://api.openai.com/v1",
        "anthropic_base_url": "https://api.anthropic.com/v1",
        "together_base_url": "https://api.together.xyz/v1",
    }
    values.update(keys)
    return Settings(_env_file=None, **values)


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers which hosts were called"""

    def __init__(self, responses):
        self.calls = []
        self.responses = responses
        super().__init__(self._handle)

    def _handle(self, request):
        host = request.url.host
        self.calls.append(host)
        response = self.responses[host]
        if isinstance(response, Exception):
            raise response
        return response


def openai_reply(text):
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": text}}]})


def anthropic_reply(text):
    return httpx.Response(200, json={"content": [{"type": "text", "text": text}]})


def test_no_credentials_uses_rules_without_network():
    transport = RecordingTransport({})
    resolver = TutorResolver(build_providers(make_settings(), transport=transport))

    for message in ["hi", "What topics should I study next?", "", "random words"]:
        reply = asyncio.run(resolver.respond(message, USER, ATTEMPTS))
        assert reply
        assert reply == static_response(message, USER, ATTEMPTS)

    assert transport.calls == []


def test_malformed_keys_count_as_unconfigured():
    config = make_settings(openai_api_key="not-a-key", anthropic_api_key="sk-wrong", together_api_key="xyz")
    assert TutorResolver(build_providers(config)).configured_providers() == []


def test_first_configured_provider_wins():
    transport = RecordingTransport({"api.openai.com": openai_reply("From OpenAI")})
    config = make_settings(openai_api_key="sk-test", anthropic_api_key="sk-ant-test")
    resolver = TutorResolver(build_providers(config, transport=transport))

    reply = asyncio.run(resolver.respond("Help me", USER, ATTEMPTS))

    assert reply == "From OpenAI"
    assert transport.calls == ["api.openai.com"]


def test_falls_through_to_next_provider_on_error():
    transport = RecordingTransport({
        "api.openai.com": httpx.Response(429, json={"error": "quota"}),
        "api.anthropic.com": anthropic_reply("From Anthropic"),
    })
    config = make_settings(openai_api_key="sk-test", anthropic_api_key="sk-ant-test", together_api_key="sk-together")
    resolver = TutorResolver(build_providers(config, transport=transport))

    reply = asyncio.run(resolver.respond("Help me", USER, ATTEMPTS))

    assert reply == "From Anthropic"
    assert transport.calls == ["api.openai.com", "api.anthropic.com"]


def test_timeout_is_treated_as_provider_failure():
    transport = RecordingTransport({
        "api.openai.com": httpx.ReadTimeout("timed out"),
        "api.together.xyz": openai_reply("From Together"),
    })
    config = make_settings(openai_api_key="sk-test", together_api_key="sk-together")
    resolver = TutorResolver(build_providers(config, transport=transport))

    reply = asyncio.run(resolver.respond("Help me", USER, ATTEMPTS))

    assert reply == "From Together"
    assert transport.calls == ["api.openai.com", "api.together.xyz"]


def test_all_providers_failing_falls_back_to_rules():
    transport = RecordingTransport({
        "api.openai.com": httpx.Response(500),
        "api.anthropic.com": httpx.ConnectError("connection refused"),
        "api.together.xyz": openai_reply("   "),
    })
    config = make_settings(openai_api_key="sk-a", anthropic_api_key="sk-ant-b", together_api_key="sk-c")
    resolver = TutorResolver(build_providers(config, transport=transport))

    message = "What topics should I study next?"
    reply = asyncio.run(resolver.respond(message, USER, ATTEMPTS))

    assert reply == static_response(message, USER, ATTEMPTS)
    assert len(transport.calls) == 3


def test_malformed_history_degrades_to_generic_help():
    resolver = TutorResolver([])
    reply = asyncio.run(resolver.respond("How am I doing?", USER, [{"category": "Math"}]))

    assert reply.startswith("That's a great question!")


def test_provider_raises_provider_error_on_bad_payload():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"unexpected": True}))
    provider = OpenAIProvider("sk-test", "gpt-3.5-turbo", "https://api.openai.com/v1", transport=transport)

    try:
        asyncio.run(provider.generate(ProviderRequest("system", "hello")))
    except ProviderError as e:
        assert e.provider == "openai"
    else:
        raise AssertionError("expected ProviderError")


def test_anthropic_request_shape():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return anthropic_reply("ok")

    provider = AnthropicProvider("sk-ant-test", "claude-3-haiku-20240307", "https://api.anthropic.com/v1",
                                 max_tokens=500, temperature=0.7, transport=httpx.MockTransport(handler))
    result = asyncio.run(provider.generate(ProviderRequest("be kind", "hi")))

    assert result.text == "ok"
    assert seen["url"] == "https://api.anthropic.com/v1/messages"
    assert seen["headers"]["x-api-key"] == "sk-ant-test"
    assert seen["body"]["system"] == "be kind"
    assert seen["body"]["messages"] == [{"role": "user", "content": "hi"}]
    assert seen["body"]["max_tokens"] == 500


def test_system_prompt_includes_profile_and_history():
    prompt = build_system_prompt(USER, ATTEMPTS)

    assert "- Name: Sam" in prompt
    assert "- Average Score: 63%" in prompt
    assert "- Math: 40% (01/02/2024)" in prompt
    assert "- History: 90% (01/01/2024)" in prompt
    assert prompt.endswith("- Always end with a question to continue the conversation")


def test_system_prompt_for_new_user():
    prompt = build_system_prompt(None, [])

    assert "New user, no quiz history yet." in prompt
    assert "No recent attempts" in prompt


def test_provider_chain_ignores_base_urls_from_environment(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_BASE_URL", "http://127.0.0.1:9/v1")
    transport = RecordingTransport({
        "api.openai.com": httpx.Response(503),
        "api.anthropic.com": anthropic_reply("From Anthropic"),
    })
    config = make_settings(openai_api_key="sk-test", anthropic_api_key="sk-ant-test")
    resolver = TutorResolver(build_providers(config, transport=transport))

    assert asyncio.run(resolver.respond("Help me", USER, ATTEMPTS)) == "From Anthropic"
    assert transport.calls == ["api.openai.com", "api.anthropic.com"]


def test_http_provider_base_cannot_be_instantiated():
    try:
        HttpTutorProvider("sk-test", "model", "https://example.com")
    except TypeError:
        pass
    else:
        raise AssertionError("expected TypeError for abstract provider")
