import asyncio
from types import SimpleNamespace

import pytest

from conftest import completion_response
from videoprompt.exceptions.base_exception import AIProviderException, AIProviderUnavailableException
from videoprompt.generate.llm.gpt import FallbackOpenAIClient


class FakeCompletions:
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class FakeFactory:
    """Baut Fake-SDK-Clients je API-Key und merkt sich, welche Keys benutzt wurden."""

    def __init__(self, outcomes):
        self.outcomes = outcomes
        self.created = []
        self.completions = {}

    def __call__(self, api_key, timeout, max_retries):
        self.created.append((api_key, timeout, max_retries))
        completions = FakeCompletions(self.outcomes[api_key])
        self.completions[api_key] = completions
        return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def _client(factory, primary="primary-key", fallback="fallback-key"):
    return FallbackOpenAIClient(
        primary_api_key=primary,
        fallback_api_key=fallback,
        model="gpt-4o",
        timeout=12.5,
        client_factory=factory,
    )


def test_primary_success_does_not_touch_fallback():
    factory = FakeFactory({"primary-key": completion_response("hallo")})

    result = asyncio.run(_client(factory).chat_completion(
        messages=[{"role": "user", "content": "x"}], temperature=0.3, max_tokens=10,
    ))

    assert result == "hallo"
    assert factory.created == [("primary-key", 12.5, 0)]


def test_primary_failure_falls_back_to_secondary():
    factory = FakeFactory({
        "primary-key": RuntimeError("rate limit"),
        "fallback-key": completion_response("vom fallback"),
    })

    result = asyncio.run(_client(factory).chat_completion(
        messages=[{"role": "user", "content": "x"}], temperature=0.8, max_tokens=1500,
        response_format={"type": "json_object"},
    ))

    assert result == "vom fallback"
    assert [key for key, _, _ in factory.created] == ["primary-key", "fallback-key"]
    sent = factory.completions["fallback-key"].calls[0]
    assert sent["model"] == "gpt-4o"
    assert sent["max_tokens"] == 1500
    assert sent["temperature"] == 0.8
    assert sent["response_format"] == {"type": "json_object"}


def test_primary_failure_without_fallback_propagates_primary_error():
    primary_error = RuntimeError("invalid api key")
    factory = FakeFactory({"primary-key": primary_error})

    with pytest.raises(AIProviderException) as exc_info:
        asyncio.run(_client(factory, fallback=None).run(
            lambda client: client.chat.completions.create(model="gpt-4o")
        ))

    assert exc_info.value.__cause__ is primary_error
    assert "invalid api key" in exc_info.value.message
    assert len(factory.created) == 1


def test_both_keys_failing_raises_with_fallback_error():
    fallback_error = RuntimeError("fallback down")
    factory = FakeFactory({
        "primary-key": RuntimeError("primary down"),
        "fallback-key": fallback_error,
    })

    with pytest.raises(AIProviderException) as exc_info:
        asyncio.run(_client(factory).chat_completion(messages=[], temperature=0.3, max_tokens=10))

    assert exc_info.value.__cause__ is fallback_error
    # genau ein Versuch pro Key, kein weiterer Retry
    assert len(factory.completions["primary-key"].calls) == 1
    assert len(factory.completions["fallback-key"].calls) == 1


def test_only_fallback_key_is_used_directly():
    factory = FakeFactory({"fallback-key": completion_response("ok")})

    result = asyncio.run(_client(factory, primary=None).chat_completion(messages=[], temperature=0.3, max_tokens=10))

    assert result == "ok"
    assert [key for key, _, _ in factory.created] == ["fallback-key"]


def test_no_keys_fails_without_creating_a_client():
    factory = FakeFactory({})
    client = _client(factory, primary=None, fallback="")

    with pytest.raises(AIProviderUnavailableException) as exc_info:
        asyncio.run(client.chat_completion(messages=[], temperature=0.3, max_tokens=10))

    assert exc_info.value.message == "Keine OpenAI API-Keys verfügbar"
    assert factory.created == []


def test_missing_content_is_returned_as_empty_string():
    factory = FakeFactory({"primary-key": completion_response(None)})

    result = asyncio.run(_client(factory).chat_completion(messages=[], temperature=0.3, max_tokens=10))

    assert result == ""
