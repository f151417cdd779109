import asyncio
import json

import pytest

from conftest import FakeAIClient, prompts_payload
from videoprompt.dto.prompt_dto import PromptRequest
from videoprompt.exceptions.base_exception import (
    AIProviderException,
    AIProviderUnavailableException,
    MalformedResponseException,
    TranslationException,
)
from videoprompt.generate.prompt.video_prompt import TRANSLATION_SYSTEM_PROMPT
from videoprompt.services.prompt_generation_service import PromptGenerationService
from videoprompt.services.translation_service import TranslationService


REQUEST = PromptRequest.model_validate({
    "platform": "tiktok",
    "category": "diverses",
    "customCategory": "Cooking Hacks",
    "videoContent": "15-second pasta trick",
    "tones": ["unterhaltsam"],
    "styles": ["dynamisch"],
})


def test_three_entries_are_returned_unchanged_in_order():
    payload = {
        "prompts": [
            {"id": 1, "content": "Erster", "category": "Cooking Hacks"},
            {"id": 2, "content": "Zweiter", "category": "Cooking Hacks"},
            {"id": 3, "content": "Dritter", "category": "Cooking Hacks"},
        ]
    }
    ai = FakeAIClient(content=json.dumps(payload))

    prompts = asyncio.run(PromptGenerationService.generate_prompts(ai, REQUEST))

    assert [p.model_dump() for p in prompts] == payload["prompts"]
    kwargs = ai.chat_completion.await_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["temperature"] == 0.8
    assert kwargs["max_tokens"] == 1500
    assert "Kategorie: Cooking Hacks" in kwargs["messages"][0]["content"]


@pytest.mark.parametrize("content", [
    prompts_payload(count=2),
    prompts_payload(count=4),
    "das ist kein json",
    "",
    json.dumps({"prompts": "drei"}),
    json.dumps([1, 2, 3]),
    json.dumps({"prompts": [{"id": 1}, {"id": 2}, {"id": 3}]}),
])
def test_malformed_provider_response_is_not_retried(content):
    ai = FakeAIClient(content=content)

    with pytest.raises(MalformedResponseException):
        asyncio.run(PromptGenerationService.generate_prompts(ai, REQUEST))

    assert ai.chat_completion.await_count == 1


def test_provider_error_is_prefixed_for_generation():
    ai = FakeAIClient(error=AIProviderUnavailableException())

    with pytest.raises(AIProviderUnavailableException) as exc_info:
        asyncio.run(PromptGenerationService.generate_prompts(ai, REQUEST))

    assert exc_info.value.message == "Prompt-Generierung fehlgeschlagen: Keine OpenAI API-Keys verfügbar"


def test_translation_sends_fixed_instruction_and_strips_result():
    ai = FakeAIClient(content="  Three quick pasta hacks  \n")

    translation = asyncio.run(TranslationService.translate(ai, "Drei schnelle Pasta-Hacks"))

    assert translation == "Three quick pasta hacks"
    kwargs = ai.chat_completion.await_args.kwargs
    assert kwargs["messages"] == [
        {"role": "system", "content": TRANSLATION_SYSTEM_PROMPT},
        {"role": "user", "content": "Drei schnelle Pasta-Hacks"},
    ]
    assert kwargs["temperature"] == 0.3
    assert kwargs["max_tokens"] == 500
    assert "response_format" not in kwargs


def test_empty_translation_fails():
    ai = FakeAIClient(content="   ")

    with pytest.raises(TranslationException) as exc_info:
        asyncio.run(TranslationService.translate(ai, "Hallo"))

    assert exc_info.value.message == "Keine Übersetzung erhalten"


def test_translation_provider_error_is_prefixed():
    ai = FakeAIClient(error=AIProviderException("quota exceeded"))

    with pytest.raises(AIProviderException) as exc_info:
        asyncio.run(TranslationService.translate(ai, "Hallo"))

    assert exc_info.value.message == "Fehler bei der Übersetzung: quota exceeded"


def test_batch_local_ids_are_not_range_checked():
    payload = {
        "prompts": [
            {"id": index, "content": f"Prompt {index}", "category": "Cooking Hacks"}
            for index in range(3)
        ]
    }
    ai = FakeAIClient(content=json.dumps(payload))

    prompts = asyncio.run(PromptGenerationService.generate_prompts(ai, REQUEST))

    assert [p.id for p in prompts] == [0, 1, 2]
