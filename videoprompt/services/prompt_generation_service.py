import json
import logging
from typing import List

from pydantic import ValidationError

from videoprompt.dto.prompt_dto import GeneratedPrompt, PromptRequest
from videoprompt.exceptions.base_exception import AIProviderException, MalformedResponseException
from videoprompt.generate.llm.gpt import FallbackOpenAIClient
from videoprompt.generate.prompt.video_prompt import PROMPTS_PER_BATCH, build_generation_prompt

logger = logging.getLogger(__name__)

GENERATION_TEMPERATURE = 0.8
GENERATION_MAX_TOKENS = 1500


class PromptGenerationService:
    @staticmethod
    async def generate_prompts(client: FallbackOpenAIClient, request: PromptRequest) -> List[GeneratedPrompt]:
        """
        Erzeugt genau 3 Video-Prompts für die Anfrage.

        Speichert nichts; das übernimmt der Aufrufer. Eine Antwort im falschen
        Format wird nicht erneut angefragt.
        """
        system_prompt = build_generation_prompt(
            platform=request.platform,
            category=request.category,
            video_content=request.video_content,
            custom_category=request.custom_category,
            tones=request.tones,
            styles=request.styles,
        )

        try:
            raw = await client.chat_completion(
                messages=[{"role": "system", "content": system_prompt}],
                temperature=GENERATION_TEMPERATURE,
                max_tokens=GENERATION_MAX_TOKENS,
                response_format={"type": "json_object"},
            )
        except AIProviderException as e:
            logger.error(
                f"Prompt-Generierung fehlgeschlagen (platform={request.platform}, category={request.category}): {e.message}"
            )
            raise type(e)(f"Prompt-Generierung fehlgeschlagen: {e.message}") from e

        return PromptGenerationService.parse_prompts(raw)

    @staticmethod
    def parse_prompts(raw: str) -> List[GeneratedPrompt]:
        try:
            result = json.loads(raw or "{}")
        except json.JSONDecodeError as e:
            logger.error(f"Antwort des Providers ist kein JSON: {e}")
            raise MalformedResponseException() from e

        entries = result.get("prompts") if isinstance(result, dict) else None
        if not isinstance(entries, list) or len(entries) != PROMPTS_PER_BATCH:
            count = len(entries) if isinstance(entries, list) else None
            logger.error(f"Antwort des Providers hat unerwartetes Format (prompts={count})")
            raise MalformedResponseException()

        try:
            return [GeneratedPrompt.model_validate(entry) for entry in entries]
        except ValidationError as e:
            logger.error(f"Prompt-Eintrag im Provider-JSON ungültig: {e}")
            raise MalformedResponseException() from e
