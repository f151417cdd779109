import logging

from videoprompt.exceptions.base_exception import AIProviderException, TranslationException
from videoprompt.generate.llm.gpt import FallbackOpenAIClient
from videoprompt.generate.prompt.video_prompt import TRANSLATION_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

TRANSLATION_TEMPERATURE = 0.3
TRANSLATION_MAX_TOKENS = 500


class TranslationService:
    @staticmethod
    async def translate(client: FallbackOpenAIClient, text: str) -> str:
        """Übersetzt deutschen Text ins Englische (Richtung fest, keine Spracherkennung)."""
        try:
            translation = await client.chat_completion(
                messages=[
                    {"role": "system", "content": TRANSLATION_SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
                temperature=TRANSLATION_TEMPERATURE,
                max_tokens=TRANSLATION_MAX_TOKENS,
            )
        except AIProviderException as e:
            logger.error(f"OpenAI-Übersetzung fehlgeschlagen: {e.message}")
            raise type(e)(f"Fehler bei der Übersetzung: {e.message}") from e

        if not translation or not translation.strip():
            logger.warning("OpenAI hat eine leere Übersetzung geliefert")
            raise TranslationException()

        return translation.strip()
