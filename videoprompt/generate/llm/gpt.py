import logging
from functools import lru_cache
from typing import Any, Awaitable, Callable, Dict, List, Optional, TypeVar

from openai import AsyncOpenAI

from videoprompt.configs.settings import settings
from videoprompt.exceptions.base_exception import AIProviderException, AIProviderUnavailableException

logger = logging.getLogger(__name__)

T = TypeVar("T")

ClientFactory = Callable[..., Any]


class FallbackOpenAIClient:
    """
    OpenAI-Client mit zwei Schlüsseln.

    Jeder Aufruf wird zuerst mit dem primären Schlüssel versucht. Schlägt er
    fehl (Netzwerk, Auth, Rate-Limit, ...), folgt genau ein zweiter Versuch
    mit dem Fallback-Schlüssel. Kein Backoff, keine weiteren Wiederholungen.
    """

    def __init__(
        self,
        primary_api_key: Optional[str],
        fallback_api_key: Optional[str] = None,
        model: str = "gpt-4o",
        timeout: float = 60.0,
        client_factory: ClientFactory = AsyncOpenAI,
    ):
        self.primary_api_key = primary_api_key or None
        self.fallback_api_key = fallback_api_key or None
        self.model = model
        self.timeout = timeout
        self._client_factory = client_factory

    @property
    def is_configured(self) -> bool:
        return bool(self.primary_api_key or self.fallback_api_key)

    def _create_client(self, api_key: str):
        # SDK-eigene Retries aus, der Fallback ist der einzige zweite Versuch
        return self._client_factory(api_key=api_key, timeout=self.timeout, max_retries=0)

    async def run(self, request_fn: Callable[[Any], Awaitable[T]]) -> T:
        if not self.is_configured:
            raise AIProviderUnavailableException()

        if not self.primary_api_key:
            try:
                return await request_fn(self._create_client(self.fallback_api_key))
            except Exception as e:
                logger.error(f"Fallback-API-Key fehlgeschlagen: {e}")
                raise AIProviderException(str(e)) from e

        try:
            return await request_fn(self._create_client(self.primary_api_key))
        except Exception as e:
            if not self.fallback_api_key:
                logger.error(f"Primärer API-Key fehlgeschlagen, kein Fallback konfiguriert: {e}")
                raise AIProviderException(str(e)) from e
            logger.warning(f"Primärer API-Key fehlgeschlagen, versuche Fallback: {e}")

        try:
            return await request_fn(self._create_client(self.fallback_api_key))
        except Exception as fallback_error:
            logger.error(f"Fallback-API-Key ebenfalls fehlgeschlagen: {fallback_error}")
            raise AIProviderException(str(fallback_error)) from fallback_error

    async def chat_completion(
        self,
        messages: List[Dict[str, str]],
        temperature: float,
        max_tokens: int,
        response_format: Optional[Dict[str, str]] = None,
    ) -> str:
        """Führt eine Chat-Completion aus und gibt den Text der ersten Antwort zurück."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if response_format:
            kwargs["response_format"] = response_format

        async def _request(client) -> Any:
            return await client.chat.completions.create(**kwargs)

        response = await self.run(_request)
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


@lru_cache
def get_ai_client() -> FallbackOpenAIClient:
    """Dependency: ein Client pro Prozess, Schlüssel einmalig aus den Settings."""
    return FallbackOpenAIClient(
        primary_api_key=settings.OPENAI_API_KEY,
        fallback_api_key=settings.OPENAI_FALLBACK_API_KEY,
        model=settings.OPENAI_MODEL,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )
