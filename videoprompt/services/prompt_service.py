import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from videoprompt.dto.prompt_dto import GeneratedPrompt, PromptCreate, PromptItem, PromptRead, PromptRequest
from videoprompt.exceptions.base_exception import NotFoundException, PersistenceException
from videoprompt.repositories.prompt_repository import PromptRepository

logger = logging.getLogger(__name__)


class PromptService:
    """
    Service für Speichern und Abrufen generierter Prompts.
    """

    @staticmethod
    async def save_batch(
        db: AsyncSession,
        request: PromptRequest,
        prompts: List[GeneratedPrompt],
        generation_time_ms: int,
        user_id: Optional[int] = None,
    ) -> List[PromptItem]:
        """
        Speichert jeden Prompt eines Batches als eigene Zeile.

        Es gibt keine gemeinsame Transaktion: schlägt eine Zeile fehl, bleiben
        die bereits gespeicherten erhalten. Die zurückgegebenen ids sind die
        Datenbank-ids, nicht die batch-lokalen ids 1-3.
        """
        saved: List[PromptItem] = []
        for prompt in prompts:
            data = PromptCreate(
                user_id=user_id,
                platform=request.platform,
                category=prompt.category,
                custom_category=request.custom_category,
                video_content=request.video_content,
                tones=list(request.tones),
                styles=list(request.styles),
                content=prompt.content,
                generation_time=generation_time_ms,
            )
            try:
                row = await PromptRepository.create(db, data)
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(
                    f"Speichern von Prompt {prompt.id} fehlgeschlagen, "
                    f"{len(saved)} von {len(prompts)} bereits gespeichert: {e}"
                )
                raise PersistenceException("Prompt konnte nicht gespeichert werden") from e
            saved.append(PromptItem(id=row.id, content=row.content, category=row.category))

        return saved

    @staticmethod
    async def get_recent_prompts(db: AsyncSession, limit: int, user_id: Optional[int] = None) -> List[PromptRead]:
        try:
            rows = await PromptRepository.get_recent(db, user_id=user_id, limit=limit)
        except SQLAlchemyError as e:
            logger.error(f"Abrufen der Prompts fehlgeschlagen (limit={limit}): {e}")
            raise PersistenceException("Fehler beim Abrufen der Prompts") from e
        return [PromptRead.model_validate(row) for row in rows]

    @staticmethod
    async def get_prompt(db: AsyncSession, prompt_id: int) -> PromptRead:
        try:
            row = await PromptRepository.get_by_id(db, prompt_id)
        except SQLAlchemyError as e:
            logger.error(f"Abrufen von Prompt {prompt_id} fehlgeschlagen: {e}")
            raise PersistenceException("Fehler beim Abrufen des Prompts") from e
        if not row:
            raise NotFoundException("Prompt nicht gefunden")
        return PromptRead.model_validate(row)
