from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional, List

from videoprompt.models.prompt import StoredPrompt
from videoprompt.dto.prompt_dto import PromptCreate


class PromptRepository:
    """Repository für die Tabelle prompts. Nur Einfügen und Lesen, kein Update/Delete."""

    @staticmethod
    async def create(db: AsyncSession, data: PromptCreate) -> StoredPrompt:
        """Speichert einen Prompt und committet sofort (eigene Transaktion pro Zeile)."""
        db_prompt = StoredPrompt(
            user_id=data.user_id,
            platform=data.platform,
            category=data.category,
            custom_category=data.custom_category,
            video_content=data.video_content,
            tones=list(data.tones),
            styles=list(data.styles),
            content=data.content,
            generation_time=data.generation_time,
        )

        db.add(db_prompt)
        await db.commit()
        await db.refresh(db_prompt)

        return db_prompt

    @staticmethod
    async def get_by_id(db: AsyncSession, prompt_id: int) -> Optional[StoredPrompt]:
        result = await db.execute(
            select(StoredPrompt)
            .where(StoredPrompt.id == prompt_id)
        )
        return result.scalars().first()

    @staticmethod
    async def get_recent(
        db: AsyncSession,
        user_id: Optional[int] = None,
        limit: int = 50,
    ) -> List[StoredPrompt]:
        """
        Liefert die neuesten Prompts.

        Args:
            db: Database session
            user_id: optionaler Filter auf den Benutzer
            limit: maximale Anzahl Zeilen

        Returns:
            Liste von StoredPrompt, neueste zuerst
        """
        query = select(StoredPrompt)
        if user_id is not None:
            query = query.where(StoredPrompt.user_id == user_id)
        query = query.order_by(StoredPrompt.created_at.desc(), StoredPrompt.id.desc()).limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())
