import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from videoprompt.configs.settings import settings
from videoprompt.database.database import get_db
from videoprompt.dto.prompt_dto import (
    OptionsResponse,
    PromptBatchResponse,
    PromptRequest,
    TranslateRequest,
    TranslateResponse,
)
from videoprompt.exceptions.base_exception import AppException
from videoprompt.generate.llm.gpt import FallbackOpenAIClient, get_ai_client
from videoprompt.generate.prompt.catalog import PLATFORM_CATEGORIES, PLATFORMS, STYLES, TONES
from videoprompt.services.prompt_generation_service import PromptGenerationService
from videoprompt.services.prompt_service import PromptService
from videoprompt.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_limit(raw: Optional[str]) -> int:
    """Ungültige, leere oder nicht positive Werte ergeben den Standardwert."""
    try:
        limit = int(raw) if raw is not None else 0
    except ValueError:
        limit = 0
    if limit <= 0:
        return settings.PROMPT_HISTORY_DEFAULT_LIMIT
    return min(limit, settings.PROMPT_HISTORY_MAX_LIMIT)


@router.post("/generate-prompts")
async def generate_prompts(
    data: PromptRequest,
    db: AsyncSession = Depends(get_db),
    client: FallbackOpenAIClient = Depends(get_ai_client),
):
    """Generiert 3 Video-Prompts und speichert sie im Verlauf."""
    start = time.perf_counter()
    try:
        prompts = await PromptGenerationService.generate_prompts(client, data)
        generation_time = time.perf_counter() - start
        saved = await PromptService.save_batch(
            db,
            request=data,
            prompts=prompts,
            generation_time_ms=round(generation_time * 1000),
        )
    except AppException as e:
        logger.error(f"Fehler bei der Prompt-Generierung (platform={data.platform}, category={data.category}): {e.message}")
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "message": e.message, "prompts": [], "generationTime": 0},
        )
    except Exception:
        logger.exception(f"Unerwarteter Fehler bei der Prompt-Generierung (platform={data.platform}, category={data.category})")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Interner Serverfehler", "prompts": [], "generationTime": 0},
        )

    response = PromptBatchResponse(prompts=saved, generation_time=generation_time)
    return response.model_dump(by_alias=True)


@router.post("/translate-prompt")
async def translate_prompt(
    payload: Optional[TranslateRequest] = None,
    client: FallbackOpenAIClient = Depends(get_ai_client),
):
    """Übersetzt einen Prompt ins Englische."""
    text = payload.resolve_text() if payload else None
    if text is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Prompt-Inhalt ist erforderlich"},
        )

    try:
        translation = await TranslationService.translate(client, text)
    except AppException as e:
        logger.error(f"Fehler bei der Übersetzung: {e.message}")
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "message": e.message},
        )

    return TranslateResponse(translation=translation).model_dump()


@router.get("/prompts")
async def get_prompts(
    limit: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Neueste gespeicherte Prompts, neueste zuerst."""
    try:
        prompts = await PromptService.get_recent_prompts(db, limit=parse_limit(limit))
    except AppException as e:
        logger.error(f"Fehler beim Abrufen der Prompts: {e.message}")
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "message": "Fehler beim Abrufen der Prompts", "prompts": []},
        )
    except Exception:
        logger.exception(f"Unerwarteter Fehler beim Abrufen der Prompts (limit={limit})")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Fehler beim Abrufen der Prompts", "prompts": []},
        )

    return {
        "success": True,
        "prompts": [p.model_dump(by_alias=True, mode="json") for p in prompts],
    }


@router.get("/prompts/{prompt_id}")
async def get_prompt(prompt_id: int, db: AsyncSession = Depends(get_db)):
    try:
        prompt = await PromptService.get_prompt(db, prompt_id)
    except AppException as e:
        return JSONResponse(
            status_code=e.status_code,
            content={"success": False, "message": e.message},
        )

    return {"success": True, "prompt": prompt.model_dump(by_alias=True, mode="json")}


@router.get("/options", response_model=OptionsResponse)
async def get_options():
    """Plattformen, Kategorien je Plattform sowie Ton- und Stiloptionen für das Formular."""
    return OptionsResponse(
        platforms=PLATFORMS,
        categories=PLATFORM_CATEGORIES,
        tones=TONES,
        styles=STYLES,
    )
