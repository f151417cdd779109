from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Any, Dict, List, Optional
from datetime import datetime

from videoprompt.generate.prompt.catalog import (
    CUSTOM_CATEGORY,
    Platform,
    Style,
    Tone,
    allowed_categories,
)


class PromptRequest(BaseModel):
    """DTO für die Anfrage zur Prompt-Generierung."""
    platform: Platform = Field(..., description="Zielplattform")
    category: str = Field(..., min_length=1, description="Kategorie, abhängig von der Plattform")
    custom_category: Optional[str] = Field(
        None,
        alias="customCategory",
        validate_default=True,
        description="Freie Kategorie, Pflicht bei 'diverses'",
    )
    video_content: str = Field(
        ...,
        alias="videoContent",
        min_length=1,
        max_length=1000,
        description="Inhalt und Ziel des Videos",
    )
    tones: List[Tone] = Field(default_factory=list, description="Gewünschte Tonarten")
    styles: List[Style] = Field(default_factory=list, description="Gewünschte Stilarten")

    class Config:
        populate_by_name = True

    @field_validator("category")
    @classmethod
    def category_matches_platform(cls, value: str, info: ValidationInfo) -> str:
        platform = info.data.get("platform")
        # Ohne gültige Plattform meldet bereits das Feld platform den Fehler
        if platform and value not in allowed_categories(platform):
            raise ValueError(f"Kategorie '{value}' ist für {platform} nicht verfügbar")
        return value

    @field_validator("custom_category")
    @classmethod
    def custom_category_required(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if info.data.get("category") == CUSTOM_CATEGORY and not (value and value.strip()):
            raise ValueError("Bei 'Diverses' ist eine individuelle Kategorie-Eingabe erforderlich")
        return value


class GeneratedPrompt(BaseModel):
    """Ein Eintrag aus einem Generierungs-Batch; die id gilt nur innerhalb des Batches und wird nicht geprüft."""
    id: int
    content: str
    category: str

    class Config:
        frozen = True


class PromptCreate(BaseModel):
    """Eine zu speichernde Zeile der Tabelle prompts."""
    user_id: Optional[int] = None
    platform: str
    category: str
    custom_category: Optional[str] = None
    video_content: str
    tones: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)
    content: str
    generation_time: int = Field(..., ge=0, description="Dauer der Generierung in Millisekunden")


class PromptItem(BaseModel):
    id: int
    content: str
    category: str


class PromptBatchResponse(BaseModel):
    success: bool = True
    prompts: List[PromptItem]
    generation_time: float = Field(..., alias="generationTime", description="Dauer in Sekunden")

    class Config:
        populate_by_name = True


class PromptRead(BaseModel):
    """DTO für einen gespeicherten Prompt im Verlauf."""
    id: int
    content: str
    platform: str
    category: str
    custom_category: Optional[str] = Field(None, alias="customCategory")
    video_content: str = Field(..., alias="videoContent")
    tones: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)
    generation_time: int = Field(..., alias="generationTime")
    created_at: datetime = Field(..., alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class TranslateRequest(BaseModel):
    """Akzeptiert content oder text; content hat Vorrang."""
    content: Any = None
    text: Any = None

    def resolve_text(self) -> Optional[str]:
        value = self.content or self.text
        if not isinstance(value, str) or not value:
            return None
        return value


class TranslateResponse(BaseModel):
    success: bool = True
    translation: str


class OptionsResponse(BaseModel):
    platforms: List[str]
    categories: Dict[str, List[str]]
    tones: List[str]
    styles: List[str]
