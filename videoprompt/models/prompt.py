from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB
from videoprompt.database.database import Base

# JSONB auf PostgreSQL, generisches JSON sonst (z. B. SQLite in Tests)
TagList = JSON().with_variant(JSONB(), "postgresql")


class StoredPrompt(Base):
    __tablename__ = 'prompts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Noch ohne Benutzerverwaltung, bleibt NULL
    user_id = Column(Integer, nullable=True, index=True)
    platform = Column(String(32), nullable=False)
    category = Column(String, nullable=False)
    custom_category = Column(String, nullable=True)
    video_content = Column(Text, nullable=False)
    tones = Column(TagList, nullable=False, default=list)
    styles = Column(TagList, nullable=False, default=list)
    content = Column(Text, nullable=False)
    generation_time = Column(Integer, nullable=False)  # Millisekunden
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<StoredPrompt(id={self.id}, platform='{self.platform}', category='{self.category}')>"
