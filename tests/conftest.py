import asyncio
import json
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock

# Vor dem Import der App setzen, damit keine Postgres-Engine gebaut wird
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from main import app
from videoprompt.database.database import create_tables, get_db
from videoprompt.generate.llm.gpt import get_ai_client


def completion_response(content):
    """Nachbau der Form von openai ChatCompletion, soweit der Client sie liest."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def prompts_payload(category="Cooking Hacks", count=3):
    return json.dumps({
        "prompts": [
            {"id": i + 1, "content": f"Prompt {i + 1} für {category}", "category": category}
            for i in range(count)
        ]
    }, ensure_ascii=False)


class FakeAIClient:
    """Ersetzt FallbackOpenAIClient; chat_completion ist ein AsyncMock."""

    def __init__(self, content="", error=None):
        self.chat_completion = AsyncMock(return_value=content, side_effect=error)


@pytest.fixture
def engine(tmp_path):
    # Datei statt :memory: und NullPool, weil TestClient pro Request eine eigene Event-Loop nutzt
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'prompts.db'}", poolclass=NullPool)
    asyncio.run(create_tables(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def fake_ai():
    return FakeAIClient(content=prompts_payload())


@pytest.fixture
def client(session_factory, fake_ai):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_ai_client] = lambda: fake_ai
    yield TestClient(app)
    app.dependency_overrides.clear()
