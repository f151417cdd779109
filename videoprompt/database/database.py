from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from typing import AsyncGenerator, Optional
import asyncio

from videoprompt.configs.settings import settings

# Async-Engine
engine = create_async_engine(settings.DATABASE_URL, echo=False)

# Async-Session
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

# Basisklasse für alle ORM-Modelle
Base = declarative_base()

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency, die jedem API-Request eine eigene Datenbank-Session gibt.

    Die Repositories committen selbst; hier wird nur bei Fehlern
    zurückgerollt und die Session geschlossen.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

async def create_tables(bind: Optional[AsyncEngine] = None):
    """
    Legt fehlende Tabellen an.
    """
    # Modelle importieren, damit Base.metadata vollständig ist
    import videoprompt.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def shutdown_engine() -> None:
    await engine.dispose()

# Direkt ausführbar: python -m videoprompt.database.database
if __name__ == "__main__":
    asyncio.run(create_tables())
