import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from videoprompt.configs.settings import settings
from videoprompt.utils.logging import setup_logging
from videoprompt.database.database import create_tables, shutdown_engine
from videoprompt.middlewares.error_handler import ErrorHandlerMiddleware, validation_exception_handler
from videoprompt.controllers import prompt_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("videoprompt")


app = FastAPI(
    title=settings.APP_NAME,
    description="API zur Generierung von Video-Prompts für Social-Media-Plattformen",
    version=settings.APP_VERSION,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Fehler, die kein Controller abfängt
app.add_middleware(ErrorHandlerMiddleware)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# --- Router ---
app.include_router(prompt_router, prefix="/api", tags=["Prompts"])


@app.on_event("startup")
async def on_startup():
    await create_tables()
    if not (settings.OPENAI_API_KEY or settings.OPENAI_FALLBACK_API_KEY):
        logger.warning("Keine OpenAI API-Keys gesetzt; Generierung und Übersetzung schlagen fehl.")


@app.on_event("shutdown")
async def on_shutdown():
    await shutdown_engine()


@app.get("/")
def root():
    return {
        "app_name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "description": "API zur Generierung von Video-Prompts für Social-Media-Plattformen",
        "documentation": "/docs",
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=False)
