import logging
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from videoprompt.exceptions.base_exception import AppException

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware für Fehler, die kein Controller abgefangen hat
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except AppException as e:
            logger.error(f"{request.method} {request.url.path} fehlgeschlagen: {e.message}")
            return JSONResponse(
                status_code=e.status_code,
                content={"success": False, "message": e.message, "error_code": e.error_code}
            )
        except Exception:
            logger.exception(f"Unerwarteter Fehler bei {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "success": False,
                    "message": "Interner Serverfehler",
                    "error_code": "INTERNAL_SERVER_ERROR",
                }
            )


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Feldpfade ohne das führende 'body', z. B. ["customCategory"]."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        formatted.append({
            "path": loc,
            "message": error.get("msg", ""),
            "code": error.get("type", ""),
        })
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info(f"Ungültige Eingabedaten für {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Ungültige Eingabedaten", "errors": errors},
    )
