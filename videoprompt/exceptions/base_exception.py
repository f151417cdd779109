from fastapi import status
from typing import Any, List, Optional

class AppException(Exception):
    """
    Basis-Exception für alle fachlichen Fehler der Anwendung
    """
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR"
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)

class ValidationException(AppException):
    """Ungültige oder unvollständige Eingabedaten"""
    def __init__(
        self,
        message: str = "Ungültige Eingabedaten",
        errors: Optional[List[Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ):
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, error_code=error_code)
        self.errors = errors or []

class NotFoundException(AppException):
    """Ressource nicht gefunden"""
    def __init__(self, message: str = "Nicht gefunden", error_code: str = "NOT_FOUND"):
        super().__init__(message=message, status_code=status.HTTP_404_NOT_FOUND, error_code=error_code)

class AIProviderException(AppException):
    """Der KI-Provider ist mit allen konfigurierten Schlüsseln fehlgeschlagen"""
    def __init__(self, message: str = "KI-Provider nicht erreichbar", error_code: str = "AI_PROVIDER_ERROR"):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error_code=error_code)

class AIProviderUnavailableException(AIProviderException):
    """Weder primärer noch Fallback-Schlüssel konfiguriert"""
    def __init__(self, message: str = "Keine OpenAI API-Keys verfügbar", error_code: str = "AI_PROVIDER_UNAVAILABLE"):
        super().__init__(message=message, error_code=error_code)

class MalformedResponseException(AppException):
    """Antwort des Providers entspricht nicht dem erwarteten JSON-Schema"""
    def __init__(self, message: str = "Ungültige Antwort von OpenAI API", error_code: str = "MALFORMED_AI_RESPONSE"):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error_code=error_code)

class TranslationException(AppException):
    def __init__(self, message: str = "Keine Übersetzung erhalten", error_code: str = "TRANSLATION_ERROR"):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error_code=error_code)

class PersistenceException(AppException):
    """Speichern oder Lesen in der Datenbank fehlgeschlagen"""
    def __init__(self, message: str = "Datenbankfehler", error_code: str = "PERSISTENCE_ERROR"):
        super().__init__(message=message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, error_code=error_code)
