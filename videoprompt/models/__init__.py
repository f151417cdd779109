# Alle Modelle importieren, damit Base.metadata vollständig ist
from videoprompt.models.prompt import StoredPrompt

__all__ = [
    "StoredPrompt",
]
