# Router aller Controller
from videoprompt.controllers.prompt_controller import router as prompt_router

__all__ = [
    "prompt_router",
]
