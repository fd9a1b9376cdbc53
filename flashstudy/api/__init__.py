from flashstudy.api.flashcards import router as flashcards_router
from flashstudy.api.health import router as health_router

__all__ = [
    "flashcards_router",
    "health_router",
]
