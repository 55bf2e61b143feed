from fastapi import APIRouter

from habit_tracker.api.habits import router as habits_router

router = APIRouter()
router.include_router(habits_router)

__all__ = ["router"]
