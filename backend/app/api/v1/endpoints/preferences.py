from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_preferences_service
from app.models.preferences import Preferences, PreferencesUpdate
from app.services.preferences_service import PreferencesService

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=Preferences)
async def get_preferences(prefs: PreferencesService = Depends(get_preferences_service)):  # noqa: B008
    return prefs.get()


@router.patch("", response_model=Preferences)
async def update_preferences(
    changes: PreferencesUpdate,
    prefs: PreferencesService = Depends(get_preferences_service),  # noqa: B008
):
    return prefs.update(changes)


@router.post("/reset", response_model=Preferences)
async def reset_preferences(prefs: PreferencesService = Depends(get_preferences_service)):  # noqa: B008
    return prefs.reset()
