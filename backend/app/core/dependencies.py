from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Query, status

from app.core.config import settings
from app.models.table import ALL_DEPARTMENTS, SortDirection, SortField, ViewState
from app.services.preferences_service import PreferencesService, preferences_service
from app.services.roster_store import RosterStore, roster_store

logger = logging.getLogger(__name__)


def get_roster_store() -> RosterStore:
    if not roster_store.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Roster not loaded",
        )
    return roster_store


def get_preferences_service() -> PreferencesService:
    return preferences_service


def get_view_state(
    search: str = "",
    department: str = ALL_DEPARTMENTS,
    sort: SortField = SortField.ID,
    direction: SortDirection = SortDirection.ASC,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
) -> ViewState:
    size = page_size or settings.DEFAULT_PAGE_SIZE
    if size > settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"page_size must be at most {settings.MAX_PAGE_SIZE}",
        )
    return ViewState(
        search=search,
        department=department,
        sort_field=sort,
        sort_direction=direction,
        page=page,
        page_size=size,
    )


def require_export_allowed(
    prefs: PreferencesService = Depends(get_preferences_service),  # noqa: B008
) -> None:
    if not prefs.export_allowed:
        logger.info("CSV export rejected: disabled in privacy preferences")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Export is disabled in privacy preferences",
        )
