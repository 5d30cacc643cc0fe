from __future__ import annotations

import logging
from typing import Any

from app.core.config import Settings
from app.models.preferences import Preferences, PreferencesUpdate

logger = logging.getLogger(__name__)


def _merge(base: dict[str, Any], changes: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class PreferencesService:
    def __init__(self) -> None:
        self._defaults = Preferences()
        self._current = self._defaults

    def initialize(self, settings: Settings) -> None:
        self._defaults = Preferences(
            company_name=settings.COMPANY_NAME,
            currency=settings.DEFAULT_CURRENCY,
        )
        self._current = self._defaults

    def get(self) -> Preferences:
        return self._current

    def update(self, changes: PreferencesUpdate) -> Preferences:
        patch = changes.model_dump(exclude_unset=True, exclude_none=True)
        self._current = Preferences.model_validate(_merge(self._current.model_dump(), patch))
        logger.info("Preferences updated: %s", sorted(patch))
        return self._current

    def reset(self) -> Preferences:
        self._current = self._defaults
        return self._current

    @property
    def export_allowed(self) -> bool:
        return self._current.privacy.allow_export


preferences_service = PreferencesService()
