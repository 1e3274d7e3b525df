"""Resolve a user's (skin tone, hair color) from their newest onboarding record."""

import logging
from typing import Optional

from app.config import Settings, get_settings
from app.schemas import PreferenceSelection
from app.services.result import Fallback, read_or_fallback

logger = logging.getLogger(__name__)


class PreferenceResolver:
    """Reads the newest preference record, falling back to the onboarding defaults.

    An empty result and a failed read look the same to the caller.
    """

    def __init__(self, store, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()

    @property
    def defaults(self) -> PreferenceSelection:
        return PreferenceSelection(
            skin_tone=self.settings.default_skin_tone,
            hair_color=self.settings.default_hair_color,
        )

    async def resolve(self, user_id: str) -> PreferenceSelection:
        result = await read_or_fallback(
            lambda: self.store.get_latest_preference(user_id),
            None,
            f"preferences for user {user_id}",
        )
        if result.value is None:
            if not isinstance(result, Fallback):
                logger.debug(f"No preferences stored for user {user_id}, using defaults")
            return self.defaults

        preference = result.value
        return PreferenceSelection(
            skin_tone=preference.skin_tone or self.settings.default_skin_tone,
            hair_color=preference.hair_color or self.settings.default_hair_color,
        )
