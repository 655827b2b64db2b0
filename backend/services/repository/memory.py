"""Process-local profile store, used when MongoDB is not available."""

import logging

from models.schemas.profile import UserProfile
from services.repository.base import ProfileRepository

logger = logging.getLogger(__name__)


class MemoryProfileRepository(ProfileRepository):
    name = "memory"

    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}

    def get(self, user_id: str) -> UserProfile | None:
        return self._profiles.get(user_id)

    def get_by_email(self, email: str) -> UserProfile | None:
        email = email.lower()
        for profile in self._profiles.values():
            if profile.email.lower() == email:
                return profile
        return None

    def save(self, profile: UserProfile) -> UserProfile:
        self._profiles[profile.id] = profile
        logger.debug("Stored profile %s in memory", profile.id)
        return profile

    def list_profiles(self, exclude_user_id: str | None = None) -> list[UserProfile]:
        return [p for p in self._profiles.values() if p.id != exclude_user_id]

    def search(
        self,
        skill: str | None = None,
        availability: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[UserProfile], int]:
        results = list(self._profiles.values())
        if skill:
            needle = skill.strip().lower()
            results = [p for p in results if any(needle in s.lower() for s in p.skills)]
        if availability:
            wanted = availability.lower()
            results = [p for p in results if p.availability.lower() == wanted]

        start = (page - 1) * limit
        return results[start:start + limit], len(results)
