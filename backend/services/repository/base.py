"""Abstract profile store used by the API layer."""

import uuid
from abc import ABC, abstractmethod

from models.schemas.profile import UserProfile


class ProfileRepository(ABC):
    """Base class for profile persistence.

    Subclasses must implement:
        - get / get_by_email: single-profile lookups
        - save: insert or replace a profile by id
        - list_profiles: the roster used for matching
        - search: skill/availability filtering with pagination
    """

    name: str = ""

    @abstractmethod
    def get(self, user_id: str) -> UserProfile | None:
        """Return the profile with ``user_id`` or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> UserProfile | None:
        """Return the profile registered with ``email`` (case-insensitive)."""

    @abstractmethod
    def save(self, profile: UserProfile) -> UserProfile:
        """Insert or replace ``profile``."""

    @abstractmethod
    def list_profiles(self, exclude_user_id: str | None = None) -> list[UserProfile]:
        """Return every stored profile except ``exclude_user_id``."""

    @abstractmethod
    def search(
        self,
        skill: str | None = None,
        availability: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[UserProfile], int]:
        """Return (one page of matching profiles, total match count)."""

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex
