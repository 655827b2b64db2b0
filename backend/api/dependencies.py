"""Shared dependencies for API routes."""

from services.repository.base import ProfileRepository
from services.repository.registry import get_repository


def get_profile_repository() -> ProfileRepository:
    return get_repository()
