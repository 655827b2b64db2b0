"""Process-wide profile repository, chosen once on first use.

``storage_backend`` selects the store: "memory", "mongo", or "auto" (MongoDB
when configured and reachable, memory otherwise).
"""

import logging

from pymongo.errors import PyMongoError

from config import settings
from services.repository.base import ProfileRepository
from services.repository.memory import MemoryProfileRepository
from services.repository.mongo import MongoProfileRepository

logger = logging.getLogger(__name__)

_repository: ProfileRepository | None = None


def _create_repository() -> ProfileRepository:
    backend = settings.storage_backend
    if backend == "memory":
        return MemoryProfileRepository()
    if backend not in ("auto", "mongo"):
        raise ValueError(f"Unknown storage backend: {backend}")

    if not settings.mongodb_uri:
        if backend == "mongo":
            raise ValueError("storage_backend is 'mongo' but MONGODB_URI is not set")
        logger.warning("No MONGODB_URI set - using in-memory profile storage")
        return MemoryProfileRepository()

    try:
        return MongoProfileRepository.connect(
            settings.mongodb_uri,
            settings.mongodb_database,
            settings.mongodb_collection,
            settings.mongodb_timeout_ms,
        )
    except PyMongoError as e:
        if backend == "mongo":
            raise
        logger.warning("MongoDB unavailable (%s) - using in-memory profile storage", e)
        return MemoryProfileRepository()


def get_repository() -> ProfileRepository:
    """Get the profile repository, creating it on first access."""
    global _repository
    if _repository is None:
        _repository = _create_repository()
        logger.info("Profile storage: %s", _repository.name)
    return _repository


def clear() -> None:
    """Forget the current repository. Useful for testing."""
    global _repository
    _repository = None
