"""MongoDB-backed profile store."""

import logging
import re
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection

from models.schemas.profile import UserProfile
from services.repository.base import ProfileRepository

logger = logging.getLogger(__name__)


def _to_document(profile: UserProfile) -> dict[str, Any]:
    document = profile.model_dump(exclude={"id"})
    document["_id"] = profile.id
    document["email"] = profile.email.lower()
    return document


def _to_profile(document: dict[str, Any]) -> UserProfile:
    data = dict(document)
    data["id"] = str(data.pop("_id"))
    return UserProfile.model_validate(data)


class MongoProfileRepository(ProfileRepository):
    name = "mongo"

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @classmethod
    def connect(
        cls, uri: str, database: str, collection: str, timeout_ms: int = 2000
    ) -> "MongoProfileRepository":
        """Connect and ping the server; raises a PyMongoError when unreachable."""
        client: MongoClient = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        client.admin.command("ping")
        logger.info("Connected to MongoDB database %s", database)
        return cls(client[database][collection])

    def get(self, user_id: str) -> UserProfile | None:
        document = self._collection.find_one({"_id": user_id})
        return _to_profile(document) if document else None

    def get_by_email(self, email: str) -> UserProfile | None:
        document = self._collection.find_one({"email": email.lower()})
        return _to_profile(document) if document else None

    def save(self, profile: UserProfile) -> UserProfile:
        self._collection.replace_one({"_id": profile.id}, _to_document(profile), upsert=True)
        return profile

    def list_profiles(self, exclude_user_id: str | None = None) -> list[UserProfile]:
        query: dict[str, Any] = {}
        if exclude_user_id is not None:
            query["_id"] = {"$ne": exclude_user_id}
        return [_to_profile(doc) for doc in self._collection.find(query)]

    def search(
        self,
        skill: str | None = None,
        availability: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[UserProfile], int]:
        query: dict[str, Any] = {}
        if skill:
            # Escape so terms like "c++" are matched literally
            pattern = re.escape(skill.strip())
            query["skills"] = {"$elemMatch": {"$regex": pattern, "$options": "i"}}
        if availability:
            query["availability"] = {
                "$regex": f"^{re.escape(availability)}$",
                "$options": "i",
            }

        total = self._collection.count_documents(query)
        cursor = self._collection.find(query).skip((page - 1) * limit).limit(limit)
        return [_to_profile(doc) for doc in cursor], total
