"""Pydantic contracts shared by the extractors, the repository and the API."""

from models.schemas.match_result import MatchResult, SharedProject
from models.schemas.profile import (
    Achievement,
    Project,
    ResumeExtraction,
    UserProfile,
)

__all__ = [
    "Achievement",
    "MatchResult",
    "Project",
    "ResumeExtraction",
    "SharedProject",
    "UserProfile",
]
