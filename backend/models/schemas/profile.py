"""Profiles and the structured entities extracted from a resume."""

from typing import Literal

from pydantic import BaseModel

AchievementType = Literal[
    "Award", "Certification", "Recognition", "Scholarship", "Ranking", "Achievement"
]


class Project(BaseModel):
    """A single project entry."""
    name: str
    description: str = ""
    technologies: list[str] = []
    duration: str = ""
    github_url: str = ""


class Achievement(BaseModel):
    """A single achievement entry."""
    title: str
    type: AchievementType = "Achievement"


class ResumeExtraction(BaseModel):
    """Everything the analyzer pulls out of one resume."""
    skills: list[str] = []
    github_links: list[str] = []
    projects: list[Project] = []
    achievements: list[Achievement] = []


class UserProfile(BaseModel):
    """A stored user together with the features used for matching."""
    id: str
    name: str = ""
    email: str = ""
    bio: str = ""
    availability: str = "Not specified"
    skills: list[str] = []
    github_links: list[str] = []
    projects: list[Project] = []
    achievements: list[Achievement] = []
