"""Ranked matches between one user and the rest of the roster."""

from pydantic import BaseModel


class SharedProject(BaseModel):
    name: str
    technologies: list[str] = []


class MatchResult(BaseModel):
    user_id: str
    name: str = ""
    shared_skills: list[str] = []
    shared_projects: list[SharedProject] = []
    skills_count: int = 0
    projects_count: int = 0
    match_score: int = 0
