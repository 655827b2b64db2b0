from pydantic import BaseModel

from models.schemas.match_result import MatchResult
from models.schemas.profile import Achievement, Project, UserProfile


class ResumeAnalysisResponse(BaseModel):
    user_id: str
    skills: list[str] = []
    github_links: list[str] = []
    projects: list[Project] = []
    achievements: list[Achievement] = []
    matches: list[MatchResult] = []


class SignupResponse(BaseModel):
    success: bool = True
    message: str = "Signup successful"
    user: UserProfile


class ResumeDebugResponse(BaseModel):
    text_length: int = 0
    first_lines: list[str] = []
    skills: list[str] = []
    github_links: list[str] = []
    projects: list[Project] = []
    achievements: list[Achievement] = []


class Pagination(BaseModel):
    total: int = 0
    page: int = 1
    limit: int = 10
    pages: int = 0


class TeammateSearchResponse(BaseModel):
    success: bool = True
    teammates: list[UserProfile] = []
    pagination: Pagination = Pagination()


class ProfileUpdateResponse(BaseModel):
    success: bool = True
    message: str = "Profile updated successfully"
    user: UserProfile
