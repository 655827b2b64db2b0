"""Orchestrator: resume text in, structured features and matches out.

Pipeline:
1. Skill extraction over the whole text
2. GitHub link extraction over the raw text
3. Project extraction from project/experience sections
4. Achievement extraction (sections + indicator lines anywhere)
5. Link-to-project pairing
6. Optional scoring against a roster of other profiles
"""

import logging

from models.schemas.match_result import MatchResult
from models.schemas.profile import ResumeExtraction, UserProfile
from services.achievement_extractor import extract_achievements
from services.link_extractor import extract_github_links
from services.link_matcher import attach_github_links
from services.match_scorer import score_matches
from services.project_extractor import extract_projects
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)


class MissingTextError(ValueError):
    """Raised when there is no resume text to analyze."""


def analyze_resume(text: str | None) -> ResumeExtraction:
    """Run every extractor over one resume."""
    if not text or not text.strip():
        raise MissingTextError("No resume text provided")

    skills = extract_skills(text)
    links = extract_github_links(text)
    projects = attach_github_links(extract_projects(text), links)
    achievements = extract_achievements(text)

    logger.info(
        "Resume analyzed: %d skills, %d links, %d projects, %d achievements",
        len(skills),
        len(links),
        len(projects),
        len(achievements),
    )
    return ResumeExtraction(
        skills=sorted(skills),
        github_links=links,
        projects=projects,
        achievements=achievements,
    )


def apply_extraction(profile: UserProfile, extraction: ResumeExtraction) -> UserProfile:
    """Return a copy of ``profile`` carrying the extracted features."""
    return profile.model_copy(
        update={
            "skills": list(extraction.skills),
            "github_links": list(extraction.github_links),
            "projects": list(extraction.projects),
            "achievements": list(extraction.achievements),
        }
    )


def find_matches(profile: UserProfile, roster: list[UserProfile]) -> list[MatchResult]:
    """Rank ``roster`` against ``profile``, never matching it to itself."""
    return score_matches(
        profile.skills, profile.projects, roster, exclude_user_id=profile.id
    )
