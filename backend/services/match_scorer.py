"""Teammate matching: rank a roster by shared skills and shared project tech."""

import logging

from models.schemas.match_result import MatchResult, SharedProject
from models.schemas.profile import Project, UserProfile
from services.skill_extractor import normalize_skill

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 2
PROJECT_WEIGHT = 3


def _technologies(projects: list[Project]) -> set[str]:
    return {normalize_skill(t) for project in projects for t in project.technologies}


def compute_match_score(shared_skills: int, shared_projects: int) -> int:
    return SKILL_WEIGHT * shared_skills + PROJECT_WEIGHT * shared_projects


def score_candidate(
    my_skills: set[str], my_technologies: set[str], candidate: UserProfile
) -> MatchResult:
    """Score one roster entry against the caller's normalized features."""
    shared_skills = [s for s in candidate.skills if normalize_skill(s) in my_skills]
    shared_projects = [
        SharedProject(name=p.name, technologies=list(p.technologies))
        for p in candidate.projects
        if my_technologies & {normalize_skill(t) for t in p.technologies}
    ]
    return MatchResult(
        user_id=candidate.id,
        name=candidate.name,
        shared_skills=shared_skills,
        shared_projects=shared_projects,
        skills_count=len(shared_skills),
        projects_count=len(shared_projects),
        match_score=compute_match_score(len(shared_skills), len(shared_projects)),
    )


def score_matches(
    my_skills: set[str] | list[str],
    my_projects: list[Project],
    roster: list[UserProfile],
    exclude_user_id: str | None = None,
) -> list[MatchResult]:
    """Rank ``roster`` by match score, best first.

    Score = 2 x shared skills + 3 x their projects sharing any technology
    with any of mine. Entries scoring zero are omitted; ties keep roster
    order.
    """
    skills = {normalize_skill(s) for s in my_skills}
    technologies = _technologies(my_projects)

    matches = []
    for candidate in roster:
        if exclude_user_id is not None and candidate.id == exclude_user_id:
            continue
        result = score_candidate(skills, technologies, candidate)
        if result.match_score > 0:
            matches.append(result)

    matches.sort(key=lambda m: m.match_score, reverse=True)
    logger.debug("Scored %d roster entries, %d matches", len(roster), len(matches))
    return matches
