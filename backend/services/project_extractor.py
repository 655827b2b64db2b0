"""Project extraction from the project/experience sections of a resume."""

import logging
import re

from models.schemas.profile import Project
from services.section_parser import (
    MONTH_YEAR_RE,
    YEAR_RE,
    SectionState,
    SectionVocabulary,
    extract_duration,
    has_date_token,
    is_bulleted,
    remove_date_tokens,
    segment_lines,
    strip_bullet,
)
from services.skill_extractor import extract_skills

logger = logging.getLogger(__name__)

PROJECT_VOCABULARY = SectionVocabulary(
    name="projects",
    entry_headers=(
        "projects", "project", "portfolio", "work experience", "experience",
        "technical projects", "personal projects", "academic projects",
        "key projects", "applications",
    ),
    exit_headers=(
        "education", "skills", "skill summary", "technical skills",
        "certifications", "contact", "summary", "objective", "achievements",
        "accomplishments", "awards", "honors", "volunteer", "languages",
        "interests", "hobbies", "references", "publications",
    ),
)

# Lines opening with these read as "how it was built", never as a title.
DESCRIPTION_LEAD_VERBS = ("used", "using", "implemented", "utilized", "leveraged")

# "Built a Chat App" names a project, but "Built the API with Flask" under an
# open project describes it: these verbs only start a description when the
# line also names a known technology.
ACTION_LEAD_VERBS = (
    "developed", "created", "built", "designed", "deployed", "integrated", "wrote",
)

# Project names mentioning these are achievements that leaked into the section.
ACHIEVEMENT_WORDS = ("achieved", "awarded")

MIN_TITLE_LENGTH = 5
MAX_TITLE_LENGTH = 80
MAX_TITLE_WORDS = 8
MIN_DESCRIPTION_LENGTH = 10
MIN_NAME_LENGTH = 4
MAX_NAME_LENGTH = 200

# "React, Node.js, MongoDB | GitHub" attribution lines carry tech but no prose
_ATTRIBUTION_RE = re.compile(r"^[A-Za-z0-9.+#/\s,|]+github\b", re.IGNORECASE)

# Lines citing a repository belong to the project above them
_LINK_LINE_RE = re.compile(r"https?://|www\.|github\.com|github:", re.IGNORECASE)


def is_project_title(line: str) -> bool:
    """Decide whether a line inside a project section starts a new project."""
    if not MIN_TITLE_LENGTH <= len(line) <= MAX_TITLE_LENGTH:
        return False
    if is_bulleted(line) or line.endswith("."):
        return False
    if _LINK_LINE_RE.search(line) or _is_attribution_line(line):
        return False

    candidate = strip_bullet(line)
    lower = candidate.lower()
    if any(lower.startswith(verb + " ") for verb in DESCRIPTION_LEAD_VERBS):
        return False

    if has_date_token(candidate):
        return True
    return (
        bool(candidate)
        and (candidate[0].isupper() or candidate[0].isdigit())
        and len(candidate.split()) <= MAX_TITLE_WORDS
    )


def _is_attribution_line(line: str) -> bool:
    return bool(_ATTRIBUTION_RE.match(line)) or "github —" in line.lower()


def _continues_project(current: Project | None, line: str) -> bool:
    if current is None:
        return False
    lower = strip_bullet(line).lower()
    return any(lower.startswith(verb + " ") for verb in ACTION_LEAD_VERBS) and bool(
        extract_skills(line)
    )


def _valid_name(name: str) -> bool:
    lower = name.lower()
    return (
        MIN_NAME_LENGTH <= len(name) < MAX_NAME_LENGTH
        and not any(word in lower for word in ACHIEVEMENT_WORDS)
    )


def _start_project(line: str) -> Project:
    title = strip_bullet(line)
    duration = extract_duration(title)
    if not duration:
        token = MONTH_YEAR_RE.search(title) or YEAR_RE.search(title)
        duration = token.group() if token else ""
    return Project(name=remove_date_tokens(title), duration=duration)


def _finish(project: Project | None, projects: list[Project]) -> None:
    if project is not None and len(project.name) >= MIN_NAME_LENGTH:
        projects.append(project)


def _add_description(project: Project, line: str) -> None:
    technologies = extract_skills(line)
    if technologies:
        project.technologies = sorted(set(project.technologies) | technologies)

    if _is_attribution_line(line):
        return
    text = strip_bullet(line)
    project.description = f"{project.description} {text}".strip()


def extract_projects(text: str) -> list[Project]:
    """Extract projects from the project sections of ``text``.

    Each title line starts a project; following description lines add to its
    description and technologies until the next title or the end of the
    section. Projects with implausible names are dropped.
    """
    projects: list[Project] = []
    current: Project | None = None

    for state, line in segment_lines(text, PROJECT_VOCABULARY):
        if state is not SectionState.IN_SECTION:
            _finish(current, projects)
            current = None
            continue

        if is_project_title(line) and not _continues_project(current, line):
            _finish(current, projects)
            current = _start_project(line)
            logger.debug("Found project title: %s", current.name)
        elif current is not None and len(line) > MIN_DESCRIPTION_LENGTH:
            _add_description(current, line)

    _finish(current, projects)

    valid = [p for p in projects if _valid_name(p.name)]
    logger.debug("Extracted %d projects (%d candidates)", len(valid), len(projects))
    return valid
