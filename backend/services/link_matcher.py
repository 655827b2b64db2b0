"""Best-effort pairing of extracted GitHub links with extracted projects."""

import logging
import re

from models.schemas.profile import Project
from services.link_extractor import repository_slug

logger = logging.getLogger(__name__)

MIN_SLUG_LENGTH = 3


def _compact(value: str) -> str:
    return re.sub(r"[\s\-_]+", "", value.lower())


def _cited_in(link: str, description: str) -> bool:
    # Compare without the scheme; "github.com/owner" must not match "github.com/owner/repo"
    bare = re.sub(r"^https?://", "", link)
    return re.search(re.escape(bare) + r"(?![\w\-/])", description, re.IGNORECASE) is not None


def link_matches_project(link: str, project: Project) -> bool:
    """True when the link's repository name and the project name overlap,
    or the link is quoted in the project description."""
    slug = _compact(repository_slug(link))
    name = _compact(project.name)
    if len(slug) >= MIN_SLUG_LENGTH and name and (slug in name or name in slug):
        return True
    return _cited_in(link, project.description)


def attach_github_links(projects: list[Project], links: list[str]) -> list[Project]:
    """Set ``github_url`` on each project from the first matching link.

    Projects are visited in extraction order and a link claimed by an
    earlier project is not offered to later ones.
    """
    claimed: set[str] = set()
    for project in projects:
        for link in links:
            if link in claimed or not link_matches_project(link, project):
                continue
            project.github_url = link
            claimed.add(link)
            logger.debug("Matched %s to project %s", link, project.name)
            break
    return projects
