"""GitHub link extraction and normalization."""

import logging
import re

logger = logging.getLogger(__name__)

_SEGMENT = r"[\w\-.]+"

# Each pattern captures one textual form a resume uses to cite a repository.
# Matches may overlap; duplicates collapse after normalization.
_LINK_PATTERNS: list[re.Pattern] = [
    # https://github.com/owner/repo, optionally wrapped in () or []
    re.compile(
        rf"[(\[]?https?://(?:www\.)?github\.com/{_SEGMENT}(?:/{_SEGMENT})?[)\]]?",
        re.IGNORECASE,
    ),
    # github.com/owner/repo without a scheme
    re.compile(
        rf"(?<![\w/.@])(?:www\.)?github\.com/{_SEGMENT}(?:/{_SEGMENT})?",
        re.IGNORECASE,
    ),
    # git@github.com:owner/repo.git
    re.compile(rf"git@github\.com:{_SEGMENT}/{_SEGMENT}", re.IGNORECASE),
    # "GitHub: owner/repo" labels that carry no host
    re.compile(
        rf"\bgithub:[ \t]*(?!https?:|www\.|github\.com){_SEGMENT}(?:/{_SEGMENT})?",
        re.IGNORECASE,
    ),
]

_LABEL_RE = re.compile(r"^github:\s*", re.IGNORECASE)
_SSH_RE = re.compile(r"^git@github\.com:", re.IGNORECASE)
_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_HOST_RE = re.compile(r"^(?:www\.)?github\.com(?=/|$)", re.IGNORECASE)


def normalize_github_link(raw: str) -> str:
    """Rewrite one matched link form to ``https://github.com/owner[/repo]``."""
    link = _LABEL_RE.sub("", raw.strip())
    link = re.sub(r"[()\[\]]", "", link)

    if _SSH_RE.match(link):
        link = _SSH_RE.sub("github.com/", link)

    link = _SCHEME_RE.sub("", link)
    if not _HOST_RE.match(link):
        link = "github.com/" + link
    link = _HOST_RE.sub("github.com", link)

    link = link.rstrip(".,;:")
    if link.lower().endswith(".git"):
        link = link[:-4]
    if link.endswith("/"):
        link = link[:-1]
    return "https://" + link


def extract_github_links(text: str) -> list[str]:
    """Find GitHub links in ``text``, normalized and de-duplicated.

    Links are returned in the order they first appear in the text.
    """
    if not text:
        return []

    found: list[tuple[int, str]] = []
    for pattern in _LINK_PATTERNS:
        for match in pattern.finditer(text):
            found.append((match.start(), normalize_github_link(match.group())))

    links: list[str] = []
    for _, link in sorted(found, key=lambda item: item[0]):
        if link not in links:
            links.append(link)
            logger.debug("Added GitHub link: %s", link)
    return links


def repository_slug(link: str) -> str:
    """Final path segment of a normalized link ("repo" for .../owner/repo)."""
    return link.rstrip("/").rsplit("/", 1)[-1]
