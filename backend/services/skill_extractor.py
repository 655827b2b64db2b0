"""Taxonomy-driven skill extraction.

Every keyword in the taxonomy is tested once against the lower-cased text:
- plain keywords ("python", "react native") must stand alone as words, so
  "java" does not fire inside "javascript" and "ml" not inside "html"
- keywords carrying symbols ("c++", "ui/ux", "next.js") are matched as plain
  substrings, where word boundaries are ill-defined
"""

import logging
import re

from services.taxonomy import all_keywords

logger = logging.getLogger(__name__)

_PLAIN_KEYWORD_RE = re.compile(r"^[a-z0-9 ]+$")


def _compile_keyword(keyword: str) -> re.Pattern | None:
    """Build the matcher for a plain keyword; symbol-bearing ones return None."""
    if not _PLAIN_KEYWORD_RE.match(keyword):
        return None
    escaped = re.escape(keyword)
    return re.compile(rf"(?<![a-z0-9]){escaped}(?![a-z0-9])")


_KEYWORD_MATCHERS: list[tuple[str, re.Pattern | None]] = [
    (keyword, _compile_keyword(keyword)) for keyword in all_keywords()
]


def _keyword_in(keyword: str, pattern: re.Pattern | None, text_lower: str) -> bool:
    if pattern is None:
        return keyword in text_lower
    return pattern.search(text_lower) is not None


def extract_skills(text: str) -> set[str]:
    """Return the taxonomy keywords found in ``text``."""
    if not text:
        return set()

    text_lower = text.lower()
    found = {
        keyword
        for keyword, pattern in _KEYWORD_MATCHERS
        if _keyword_in(keyword, pattern, text_lower)
    }
    if found:
        logger.debug("Extracted %d skills: %s", len(found), sorted(found))
    return found


def normalize_skill(skill: str) -> str:
    """Normalize a user-supplied skill string for comparison."""
    return re.sub(r"\s+", " ", skill.lower().strip().rstrip(".,:;"))


def parse_skill_list(raw: str | list[str]) -> list[str]:
    """Clean a comma-separated skills field (or a list of entries), keeping order."""
    parts = raw.split(",") if isinstance(raw, str) else raw
    skills: list[str] = []
    for part in parts:
        part = part.strip()
        if part and part not in skills:
            skills.append(part)
    return skills
