"""Achievement extraction and classification."""

import logging
import re

from models.schemas.profile import Achievement, AchievementType
from services.section_parser import SectionState, SectionVocabulary, segment_lines, strip_bullet

logger = logging.getLogger(__name__)

ACHIEVEMENT_VOCABULARY = SectionVocabulary(
    name="achievements",
    entry_headers=(
        "achievements", "accomplishments", "awards", "honors", "recognition",
        "certifications", "certificates", "notable achievements", "accolades",
        "honors and awards", "awards and honors",
    ),
    exit_headers=(
        "education", "skills", "skill summary", "technical skills", "contact",
        "summary", "objective", "projects", "experience", "work experience",
        "volunteer", "languages", "interests", "hobbies", "references",
    ),
    close_on_caps=False,
)

# Words that mark a line as an achievement wherever it appears.
ACHIEVEMENT_INDICATORS = (
    "awarded", "recognized", "achieved", "accomplished", "received", "earned",
    "won", "ranked", "scored", "selected", "nominated", "certified", "placed",
)

# First matching rule wins; a line may carry several cue words.
TYPE_RULES: list[tuple[AchievementType, tuple[str, ...]]] = [
    ("Award", ("award", "prize")),
    ("Certification", ("certification", "certified", "certificate")),
    ("Recognition", ("recognition", "recognized")),
    ("Scholarship", ("scholarship", "grant")),
    ("Ranking", ("rank", "position", "place")),
]

# Titles with these words are project bullets, not achievements.
PROJECT_LEAK_WORDS = ("project", "developed", "built")

MIN_SECTION_LINE = 10
MIN_LOOSE_LINE = 15
MAX_LINE = 200
MIN_TITLE_LENGTH = 10

_INDICATOR_RE = re.compile(
    r"\b(?:" + "|".join(ACHIEVEMENT_INDICATORS) + r")\b", re.IGNORECASE
)
_LINK_RE = re.compile(r"https?://|www\.|github\.com", re.IGNORECASE)


def classify_achievement(text: str) -> AchievementType:
    lower = text.lower()
    for achievement_type, cues in TYPE_RULES:
        if any(cue in lower for cue in cues):
            return achievement_type
    return "Achievement"


def _is_candidate(state: SectionState, line: str) -> bool:
    if _LINK_RE.search(line):
        return False
    if state is SectionState.IN_SECTION:
        return MIN_SECTION_LINE <= len(line) <= MAX_LINE
    return (
        MIN_LOOSE_LINE <= len(line) <= MAX_LINE
        and _INDICATOR_RE.search(line) is not None
    )


def _keep(title: str) -> bool:
    lower = title.lower()
    return len(title) >= MIN_TITLE_LENGTH and not any(
        word in lower for word in PROJECT_LEAK_WORDS
    )


def extract_achievements(text: str) -> list[Achievement]:
    """Extract achievements from ``text``.

    Every line of an achievements section is a candidate; elsewhere only
    lines carrying an indicator word ("awarded", "won", ...) are.
    """
    achievements: list[Achievement] = []
    seen: set[str] = set()

    for state, line in segment_lines(text, ACHIEVEMENT_VOCABULARY):
        if not _is_candidate(state, line):
            continue

        title = strip_bullet(line)
        if title in seen or not _keep(title):
            continue
        seen.add(title)
        achievements.append(Achievement(title=title, type=classify_achievement(line)))
        logger.debug("Found achievement (%s): %s", state.value, title)

    return achievements
