"""Resume section segmentation and date/duration helpers.

Segmentation is a two-state machine. A line either opens a section (it is
one of the vocabulary's entry headings), closes it (an exit heading, or for vocabularies that allow it a short
multi-word all-caps heading), or is content. The
transition function is pure so each extractor can drive it with its own
vocabulary.
"""

import enum
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

_NUMBERED_BULLET_RE = re.compile(r"^\d{1,2}[.)]\s+")

# All-caps headings ("OPEN SOURCE WORK", "LANGUAGES:") end an open section. A
# single bare word ("TEAMUP") is left to the extractor; one-word headings
# worth closing on belong in the exit vocabulary.
_CAPS_HEADING_RE = re.compile(r"^[A-Z][A-Z&/ ]{3,39}:?$")


class SectionState(enum.Enum):
    OUTSIDE = "outside"
    IN_SECTION = "in_section"


@dataclass(frozen=True)
class SectionVocabulary:
    """Headings that open and close one kind of section."""

    name: str
    entry_headers: tuple[str, ...]
    exit_headers: tuple[str, ...]
    close_on_caps: bool = True


def _matches_heading(line: str, headers: tuple[str, ...]) -> bool:
    lower = line.lower()
    bare = lower.rstrip(":").strip()
    return any(
        bare == header or bare == header + "s" or lower.startswith(header + ":")
        for header in headers
    )


def _is_caps_heading(line: str) -> bool:
    words = len(line.split())
    return (
        bool(_CAPS_HEADING_RE.match(line))
        and words <= 4
        and (words > 1 or line.endswith(":"))
    )


def next_state(
    state: SectionState, line: str, vocabulary: SectionVocabulary
) -> tuple[SectionState, bool]:
    """Compute the state after ``line``.

    Returns (new_state, is_header). Vocabulary headers are consumed by the
    segmenter and never reach the extractors; an all-caps line that closes
    the section is passed on as content of the outside state.
    """
    if _matches_heading(line, vocabulary.entry_headers):
        return SectionState.IN_SECTION, True
    if _matches_heading(line, vocabulary.exit_headers):
        return SectionState.OUTSIDE, True
    if (
        vocabulary.close_on_caps
        and state is SectionState.IN_SECTION
        and _is_caps_heading(line)
    ):
        return SectionState.OUTSIDE, False
    return state, False


def segment_lines(
    text: str, vocabulary: SectionVocabulary
) -> Iterator[tuple[SectionState, str]]:
    """Yield (state, line) for every content line of ``text``.

    Lines are stripped; blank lines and lines of two characters or fewer are
    skipped.
    """
    state = SectionState.OUTSIDE
    for index, raw in enumerate(text.split("\n")):
        line = raw.strip()
        if len(line) <= 2:
            continue

        new_state, is_header = next_state(state, line, vocabulary)
        if new_state is not state:
            logger.debug(
                "%s section %s at line %d: %s",
                "Entering" if new_state is SectionState.IN_SECTION else "Leaving",
                vocabulary.name,
                index,
                line,
            )
        state = new_state
        if not is_header:
            yield state, line


def is_bulleted(line: str) -> bool:
    return bool(line) and line[0] in BULLET_MARKERS


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker or "1." / "2)" numbering."""
    line = line.strip()
    if line and line[0] in BULLET_MARKERS:
        return line.lstrip("".join(BULLET_MARKERS) + " ").strip()
    return _NUMBERED_BULLET_RE.sub("", line).strip()


# ---------------------------------------------------------------------------
# Dates and durations
# ---------------------------------------------------------------------------

_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_OPEN_END = r"(?:[Pp]resent|[Cc]urrent|[Nn]ow|[Oo]ngoing)"

MONTH_YEAR_RE = re.compile(rf"\b{_MONTHS}\.?\s*\d{{4}}\b", re.IGNORECASE)
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

# Checked in priority order; the first pattern that matches wins.
DURATION_PATTERNS: list[re.Pattern] = [
    # "2021-2023", "2022 – Present"
    re.compile(rf"\b\d{{4}}\s*[-–—]\s*(?:\d{{4}}|{_OPEN_END})\b"),
    # "Jan 2022 - Mar 2023", "March 2021 to Present"
    re.compile(
        rf"\b{_MONTHS}\.?\s*\d{{4}}\s*(?:[-–—]|to)\s*"
        rf"(?:{_MONTHS}\.?\s*\d{{4}}|{_OPEN_END})\b",
        re.IGNORECASE,
    ),
    # "6 months", "2 years", "3 weeks"
    re.compile(r"\b\d+\+?\s*(?:months?|years?|weeks?)\b", re.IGNORECASE),
]

_DANGLING_RE = re.compile(r"^[\s\-–—|,:;]+|[\s\-–—|,:;]+$")


def extract_duration(line: str) -> str:
    """Return the first date range or time span in ``line``, or ''."""
    for pattern in DURATION_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group().strip()
    return ""


def has_date_token(line: str) -> bool:
    """True when ``line`` mentions a month-and-year or a plausible year."""
    return bool(MONTH_YEAR_RE.search(line) or YEAR_RE.search(line))


def remove_date_tokens(line: str) -> str:
    """Drop durations, month/year and bare year tokens, then tidy separators."""
    duration = extract_duration(line)
    if duration:
        line = line.replace(duration, " ")
    line = MONTH_YEAR_RE.sub(" ", line)
    line = YEAR_RE.sub(" ", line)
    line = re.sub(r"\(\s*\)|\[\s*\]", " ", line)
    line = re.sub(r"\s+", " ", line)
    return _DANGLING_RE.sub("", line).strip()
