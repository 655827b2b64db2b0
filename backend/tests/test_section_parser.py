from services.section_parser import (
    SectionState,
    SectionVocabulary,
    extract_duration,
    has_date_token,
    next_state,
    remove_date_tokens,
    segment_lines,
    strip_bullet,
)

VOCAB = SectionVocabulary(
    name="projects",
    entry_headers=("projects", "portfolio"),
    exit_headers=("education", "skills"),
)


# --- Transition function ---

def test_next_state_enters_on_header():
    assert next_state(SectionState.OUTSIDE, "Projects", VOCAB) == (SectionState.IN_SECTION, True)


def test_next_state_accepts_plural_and_colon_forms():
    assert next_state(SectionState.OUTSIDE, "Portfolios", VOCAB)[0] is SectionState.IN_SECTION
    assert next_state(SectionState.OUTSIDE, "PROJECTS:", VOCAB)[0] is SectionState.IN_SECTION
    assert next_state(SectionState.OUTSIDE, "Projects: side work", VOCAB)[0] is SectionState.IN_SECTION


def test_next_state_exits_on_other_header():
    assert next_state(SectionState.IN_SECTION, "Education", VOCAB) == (SectionState.OUTSIDE, True)


def test_next_state_exits_on_caps_heading():
    # The heading line itself is passed on as content
    assert next_state(SectionState.IN_SECTION, "VOLUNTEER WORK", VOCAB) == (SectionState.OUTSIDE, False)
    assert next_state(SectionState.IN_SECTION, "LEADERSHIP:", VOCAB)[0] is SectionState.OUTSIDE


def test_next_state_single_caps_word_is_content():
    assert next_state(SectionState.IN_SECTION, "TEAMUP", VOCAB) == (SectionState.IN_SECTION, False)


def test_next_state_caps_heading_ignored_outside():
    assert next_state(SectionState.OUTSIDE, "VOLUNTEER WORK", VOCAB) == (SectionState.OUTSIDE, False)


def test_next_state_caps_exit_can_be_disabled():
    vocab = SectionVocabulary(
        name="achievements",
        entry_headers=("achievements",),
        exit_headers=("education",),
        close_on_caps=False,
    )
    assert next_state(SectionState.IN_SECTION, "AWS CERTIFIED DEVELOPER", vocab) == (
        SectionState.IN_SECTION,
        False,
    )


def test_next_state_content_keeps_state():
    assert next_state(SectionState.IN_SECTION, "Chat App", VOCAB) == (SectionState.IN_SECTION, False)
    assert next_state(SectionState.IN_SECTION, "Projects were fun", VOCAB)[1] is False


# --- Segmentation ---

def test_segment_lines_tracks_sections():
    text = """Jane Doe

Projects
Chat App
ok
Education
State University"""
    assert list(segment_lines(text, VOCAB)) == [
        (SectionState.OUTSIDE, "Jane Doe"),
        (SectionState.IN_SECTION, "Chat App"),
        (SectionState.OUTSIDE, "State University"),
    ]


def test_segment_lines_empty():
    assert list(segment_lines("", VOCAB)) == []


# --- Bullets ---

def test_strip_bullet():
    assert strip_bullet("• Built a thing") == "Built a thing"
    assert strip_bullet("- Built a thing") == "Built a thing"
    assert strip_bullet("12. Built a thing") == "Built a thing"
    assert strip_bullet("Built a thing") == "Built a thing"


# --- Durations ---

def test_extract_duration_year_range():
    assert extract_duration("Chat App 2021-2023") == "2021-2023"
    assert extract_duration("Chat App 2022 – Present") == "2022 – Present"


def test_extract_duration_month_range():
    assert extract_duration("Chat App | Jan 2023 - Mar 2023") == "Jan 2023 - Mar 2023"
    assert extract_duration("Tracker, March 2021 to Present") == "March 2021 to Present"


def test_extract_duration_span():
    assert extract_duration("Hackathon build (3 weeks)") == "3 weeks"
    assert extract_duration("Research over 6 months") == "6 months"


def test_extract_duration_priority():
    assert extract_duration("2020-2021, about 12 months") == "2020-2021"


def test_extract_duration_none():
    assert extract_duration("Chat App") == ""


def test_has_date_token():
    assert has_date_token("Chat App June 2022")
    assert has_date_token("Chat App 2022")
    assert not has_date_token("Chat App v2")


def test_remove_date_tokens():
    assert remove_date_tokens("Chat App | Jan 2023 - Mar 2023") == "Chat App"
    assert remove_date_tokens("Weather Bot (2021-2022)") == "Weather Bot"
    assert remove_date_tokens("Portfolio Site June 2022") == "Portfolio Site"
    assert remove_date_tokens("Expense Tracker (2022)") == "Expense Tracker"
