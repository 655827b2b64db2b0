"""Tests for achievement extraction and classification."""

import pytest

from services.achievement_extractor import classify_achievement, extract_achievements


def test_indicator_line_outside_section_is_captured():
    achievements = extract_achievements("Jane Doe\nAwarded Best Intern 2022\n")
    assert len(achievements) == 1
    assert achievements[0].title == "Awarded Best Intern 2022"
    assert achievements[0].type == "Award"


def test_section_lines_are_captured_without_indicators():
    text = """Achievements
• Winner of Smart India Hackathon 2022
• Dean's List Scholarship recipient
- AWS Certified Cloud Practitioner
Education
Graduated with honours in 2020"""
    achievements = extract_achievements(text)
    assert [(a.title, a.type) for a in achievements] == [
        ("Winner of Smart India Hackathon 2022", "Achievement"),
        ("Dean's List Scholarship recipient", "Scholarship"),
        ("AWS Certified Cloud Practitioner", "Certification"),
    ]


def test_upper_case_entries_stay_in_section():
    text = """Achievements
AWS CERTIFIED DEVELOPER
Winner of Smart India Hackathon 2022"""
    achievements = extract_achievements(text)
    assert [(a.title, a.type) for a in achievements] == [
        ("AWS CERTIFIED DEVELOPER", "Certification"),
        ("Winner of Smart India Hackathon 2022", "Achievement"),
    ]

def test_duplicate_titles_collapse():
    text = """Won first prize at CodeFest
Awards
Won first prize at CodeFest
• Won first prize at CodeFest"""
    achievements = extract_achievements(text)
    assert [a.title for a in achievements] == ["Won first prize at CodeFest"]


def test_project_leakage_is_filtered():
    text = """Achievements
Built a recommendation engine that won praise
Developed the award-winning project site
Ranked 3rd among 500 teams in ICPC regionals"""
    achievements = extract_achievements(text)
    assert [a.title for a in achievements] == ["Ranked 3rd among 500 teams in ICPC regionals"]
    assert achievements[0].type == "Ranking"


def test_short_lines_are_ignored():
    assert extract_achievements("Achievements\nWon a cup\n") == []
    # outside a section an indicator line needs 15+ characters
    assert extract_achievements("Won the cup 22") == []


def test_indicator_words_match_whole_words_only():
    assert extract_achievements("A wonderful team player and mentor") == []


def test_extract_achievements_empty():
    assert extract_achievements("") == []


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Awarded certification of merit", "Award"),
        ("Won a cash prize", "Award"),
        ("Google certified associate", "Certification"),
        ("Recognized by the mayor", "Recognition"),
        ("Research grant recipient", "Scholarship"),
        ("Secured 2nd place nationally", "Ranking"),
        ("Finished top of the class", "Achievement"),
    ],
)
def test_classify_achievement_priority(text, expected):
    assert classify_achievement(text) == expected
