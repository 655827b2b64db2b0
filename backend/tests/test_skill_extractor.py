"""Tests for taxonomy-driven skill extraction."""

from services.skill_extractor import extract_skills, normalize_skill, parse_skill_list
from services.taxonomy import SKILLS_KEYWORDS, all_keywords


def test_extract_skills_finds_standalone_keywords():
    skills = extract_skills("Experience with Python, React and Docker")
    assert {"python", "react", "docker"} <= skills


def test_extract_skills_returns_taxonomy_spelling():
    skills = extract_skills("Shipped apps with NEXT.JS and MongoDB")
    assert "next.js" in skills
    assert "mongodb" in skills


def test_extract_skills_empty_text():
    assert extract_skills("") == set()


def test_extract_skills_is_idempotent():
    text = "Data science with pandas, numpy and machine learning on AWS"
    assert extract_skills(text) == extract_skills(text)


def test_extract_skills_word_boundaries():
    skills = extract_skills("Wrote semantic HTML and expressed interest in swiftness")
    assert "html" in skills
    assert "ml" not in skills  # not inside "html"
    assert "express" not in skills  # not inside "expressed"
    assert "swift" not in skills  # not inside "swiftness"


def test_extract_skills_symbol_keywords_use_substring():
    skills = extract_skills("Led UI/UX research; models built with scikit-learn")
    assert "ui/ux" in skills
    assert "scikit-learn" in skills


def test_extract_skills_multiword():
    skills = extract_skills("Focus on deep learning and responsive design")
    assert "deep learning" in skills
    assert "responsive design" in skills


def test_every_keyword_detects_itself():
    for keyword in all_keywords():
        assert keyword in extract_skills(f"Skills: {keyword}."), keyword


def test_all_keywords_flattens_taxonomy():
    keywords = all_keywords()
    assert len(keywords) == len(set(keywords))
    assert keywords[0] == SKILLS_KEYWORDS["python"][0]


def test_normalize_skill():
    assert normalize_skill("  React Native. ") == "react native"


def test_parse_skill_list():
    assert parse_skill_list("Python, React,, python ,React") == ["Python", "React", "python"]
    assert parse_skill_list([" Go", "Rust", "", "Go"]) == ["Go", "Rust"]
