"""Static skill taxonomy used for keyword detection in resumes."""

SKILLS_KEYWORDS: dict[str, list[str]] = {
    "python": ["python", "django", "flask", "pandas", "numpy", "scikit-learn", "sklearn"],
    "javascript": [
        "javascript", "react", "angular", "vue", "nodejs", "express",
        "next.js", "typescript",
    ],
    "web_dev": ["html", "css", "tailwind", "bootstrap", "responsive design"],
    "data_science": [
        "data science", "machine learning", "ml", "deep learning",
        "pytorch", "tensorflow", "data analysis",
    ],
    "database": ["sql", "nosql", "mongodb", "postgresql", "mysql", "firebase"],
    "cloud": ["aws", "azure", "gcp", "docker", "kubernetes"],
    "mobile": ["flutter", "react native", "ios", "android", "swift"],
    "design": ["figma", "sketch", "adobe xd", "ui/ux", "photoshop", "illustrator"],
}


def all_keywords() -> list[str]:
    """Flatten the taxonomy into an ordered, de-duplicated keyword list."""
    seen: dict[str, None] = {}
    for keywords in SKILLS_KEYWORDS.values():
        for keyword in keywords:
            seen.setdefault(keyword.lower(), None)
    return list(seen)
