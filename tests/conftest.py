"""
Shared fixtures: a complete, valid portfolio content tree under tmp_path.

    <tmp>/src/content/{profile,skills,projects,publications,experience,education}
    <tmp>/public/{images,logos}

Tests mutate the tree through ``write_md`` to produce the case they need.
"""

import copy
from pathlib import Path

import pytest
import yaml

LONG_BODY = (
    "Built end to end with a small team. This paragraph exists so the body "
    "is comfortably longer than the minimum the validator asks for."
)

PROFILE = {
    "name": "Ada Lovelace",
    "title": "Research Engineer",
    "bio": "Writes programs for engines that do not exist yet.",
    "email": "ada@lovelace.io",
    "location": "London, UK",
    "profileImage": "/images/profile.jpg",
    "social": {"github": "https://github.com/ada", "linkedin": "https://linkedin.com/in/ada"},
}

SKILLS = {
    "categories": [
        {"name": name, "skills": [
            {"name": f"{name} {i}", "level": "Advanced", "color": "#336699"} for i in range(3)
        ]}
        for name in ("Languages", "Frameworks", "Tools")
    ]
}

PROJECT = {
    "title": "Analytical Engine Simulator",
    "description": "A cycle-accurate simulator of the engine.",
    "image": "/images/engine.png",
    "github": "https://github.com/ada/engine",
    "featured": True,
    "order": 1,
    "tags": ["Python", "Simulation"],
}

PUBLICATION = {
    "title": "Notes on the Analytical Engine",
    "authors": ["Ada Lovelace"],
    "venue": "Scientific Memoirs",
    "year": 2021,
    "type": "journal",
    "url": "https://example.org/notes",
}

EXPERIENCE = {
    "company": "Acme Computing",
    "position": "Senior Engineer",
    "startDate": "2020-01",
    "endDate": "present",
    "location": "Remote",
    "logo": "/logos/acme.png",
    "website": "https://acme.example.com",
    "achievements": ["Shipped the thing"],
    "technologies": ["Python", "Rust"],
}

EDUCATION = {
    "institution": "University of London",
    "degree": "BSc",
    "field": "Mathematics",
    "startDate": "2016-09",
    "endDate": "2019-06",
    "location": "London, UK",
}


def write_md(path: Path, metadata: dict | None, body: str = LONG_BODY) -> Path:
    """Write a Markdown file with YAML front-matter (none when metadata is None)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if metadata is None:
        path.write_text(body, encoding="utf-8")
    else:
        front = yaml.safe_dump(metadata, sort_keys=False, allow_unicode=True)
        path.write_text(f"---\n{front}---\n\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def records():
    """Deep copies of the valid front-matter records, keyed by kind."""
    return copy.deepcopy({
        "profile": PROFILE,
        "skills": SKILLS,
        "project": PROJECT,
        "publication": PUBLICATION,
        "experience": EXPERIENCE,
        "education": EDUCATION,
    })


@pytest.fixture
def site(tmp_path, records):
    """A valid site root; returns (content_dir, public_dir)."""
    content = tmp_path / "src" / "content"
    public = tmp_path / "public"

    write_md(content / "profile" / "main.md", records["profile"])
    write_md(content / "skills" / "main.md", records["skills"])

    second = dict(records["project"], title="Difference Engine Notes", image="/images/notes.png")
    write_md(content / "projects" / "engine.md", records["project"])
    write_md(content / "projects" / "notes.md", second)
    write_md(content / "publications" / "notes.md", records["publication"])
    write_md(content / "experience" / "acme.md", records["experience"])
    write_md(content / "education" / "london.md", records["education"])

    for asset in ("images/profile.jpg", "images/engine.png", "images/notes.png", "logos/acme.png"):
        target = public / asset
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"\x89PNG")

    return content, public
