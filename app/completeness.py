"""
Completeness score for a portfolio content tree.

A fixed point budget of 100 is spread across the profile (20), skills (15)
and the four collections (65). Points depend only on which fields are
present and how many files each collection holds, so adding content can
never lower the score.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, NamedTuple

import config
from content_loader import list_collection_files, load_content, single_file_path
from schema_content import COLLECTION_KINDS, PROFILE, SKILLS

logger = logging.getLogger(__name__)

MAX_SCORE = 100


class CollectionWeight(NamedTuple):
    name: str
    weight: int
    min_files: int


# Order here is the order sections are reported in
COLLECTION_WEIGHTS = (
    CollectionWeight("projects", 25, 2),
    CollectionWeight("experience", 20, 1),
    CollectionWeight("publications", 10, 1),
    CollectionWeight("education", 10, 1),
)


@dataclass
class CompletenessReport:
    score: int = 0
    suggestions: List[str] = field(default_factory=list)
    completed_sections: List[str] = field(default_factory=list)
    missing_sections: List[str] = field(default_factory=list)


@dataclass
class MissingContent:
    missing: List[str] = field(default_factory=list)
    found: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def _showcase(name: str) -> str:
    return "research work" if name == "publications" else "professional background"


def _score_profile(content_dir: Path, report: CompletenessReport) -> int:
    try:
        profile = load_content(single_file_path(content_dir, PROFILE))
    except Exception:
        logger.debug("profile not readable", exc_info=True)
        report.missing_sections.append("Profile")
        report.suggestions.append("Create a complete profile with name, title, bio, email, and image")
        return 0

    data, body = profile.metadata, profile.body
    social = data.get("social")
    has_social = isinstance(social, dict) and len(social) > 0

    points = 0
    if all(data.get(k) for k in ("name", "title", "bio", "email")):
        points += 10
    if data.get("profileImage"):
        points += 5
    if has_social:
        points += 3
    if len(body) > 100:
        points += 2

    if points >= 15:
        report.completed_sections.append("Profile")
    else:
        report.missing_sections.append("Profile")
        if not data.get("profileImage"):
            report.suggestions.append("Add a profile image to make your portfolio more personal")
        if not has_social:
            report.suggestions.append("Add social media links to increase connectivity")
        if len(body) < 100:
            report.suggestions.append("Expand your profile description with more details about yourself")
    return points


def _score_skills(content_dir: Path, report: CompletenessReport) -> int:
    try:
        skills = load_content(single_file_path(content_dir, SKILLS))
    except Exception:
        logger.debug("skills not readable", exc_info=True)
        report.missing_sections.append("Skills")
        report.suggestions.append("Create a skills section with categorized technical skills")
        return 0

    categories = skills.metadata.get("categories")
    if not isinstance(categories, list):
        categories = []

    points = 0
    if len(categories) >= 3:
        points += 10
    if any(isinstance(c, dict) and isinstance(c.get("skills"), list) and len(c["skills"]) >= 3
           for c in categories):
        points += 5

    if points >= 10:
        report.completed_sections.append("Skills")
    else:
        report.missing_sections.append("Skills")
        report.suggestions.append("Add at least 3 skill categories with multiple skills each")
    return points


def _score_collection(content_dir: Path, entry: CollectionWeight, report: CompletenessReport) -> int:
    title = entry.name.capitalize()
    directory = content_dir / entry.name
    if not directory.is_dir():
        report.missing_sections.append(title)
        report.suggestions.append(f"Create {entry.name} section to showcase your {_showcase(entry.name)}")
        return 0

    count = len(list_collection_files(directory))
    if count >= entry.min_files:
        report.completed_sections.append(title)
        return entry.weight
    report.missing_sections.append(title)
    if count > 0:
        report.suggestions.append(
            f"Add more {entry.name} - you have {count} but {entry.min_files} or more is recommended"
        )
        return entry.weight // 2
    report.suggestions.append(f"Add {entry.name} to showcase your {_showcase(entry.name)}")
    return 0


def score_completeness(content_dir: str | Path | None = None) -> CompletenessReport:
    content_dir = config.get_content_dir(content_dir)
    report = CompletenessReport()
    total = _score_profile(content_dir, report) + _score_skills(content_dir, report)
    for entry in COLLECTION_WEIGHTS:
        total += _score_collection(content_dir, entry, report)
    report.score = round(total / MAX_SCORE * 100)
    logger.info("completeness score for %s: %d%%", content_dir, report.score)
    return report


def check_missing_content(content_dir: str | Path | None = None) -> MissingContent:
    """Which required files and collection directories exist, with fixes for the rest."""
    content_dir = config.get_content_dir(content_dir)
    out = MissingContent()

    for kind in (PROFILE, SKILLS):
        path = single_file_path(content_dir, kind)
        label = kind.title
        if path.exists():
            out.found.append(label)
        else:
            out.missing.append(label)
            out.recommendations.append(f"Create {path} with your {kind.name} information")

    for kind in COLLECTION_KINDS:
        directory = content_dir / kind.directory
        if not directory.is_dir():
            out.missing.append(f"{kind.directory} directory")
            out.recommendations.append(f"Create {directory}/ directory and add content files")
            continue
        count = len(list_collection_files(directory))
        if count:
            out.found.append(f"{kind.directory} ({count} files)")
        else:
            out.missing.append(f"{kind.directory} content")
            out.recommendations.append(f"Add at least one {kind.name} file to {directory}/")
    return out
