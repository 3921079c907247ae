"""
Cross-file checks: referenced assets, external links, and content statistics.

Links are checked for syntax only; nothing is fetched over the network.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List

import config
from content_loader import ContentFile, count_collection_files, list_collection_files, load_content, single_file_path
from content_validator import asset_location, is_site_path
from date_helpers import format_date_range, sort_by_start_date
from schema_content import COLLECTION_KINDS, EXPERIENCE, PROFILE, PROJECTS, is_valid_url

logger = logging.getLogger(__name__)

URL_FIELDS = ("github", "demo", "url", "website", "paper")


@dataclass
class AssetCheck:
    found: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)


@dataclass
class LinkCheck:
    valid: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)
    unchecked: List[str] = field(default_factory=list)


@dataclass
class ProjectStats:
    total: int = 0
    featured: int = 0
    with_github: int = 0
    with_demo: int = 0
    technologies: int = 0


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def _iter_collection(content_dir: Path, kinds=COLLECTION_KINDS) -> Iterator[ContentFile]:
    """Parsed collection files; unreadable ones are skipped."""
    for kind in kinds:
        directory = content_dir / kind.directory
        if not directory.is_dir():
            continue
        for path in list_collection_files(directory):
            try:
                yield load_content(path)
            except Exception:
                logger.debug("skipping unparseable %s", path, exc_info=True)


def check_image_references(content_dir: str | Path | None = None,
                           public_dir: str | Path | None = None) -> AssetCheck:
    content_dir = config.get_content_dir(content_dir)
    public_dir = config.get_public_dir(content_dir, public_dir)
    check = AssetCheck()

    def visit(value) -> None:
        if not value or not isinstance(value, str) or not is_site_path(value):
            return
        (check.found if asset_location(public_dir, value).exists() else check.missing).append(value)

    try:
        visit(load_content(single_file_path(content_dir, PROFILE)).metadata.get("profileImage"))
    except Exception:
        logger.debug("profile not readable; skipping profile image", exc_info=True)

    for content in _iter_collection(content_dir):
        visit(content.metadata.get("image"))
        visit(content.metadata.get("logo"))

    return AssetCheck(_dedupe(check.found), _dedupe(check.missing))


def check_external_links(content_dir: str | Path | None = None) -> LinkCheck:
    content_dir = config.get_content_dir(content_dir)
    check = LinkCheck()
    for content in _iter_collection(content_dir):
        for name in URL_FIELDS:
            value = content.metadata.get(name)
            if not value or not isinstance(value, str):
                continue
            (check.unchecked if is_valid_url(value) else check.invalid).append(value)
    check.invalid = _dedupe(check.invalid)
    check.unchecked = _dedupe(check.unchecked)
    return check


def content_counts(content_dir: str | Path | None = None) -> Dict[str, int]:
    return count_collection_files(config.get_content_dir(content_dir))


def project_stats(content_dir: str | Path | None = None) -> ProjectStats:
    content_dir = config.get_content_dir(content_dir)
    stats = ProjectStats()
    tags = set()
    for content in _iter_collection(content_dir, (PROJECTS,)):
        data = content.metadata
        stats.total += 1
        stats.featured += data.get("featured") is True
        stats.with_github += bool(data.get("github"))
        stats.with_demo += bool(data.get("demo"))
        if isinstance(data.get("tags"), list):
            tags.update(str(t) for t in data["tags"])
    stats.technologies = len(tags)
    return stats


def experience_timeline(content_dir: str | Path | None = None) -> List[dict]:
    """Experience entries, most recent first, with formatted dates and durations."""
    content_dir = config.get_content_dir(content_dir)
    entries = [dict(c.metadata) for c in _iter_collection(content_dir, (EXPERIENCE,))]
    timeline = []
    for entry in sort_by_start_date(entries):
        start = entry.get("startDate")
        if not isinstance(start, str):
            continue
        end = entry.get("endDate") if isinstance(entry.get("endDate"), str) else None
        row = format_date_range(start, end)
        row.update(position=entry.get("position", ""), company=entry.get("company", ""))
        timeline.append(row)
    return timeline
