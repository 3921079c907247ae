"""
Front-matter validation for every portfolio content file.

• Each file is checked against its kind's schema (schema_content).
• Collection entries with a thin Markdown body get a warning.
• Asset paths (image, logo, profileImage) must exist under the public dir.
• Nothing here raises for bad content: unreadable or malformed files are
  recorded as errors and the pass moves on to the next file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import config
from content_errors import ContentValidationError
from content_loader import list_collection_files, load_content, single_file_path
from date_helpers import is_valid_date_format
from schema_content import (
    ALL_KINDS,
    COLLECTION_KINDS,
    PROFILE,
    SKILLS,
    ContentKind,
    get_kind,
    schema_issues,
)
from validation_issues import IssueCollector, ValidationResult
from validation_report import format_validation_results

logger = logging.getLogger(__name__)

ASSET_FIELDS = {"image": "image", "logo": "logo", "profileImage": "profile image"}
DATE_FIELDS = ("startDate", "endDate")

_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*:", re.I)


def is_site_path(value: str) -> bool:
    """True for paths served from the public dir, False for absolute URLs."""
    return not (_SCHEME.match(value) or value.startswith("//"))


def asset_location(public_dir: str | Path, value: str) -> Path:
    return Path(public_dir) / value.lstrip("/")


def _resolve(content_dir, public_dir):
    content_dir = config.get_content_dir(content_dir)
    return content_dir, config.get_public_dir(content_dir, public_dir)


def _check_assets(path: Path, metadata, public_dir: Path, issues: IssueCollector) -> None:
    for field, label in ASSET_FIELDS.items():
        value = metadata.get(field)
        if not value or not isinstance(value, str) or not is_site_path(value):
            continue
        if not asset_location(public_dir, value).exists():
            issues.add_warning(path, f"Referenced {label} file not found: {value}", field)


def _check_dates(path: Path, metadata, issues: IssueCollector) -> None:
    for field in DATE_FIELDS:
        value = metadata.get(field)
        if isinstance(value, str) and value and not is_valid_date_format(value):
            issues.add_warning(path, "Dates should use the YYYY-MM format (or 'present')", field)


def validate_content_file(path: str | Path, kind: ContentKind | str,
                          public_dir: str | Path | None = None) -> ValidationResult:
    """Validate one file; every problem found becomes an issue in the result."""
    kind = get_kind(kind) if isinstance(kind, str) else kind
    path = Path(path)
    # files live at <content>/<directory>/<name>.md
    public_dir = config.get_public_dir(path.parent.parent, public_dir)
    issues = IssueCollector()

    if not path.exists():
        issues.add_error(path, f"{kind.name} file not found")
        return issues.result()

    try:
        content = load_content(path)
        for field, message in schema_issues(kind, dict(content.metadata)):
            issues.add_error(path, message, field)

        if kind in COLLECTION_KINDS and len(content.body.strip()) < config.MIN_BODY_CHARS:
            issues.add_warning(
                path,
                f"{kind.name} content is very short (less than {config.MIN_BODY_CHARS} characters). "
                "Consider adding more details.",
            )

        _check_assets(path, content.metadata, public_dir, issues)
        _check_dates(path, content.metadata, issues)
    except Exception as exc:  # recorded; the pass continues with the next file
        logger.debug("failed to validate %s", path, exc_info=True)
        issues.add_error(path, f"Failed to parse file: {exc}")

    return issues.result()


def validate_profile(content_dir: str | Path | None = None,
                     public_dir: str | Path | None = None) -> ValidationResult:
    content_dir, public_dir = _resolve(content_dir, public_dir)
    return validate_content_file(single_file_path(content_dir, PROFILE), PROFILE, public_dir)


def validate_skills(content_dir: str | Path | None = None,
                    public_dir: str | Path | None = None) -> ValidationResult:
    content_dir, public_dir = _resolve(content_dir, public_dir)
    return validate_content_file(single_file_path(content_dir, SKILLS), SKILLS, public_dir)


def validate_collection(name: str, content_dir: str | Path | None = None,
                        public_dir: str | Path | None = None) -> ValidationResult:
    """Validate every Markdown file of one collection directory."""
    kind = get_kind(name)
    content_dir, public_dir = _resolve(content_dir, public_dir)
    directory = content_dir / kind.directory
    issues = IssueCollector()

    if not directory.is_dir():
        issues.add_error(directory, f"Collection directory not found: {kind.directory}")
        return issues.result()

    try:
        files = list_collection_files(directory)
    except OSError as exc:
        issues.add_error(directory, f"Failed to read collection directory: {exc}")
        return issues.result()

    if not files:
        issues.add_warning(directory, f"No content files found in {kind.directory} collection")

    for path in files:
        issues.extend(validate_content_file(path, kind, public_dir))
    return issues.result()


def validate_specific(name: str, content_dir: str | Path | None = None,
                      public_dir: str | Path | None = None) -> ValidationResult:
    """Validate a single content type by name; unknown names raise ValueError."""
    kind = get_kind(name)
    if kind.single:
        content_dir, public_dir = _resolve(content_dir, public_dir)
        return validate_content_file(single_file_path(content_dir, kind), kind, public_dir)
    return validate_collection(kind.directory, content_dir, public_dir)


def validate_all_content(content_dir: str | Path | None = None,
                         public_dir: str | Path | None = None) -> ValidationResult:
    content_dir, public_dir = _resolve(content_dir, public_dir)
    result = ValidationResult()
    for kind in ALL_KINDS:
        result = result + validate_specific(kind.directory, content_dir, public_dir)
    logger.info("validated %s: %d error(s), %d warning(s)",
                content_dir, len(result.errors), len(result.warnings))
    return result


def validate_content_or_raise(content_dir: str | Path | None = None,
                              public_dir: str | Path | None = None) -> ValidationResult:
    result = validate_all_content(content_dir, public_dir)
    if not result.is_valid:
        raise ContentValidationError(result)
    if result.warnings:
        logger.warning(format_validation_results(result))
    else:
        logger.info("All content validation passed")
    return result
