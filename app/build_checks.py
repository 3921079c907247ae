"""
Build-time entry points that combine validation, asset checks and scoring.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import config
from asset_integrity import check_external_links, check_image_references
from completeness import check_missing_content, score_completeness
from content_errors import BuildValidationError, ContentError
from content_loader import list_collection_files
from content_validator import validate_all_content
from schema_content import ALL_KINDS
from validation_report import format_validation_results, render

logger = logging.getLogger(__name__)


def validate_for_build(content_dir: str | Path | None = None,
                       public_dir: str | Path | None = None,
                       fail_on_warnings: bool = False,
                       check_assets: bool = True,
                       check_links: bool = False) -> None:
    """Raise BuildValidationError when the content is not fit to publish."""
    content_dir = config.get_content_dir(content_dir)
    public_dir = config.get_public_dir(content_dir, public_dir)

    result = validate_all_content(content_dir, public_dir)
    if not result.is_valid or result.warnings:
        logger.warning(format_validation_results(result))

    missing_assets = []
    if check_assets:
        missing_assets = check_image_references(content_dir, public_dir).missing
        for asset in missing_assets:
            logger.error("missing referenced asset: %s", asset)

    invalid_links = []
    if check_links:
        invalid_links = check_external_links(content_dir).invalid
        for url in invalid_links:
            logger.error("invalid URL: %s", url)

    if not result.is_valid or missing_assets or invalid_links:
        raise BuildValidationError(
            "Build validation failed due to content errors. Please fix the issues above."
        )
    if fail_on_warnings and result.warnings:
        raise BuildValidationError(
            "Build validation failed due to content warnings.", severity="warning"
        )
    logger.info("build validation completed successfully")


def validate_for_dev(content_dir: str | Path | None = None) -> bool:
    result = validate_all_content(content_dir)
    if not result.is_valid:
        logger.error("Content validation failed:\n%s", format_validation_results(result))
        return False
    if result.warnings:
        logger.warning("Content validation passed with warnings:\n%s", format_validation_results(result))
    return True


def validate_for_commit(content_dir: str | Path | None = None) -> bool:
    """Pre-commit hook wrapper: build checks without link validation."""
    try:
        validate_for_build(content_dir, check_assets=True, check_links=False)
    except ContentError as exc:
        logger.error("pre-commit validation failed: %s", exc)
        return False
    return True


def content_health_report(content_dir: str | Path | None = None,
                          public_dir: str | Path | None = None) -> Dict[str, Any]:
    content_dir = config.get_content_dir(content_dir)
    public_dir = config.get_public_dir(content_dir, public_dir)
    result = validate_all_content(content_dir, public_dir)
    assets = check_image_references(content_dir, public_dir)

    collections = {}
    for kind in ALL_KINDS:
        directory = content_dir / kind.directory
        collections[kind.directory] = len(list_collection_files(directory)) if directory.is_dir() else 0

    return {
        "is_healthy": result.is_valid and not assets.missing,
        "summary": {
            "total_errors": len(result.errors),
            "total_warnings": len(result.warnings),
            "missing_assets": len(assets.missing),
            "collections": collections,
        },
        "details": result,
    }


def generate_validation_report(content_dir: str | Path | None = None,
                               public_dir: str | Path | None = None) -> str:
    """Markdown report: status, score, sections, issues and recommendations."""
    content_dir = config.get_content_dir(content_dir)
    return render(
        "report.md.j2",
        result=validate_all_content(content_dir, public_dir),
        completeness=score_completeness(content_dir),
        missing=check_missing_content(content_dir),
    )
