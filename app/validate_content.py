"""
Command-line content validation.

    validate-content                  validate once, exit 1 on errors
    validate-content --watch          re-validate whenever a .md file changes
    validate-content --report out.md  also write the Markdown report
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Optional

import config
from asset_integrity import check_external_links, check_image_references, content_counts, experience_timeline, project_stats
from build_checks import generate_validation_report
from content_validator import validate_all_content, validate_specific
from schema_content import ALL_KINDS
from utils import changed_files, snapshot_markdown
from validation_report import format_content_summary, format_validation_results

logger = logging.getLogger("validate_content")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="validate-content",
        description="Validate portfolio content files (front-matter schemas, assets, completeness).",
    )
    parser.add_argument("--content-dir", default=None,
                        help=f"content root (default: {config.CONTENT_DIR})")
    parser.add_argument("--public-dir", default=None,
                        help="asset root that image/logo paths resolve against")
    parser.add_argument("--type", dest="kind", choices=[k.directory for k in ALL_KINDS],
                        help="validate a single content type only")
    parser.add_argument("--watch", action="store_true",
                        help="keep running and re-validate when content files change")
    parser.add_argument("--report", nargs="?", const="-", metavar="FILE",
                        help="write the Markdown validation report to FILE (or stdout)")
    parser.add_argument("--check-assets", action="store_true",
                        help="list every missing referenced asset")
    parser.add_argument("--check-links", action="store_true",
                        help="check URL syntax of external links")
    parser.add_argument("--strict", action="store_true",
                        help="treat warnings, missing assets and invalid links as failures")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print project and experience details and debug logging")
    return parser


def run_validation(args: argparse.Namespace, watching: bool = False) -> bool:
    """One validation pass. Prints everything; returns True when the content passes."""
    content_dir = config.get_content_dir(args.content_dir)
    public_dir = config.get_public_dir(content_dir, args.public_dir)

    print("🔍 Validating content files...\n")
    print(format_content_summary(
        content_counts(content_dir),
        projects=project_stats(content_dir) if args.verbose else None,
        timeline=experience_timeline(content_dir) if args.verbose else None,
    ))

    if args.kind:
        result = validate_specific(args.kind, content_dir, public_dir)
    else:
        result = validate_all_content(content_dir, public_dir)
    print(format_validation_results(result))

    extra_problems = 0
    if args.check_assets:
        missing = check_image_references(content_dir, public_dir).missing
        if missing:
            print(f"⚠️  Missing {len(missing)} referenced assets:")
            for asset in missing:
                print(f"  - {asset}")
        extra_problems += len(missing)

    if args.check_links:
        invalid = check_external_links(content_dir).invalid
        if invalid:
            print(f"⚠️  Found {len(invalid)} invalid URLs:")
            for url in invalid:
                print(f"  - {url}")
        extra_problems += len(invalid)

    if args.report:
        report = generate_validation_report(content_dir, public_dir)
        if args.report == "-":
            print(report)
        else:
            Path(args.report).write_text(report, encoding="utf-8")
            print(f"📝 Report written to {args.report}")

    if not result.is_valid:
        if watching:
            print("❌ Content validation failed. Fix the errors above and save to re-validate.")
        else:
            print("❌ Content validation failed. Please fix the errors above before building.")
        return False

    if args.strict and (result.warnings or extra_problems):
        print("❌ Content validation failed: warnings are treated as errors (--strict).")
        return False

    if result.warnings or extra_problems:
        print("⚠️  Content validation passed with warnings. Consider addressing the warnings above.")
    print("✅ Content validation completed successfully!")
    return True


def _safe_run(args: argparse.Namespace, watching: bool = False) -> bool:
    try:
        return run_validation(args, watching)
    except Exception:
        logger.exception("💥 Content validation script failed")
        return False


def watch_content(args: argparse.Namespace,
                  interval: float = config.WATCH_INTERVAL,
                  debounce: float = config.WATCH_DEBOUNCE,
                  max_polls: Optional[int] = None,
                  sleep: Callable[[float], None] = time.sleep) -> None:
    """Validate, then poll the content tree and re-validate on every change."""
    content_dir = config.get_content_dir(args.content_dir)
    print("👀 Watching content files for changes...\n")
    _safe_run(args, watching=True)
    print("\n👀 Watching for content changes... (Press Ctrl+C to stop)")

    before = snapshot_markdown(content_dir)
    polls = 0
    while max_polls is None or polls < max_polls:
        sleep(interval)
        polls += 1
        after = snapshot_markdown(content_dir)
        changed = changed_files(before, after)
        if not changed:
            continue
        for name in changed:
            print(f"\n📝 Content file changed: {name}")
        sleep(debounce)
        before = snapshot_markdown(content_dir)
        _safe_run(args, watching=True)


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.watch:
        try:
            watch_content(args)
        except KeyboardInterrupt:
            print("\n👋 Stopped watching.")
        return 0

    return 0 if _safe_run(args) else 1


if __name__ == "__main__":
    sys.exit(main())
