"""
Configuration settings for the portfolio content validator.

Values come from the environment (or a local .env file) so the same
checks can run from a shell, a git hook or CI without code changes.
Command-line flags override anything set here.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os
from pathlib import Path

# Content locations, relative to the working directory unless absolute
CONTENT_DIR = Path(os.getenv("PORTFOLIO_CONTENT_DIR", "src/content"))
PUBLIC_DIR = Path(os.getenv("PORTFOLIO_PUBLIC_DIR", "public"))

# Collection bodies shorter than this (after stripping) produce a warning
MIN_BODY_CHARS = int(os.getenv("MIN_BODY_CHARS", "50"))

# Watch mode: polling interval and settle delay, in seconds
WATCH_INTERVAL = float(os.getenv("WATCH_INTERVAL", "1.0"))
WATCH_DEBOUNCE = float(os.getenv("WATCH_DEBOUNCE", "0.1"))


def get_log_level(value: str | None, default: str = "WARNING") -> str:
    """Normalize a level name; unknown names fall back to the default."""
    name = (value or default).strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else default


LOG_LEVEL = get_log_level(os.getenv("LOG_LEVEL"))


def get_content_dir(override: str | Path | None = None) -> Path:
    """Resolve the content root, preferring an explicit override."""
    return Path(override) if override else CONTENT_DIR


def get_public_dir(content_dir: Path, override: str | Path | None = None) -> Path:
    """
    Resolve the asset root.

    An explicit override wins. Otherwise a relative PUBLIC_DIR is taken
    from the site root, i.e. two levels above ``src/content``.
    """
    if override:
        return Path(override)
    if PUBLIC_DIR.is_absolute():
        return PUBLIC_DIR
    content_dir = Path(content_dir)
    if content_dir.name == "content" and content_dir.parent.name == "src":
        return content_dir.parent.parent / PUBLIC_DIR
    return PUBLIC_DIR
