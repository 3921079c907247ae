"""
Markdown file ➜ (front-matter, body)
– YAML front-matter is split off with python-frontmatter
– collection listings skip hidden files and non-Markdown entries
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

import frontmatter

from schema_content import COLLECTION_KINDS, SINGLE_FILE_NAME, ContentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentFile:
    path: Path
    metadata: Mapping[str, Any] = field(default_factory=dict)
    body: str = ""


def load_content(path: str | Path) -> ContentFile:
    """Read one content file. Read and YAML errors propagate to the caller."""
    path = Path(path)
    post = frontmatter.loads(path.read_text(encoding="utf-8"))
    logger.debug("loaded %s (%d front-matter keys)", path, len(post.metadata))
    return ContentFile(path, MappingProxyType(dict(post.metadata)), post.content)


def single_file_path(content_dir: Path, kind: ContentKind) -> Path:
    return Path(content_dir) / kind.directory / SINGLE_FILE_NAME


def list_collection_files(directory: str | Path) -> List[Path]:
    """Markdown files of a collection directory, hidden files excluded, sorted by name."""
    directory = Path(directory)
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.name.endswith(".md") and not p.name.startswith(".")
    )


def count_collection_files(content_dir: str | Path) -> Dict[str, int]:
    """Number of content files per collection; 0 when the directory is absent."""
    counts = {}
    for kind in COLLECTION_KINDS:
        directory = Path(content_dir) / kind.directory
        counts[kind.directory] = len(list_collection_files(directory)) if directory.is_dir() else 0
    return counts
