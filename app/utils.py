"""
Utility functions for the content validator.
"""

import hashlib
import logging
from pathlib import Path
from typing import Dict, List

logger = logging.getLogger(__name__)


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def snapshot_markdown(root: Path) -> Dict[str, str]:
    """Map every Markdown file under root (relative path) to a digest of its text."""
    root = Path(root)
    if not root.is_dir():
        return {}
    digests = {}
    for path in sorted(root.rglob("*.md")):
        try:
            digests[path.relative_to(root).as_posix()] = _sha(path.read_text(encoding="utf-8", errors="replace"))
        except OSError:
            # removed between listing and reading; the next poll sees it gone
            logger.debug("could not read %s during snapshot", path)
    return digests


def changed_files(before: Dict[str, str], after: Dict[str, str]) -> List[str]:
    """Files added, removed or modified between two snapshots."""
    return sorted(k for k in before.keys() | after.keys() if before.get(k) != after.get(k))
