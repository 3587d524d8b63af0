"""
Object key derivation from local paths
"""
import re
from pathlib import Path, PurePosixPath
from typing import Optional

# S3 URL-encodes anything else inconsistently, so such names are never uploaded
_LEGAL_NAME = re.compile(r"[A-Za-z0-9\-._~/]*")

HTML_SUFFIX = ".html"


def has_legal_name(name: str) -> bool:
    """True if *name* only uses characters that are safe in an object key."""
    return _LEGAL_NAME.fullmatch(name) is not None


def derive_key(base_path, file_path) -> Optional[str]:
    """
    Map *file_path* under *base_path* to its object key.

    The key is the relative path with '/' separators and one trailing
    '.html' removed, so pages are served from extensionless URLs.
    Returns None when the file name has illegal characters.
    """
    rel = Path(file_path).relative_to(Path(base_path)).as_posix()
    if not has_legal_name(PurePosixPath(rel).name):
        return None
    if rel.endswith(HTML_SUFFIX):
        rel = rel[:-len(HTML_SUFFIX)]
    return rel
