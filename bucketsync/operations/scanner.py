"""
Local file scanning
"""
from pathlib import Path
from typing import NamedTuple
from ..config import IGNORE_FILE
from ..utils.ignore_patterns import is_ignored


class LocalFile(NamedTuple):
    path: Path       # path as found under the files root
    rel_path: str    # relative to the root, '/'-separated
    mtime: float


def local_list_all(root: Path, patterns: list) -> tuple[list[LocalFile], list[str]]:
    """
    Walk *root* recursively in sorted order.
    Returns (files, ignored_rel_paths); directories are never listed.
    """
    files: list[LocalFile] = []
    ignored: list[str] = []
    for p in sorted(root.rglob("*")):
        if p.is_dir():
            continue
        rel = p.relative_to(root).as_posix()
        if rel == IGNORE_FILE or is_ignored(rel, patterns):
            ignored.append(rel)
            continue
        files.append(LocalFile(p, rel, p.stat().st_mtime))
    return files, ignored
