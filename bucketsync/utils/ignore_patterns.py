"""
Ignore patterns handling (.bucketsyncignore file parsing)
"""
import re
from pathlib import Path
from ..config import IGNORE_FILE


def _compile_pattern(raw: str):
    """Compile a .bucketsyncignore pattern into a regex"""
    p = raw.strip()
    if not p or p.startswith("#"):
        return None
    anchored = p.startswith("/")
    escaped = re.escape(p.lstrip("/"))
    escaped = escaped.replace(r"\*\*", "§DS§")
    escaped = escaped.replace(r"\*", "[^/]*")
    escaped = escaped.replace(r"\?", "[^/]")
    escaped = escaped.replace("§DS§", ".*")
    if anchored:
        escaped = "^" + escaped
    else:
        escaped = r"(^|.*/)" + escaped
    try:
        return re.compile(escaped + r"(/.*)?$")
    except re.error:
        return None


def load_ignore_patterns(root: Path) -> list:
    """Load ignore patterns from the ignore file in *root*"""
    f = root / IGNORE_FILE
    if not f.exists():
        return []
    patterns = []
    for line in f.read_text(encoding="utf-8", errors="replace").splitlines():
        c = _compile_pattern(line)
        if c:
            patterns.append(c)
    return patterns


def is_ignored(rel_path: str, patterns: list) -> bool:
    """Check if a path matches any ignore pattern"""
    norm = rel_path.replace("\\", "/")
    return any(p.search(norm) for p in patterns)
