"""
Configuration settings for bucketsync
"""
import os
from pathlib import Path
from typing import Optional

import yaml

# ══════════════════════════════════════════════════════════════════════════════
#  DEFAULTS  ── overridden by YAML config, apply_profile() or CLI flags
# ══════════════════════════════════════════════════════════════════════════════

BUCKET: Optional[str] = None
REGION: Optional[str] = None
FILES_ROOT: Optional[Path] = None

# Cache-Control max-age in seconds; 0 means no Cache-Control header
MAX_AGE = 0
DELETE_STALE = False

# Named profile in ~/.aws/config, or None for the default credential chain
AWS_PROFILE: Optional[str] = None
# Custom endpoint for S3-compatible stores (MinIO, R2, ...)
ENDPOINT_URL: Optional[str] = None

# Every uploaded object is world-readable; this is not configurable.
ACL = "public-read"

IGNORE_FILE = ".bucketsyncignore"
CONFIG_FILE = ".bucketsync"

# Extension → media type entries registered on top of the system table
EXTRA_MIME_TYPES: dict[str, str] = {
    "woff2": "application/font-woff2",
}


# ══════════════════════════════════════════════════════════════════════════════
#  GLOBAL CONFIG FILE  ── $XDG_CONFIG_HOME/bucketsync/config.yaml
# ══════════════════════════════════════════════════════════════════════════════

def get_global_config_dir() -> Path:
    """Return the global config directory for bucketsync."""
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return Path(xdg) / "bucketsync"
    if os.name == "nt":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "bucketsync"
    return Path.home() / ".config" / "bucketsync"


def load_global_config() -> dict:
    """Load the global config file, or an empty dict if there is none."""
    cfg_path = get_global_config_dir() / "config.yaml"
    if not cfg_path.is_file():
        return {}
    return load_config_file(cfg_path)


# ══════════════════════════════════════════════════════════════════════════════
#  PROJECT CONFIG FILE  ── .bucketsync (searched upward)
# ══════════════════════════════════════════════════════════════════════════════

def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """
    Search upward from *start* (default: cwd) for a .bucketsync YAML file.
    Returns the Path if found, or None if no .bucketsync exists in any parent.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(path: Path) -> dict:
    """Parse a YAML config file and return its contents as a dict."""
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def get_profile(data: dict, profile_name: str = "default",
                base_defaults: Optional[dict] = None) -> dict:
    """
    Extract a named profile from a .bucketsync data dict.
    Falls back to the first profile if the named one is not found.
    Returns a flat profile dict merged over *base_defaults* and the file's
    top-level defaults.
    """
    merged = dict(base_defaults or {})
    merged.update(data.get("defaults") or {})
    profiles = data.get("profiles") or []
    if not profiles:
        return merged
    profile = next((p for p in profiles if p.get("name") == profile_name), None)
    if profile is None:
        profile = profiles[0]
    merged.update(profile)
    return merged


# ══════════════════════════════════════════════════════════════════════════════
#  APPLY PROFILE  ── mutates module-level variables
# ══════════════════════════════════════════════════════════════════════════════

def apply_profile(profile: dict):
    """
    Apply a profile dict to the module-level config variables.
    Supports keys: bucket, region, files, max_age, delete_stale,
                   aws_profile, endpoint_url,
                   mime_types (extension → media type mapping).
    """
    global BUCKET, REGION, FILES_ROOT, MAX_AGE, DELETE_STALE
    global AWS_PROFILE, ENDPOINT_URL

    if profile.get("bucket"):
        BUCKET = str(profile["bucket"])
    if profile.get("region"):
        REGION = str(profile["region"])
    if profile.get("files"):
        FILES_ROOT = Path(str(profile["files"])).expanduser()
    if "max_age" in profile:
        MAX_AGE = int(profile["max_age"] or 0)
    if "delete_stale" in profile:
        DELETE_STALE = bool(profile["delete_stale"])
    if "aws_profile" in profile:
        AWS_PROFILE = str(profile["aws_profile"]) if profile["aws_profile"] else None
    if "endpoint_url" in profile:
        ENDPOINT_URL = str(profile["endpoint_url"]) if profile["endpoint_url"] else None
    for ext, media_type in (profile.get("mime_types") or {}).items():
        EXTRA_MIME_TYPES[str(ext).lstrip(".").lower()] = str(media_type)
