"""
Main sync engine - decision logic and orchestration
"""
import sys
import traceback
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional
from ..core.s3_client import S3Client
from ..utils.logging import log, vlog, warn, set_verbose
from ..utils.ignore_patterns import load_ignore_patterns, is_ignored
from ..operations.inventory import fetch_remote_inventory
from ..operations.keys import derive_key
from ..operations.scanner import local_list_all
from ..operations.transfer import upload_file
from ..operations.delete import confirm_and_delete


class Decision(Enum):
    UPLOAD = "upload"
    SKIP = "skip"


@dataclass
class SyncResult:
    uploaded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)
    ignored: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    local: dict[str, float] = field(default_factory=dict)


def decide(remote: dict[str, float], key: str, local_mtime: float,
           force: bool) -> Decision:
    """
    UPLOAD when forced, when the key is missing remotely, or when the
    remote copy is strictly older than the local file; SKIP otherwise.
    """
    if force:
        return Decision.UPLOAD
    remote_mtime = remote.get(key)
    if remote_mtime is None or remote_mtime < local_mtime:
        return Decision.UPLOAD
    return Decision.SKIP


def sync_directory(client: S3Client, root: Path, *,
                   force: bool = False,
                   max_age: int = 0,
                   delete_stale: bool = False,
                   ask: Optional[Callable[[str], str]] = None) -> SyncResult:
    """
    Mirror *root* into the client's bucket. Exceptions from the store or
    from timestamp parsing propagate to the caller.
    """
    result = SyncResult()
    patterns = load_ignore_patterns(root)
    if patterns:
        log(f"[ignore] {len(patterns)} pattern(s) loaded")

    # ── 1. Remote inventory ─────────────────────────────────────────────────
    remote = fetch_remote_inventory(client)

    # ── 2. Local scan ───────────────────────────────────────────────────────
    files, result.ignored = local_list_all(root, patterns)
    log(f"[scan] {len(files)} local file(s) found")
    for rel in result.ignored:
        vlog(f"  [IGNORE] {rel}")

    # ── 3. Upload or skip, per file ─────────────────────────────────────────
    for local in files:
        key = derive_key(root, local.path)
        if key is None:
            warn(f"skipping {local.path}: illegal characters in file name")
            result.rejected.append(local.rel_path)
            continue

        # Recorded before deciding so skipped files are not considered stale.
        # A later file deriving the same key overwrites this entry.
        result.local[key] = local.mtime

        if decide(remote, key, local.mtime, force) is Decision.UPLOAD:
            upload_file(client, local, key, max_age)
            result.uploaded.append(key)
        else:
            vlog(f"  [SKIP] {key}")
            result.skipped.append(key)

    # ── 4. Stale objects ────────────────────────────────────────────────────
    if delete_stale:
        candidates = {k: v for k, v in remote.items()
                      if not is_ignored(k, patterns)}
        result.deleted = confirm_and_delete(client, candidates, result.local, ask)

    return result


def run_sync(client: S3Client, root: Path, force=False, max_age=0,
             delete_stale=False, verbose=False) -> SyncResult:
    set_verbose(verbose)

    log(f"Sync  {root}  →  s3://{client.bucket} ({client.region})")
    if force:
        log("  *** FORCE — every file will be uploaded ***")

    try:
        result = sync_directory(client, root, force=force, max_age=max_age,
                                delete_stale=delete_stale)
    except KeyboardInterrupt:
        warn("Interrupted by user.")
        sys.exit(130)
    except Exception as exc:
        warn(f"Sync failed: {exc}")
        if verbose:
            traceback.print_exc()
        sys.exit(1)

    log(f"{'─' * 48}")
    log(" SUMMARY")
    log(f"  Uploaded : {len(result.uploaded)}")
    log(f"  Skipped  : {len(result.skipped)}")
    log(f"  Rejected : {len(result.rejected)}")
    log(f"  Ignored  : {len(result.ignored)}")
    log(f"  Deleted  : {len(result.deleted)}")
    return result
